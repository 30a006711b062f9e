from typing import List, Tuple

from hypothesis import given, settings, strategies as st

from lockgrid.game_basics import Board, NotOver, Swap, render_board
from lockgrid.trajectories import random_playout

SIZES = [(2, 2), (3, 3), (3, 2), (2, 3), (4, 4)]


def _random_line(size: Tuple[int, int], choices: List[int]):
    """Yield (board, move, child) along a line picked by `choices`."""
    board = Board.new(size)
    for ch in choices:
        moves = board.get_legal_moves()
        if not moves:
            return
        move = moves[ch % len(moves)]
        child = board.advance(move)
        yield board, move, child
        board = child


@settings(max_examples=60, deadline=None)
@given(st.sampled_from(SIZES), st.lists(st.integers(min_value=0, max_value=10_000), max_size=24))
def test_transition_invariants(size, choices):
    for board, move, child in _random_line(size, choices):
        assert len(child.cells) == board.width * board.height
        assert child.current_turn == (board.current_turn + 1) % 2
        for c in board.coordinates():
            before = board.get_cell(c)
            after = child.get_cell(c)
            if before is not None:
                assert after is not None
                if before.locked:
                    assert after == before
        if isinstance(move, Swap):
            assert child.get_cell(move.first).locked
            assert child.get_cell(move.second).locked


@settings(max_examples=25, deadline=None)
@given(st.sampled_from(SIZES), st.lists(st.integers(min_value=0, max_value=10_000), max_size=16))
def test_every_generated_move_applies_without_mutating(size, choices):
    for board, _, _ in _random_line(size, choices):
        rendered = render_board(board)
        moves = board.get_legal_moves()
        for m in moves:
            board.advance(m)
        assert render_board(board) == rendered
        assert board.get_legal_moves() == moves


@settings(max_examples=60, deadline=None)
@given(st.sampled_from(SIZES), st.lists(st.integers(min_value=0, max_value=10_000), max_size=40))
def test_not_over_iff_moves_remain(size, choices):
    for _, _, child in _random_line(size, choices):
        has_moves = len(child.get_legal_moves()) > 0
        assert (child.check_win_condition() == NotOver()) == has_moves


@settings(max_examples=30, deadline=None)
@given(st.sampled_from(SIZES), st.integers(min_value=0, max_value=2**32 - 1))
def test_random_playout_reaches_terminal_position(size, seed):
    rec = random_playout(Board.new(size), seed=seed)
    assert rec.final_board.get_legal_moves() == []
    assert rec.finished
    assert len(rec.boards) == len(rec.moves) + 1
