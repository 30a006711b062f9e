"""
Exhaustive win search from a fixed player's point of view.
Search policy:
- Moves are tried in get_legal_moves() order; the first one that leads to a win is returned.
- A move qualifies if it wins on the spot, or if any continuation from the resulting
  board (searched as if `player` kept choosing every move) still returns a move.
- This is not minimax: the opponent's interests and the board's own turn are ignored.
- No memoization and no depth limit; the search ends because every move fills a cell
  or locks tokens.
"""
from typing import Optional

from .game_basics import Board, IllegalMove, Move, NotOver, Winner


def advance_generated(board: Board, move: Move) -> Board:
    """Advance with a move taken from board.get_legal_moves().

    Such a move can never be illegal; if it is, the generator and the rules
    disagree and the failure is not something a caller can recover from.
    """
    try:
        return board.advance(move)
    except IllegalMove as exc:
        raise RuntimeError(f"game logic failed: generated move {move} rejected") from exc


def find_best_move(board: Board, player: int) -> Optional[Move]:
    if board.check_win_condition() != NotOver():
        return None

    legal_moves = board.get_legal_moves()
    if not legal_moves:
        return None

    for move in legal_moves:
        child = advance_generated(board, move)
        if child.check_win_condition() == Winner(player):
            return move
        if find_best_move(child, player) is not None:
            return move
    return None
