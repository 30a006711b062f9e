"""
Game drivers: the solver playing a whole game, and seeded random playouts.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .game_basics import Board, Move, NotOver, WinState
from .solver import advance_generated, find_best_move


@dataclass
class GameRecord:
    boards: List[Board]
    moves: List[Move] = field(default_factory=list)
    outcome: WinState = field(default_factory=NotOver)

    @property
    def final_board(self) -> Board:
        return self.boards[-1]

    @property
    def finished(self) -> bool:
        return self.outcome != NotOver()


def play_solver_game(board: Board, player: int = 0, max_plies: Optional[int] = None) -> GameRecord:
    """Let the solver choose every move, always searching for a win for `player`.

    Stops when the game is over, when the solver finds no winning line
    (outcome stays NotOver), or after `max_plies` moves.
    """
    record = GameRecord(boards=[board])
    while True:
        state = board.check_win_condition()
        if state != NotOver():
            record.outcome = state
            logging.info("game over after %d plies: %s", len(record.moves), state)
            return record
        if max_plies is not None and len(record.moves) >= max_plies:
            logging.info("stopping after max_plies=%d", max_plies)
            return record
        move = find_best_move(board, player)
        if move is None:
            logging.info("no winning line for player %d after %d plies", player, len(record.moves))
            return record
        board = advance_generated(board, move)
        record.moves.append(move)
        record.boards.append(board)
        logging.debug("ply %d: %s\n%s", len(record.moves), move, board)


def random_playout(board: Board, seed: int = 42, max_plies: Optional[int] = None) -> GameRecord:
    """Play uniformly random legal moves until the game ends (or max_plies)."""
    rng = np.random.default_rng(seed)
    record = GameRecord(boards=[board])
    while max_plies is None or len(record.moves) < max_plies:
        moves = board.get_legal_moves()
        if not moves:
            break
        move = moves[int(rng.integers(len(moves)))]
        board = advance_generated(board, move)
        record.moves.append(move)
        record.boards.append(board)
    record.outcome = board.check_win_condition()
    return record
