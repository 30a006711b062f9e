"""lockgrid package.

A two-player grid game where swapped or surrounded tokens lock, plus an
exhaustive win solver, descriptive features, game drivers, and a CLI.

Convenience imports are exposed for common workflows.
"""

from .game_basics import (
    Board,
    Coordinate,
    Draw,
    IllegalMove,
    NotOver,
    Place,
    Swap,
    Token,
    Winner,
    deserialize_board,
    parse_move,
    render_board,
    serialize_board,
)
from .solver import find_best_move
from .trajectories import GameRecord, play_solver_game, random_playout

__all__ = [
    "Board",
    "Coordinate",
    "Token",
    "Place",
    "Swap",
    "NotOver",
    "Draw",
    "Winner",
    "IllegalMove",
    "deserialize_board",
    "serialize_board",
    "render_board",
    "parse_move",
    "find_best_move",
    "GameRecord",
    "play_solver_game",
    "random_playout",
]
