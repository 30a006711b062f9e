"""
Descriptive board features: ownership grids, token and lock counts, connectivity.

These describe a position; they do not rank moves.
"""
from __future__ import annotations

from typing import Any, Dict, List

import numpy as np

from .game_basics import Board, Place, Swap

PLAYERS = (0, 1)


def ownership_grid(board: Board) -> np.ndarray:
    """(height, width) int array: -1 for empty cells, otherwise the owning player."""
    grid = np.full((board.height, board.width), -1, dtype=np.int8)
    for c in board.occupied_coordinates():
        grid[c.y, c.x] = board.get_cell(c).player
    return grid


def locked_grid(board: Board) -> np.ndarray:
    grid = np.zeros((board.height, board.width), dtype=bool)
    for c in board.occupied_coordinates():
        grid[c.y, c.x] = board.get_cell(c).locked
    return grid


def largest_group(owners: np.ndarray, player: int) -> int:
    """Size of the largest orthogonally connected group of `player` tokens."""
    height, width = owners.shape
    visited = np.zeros_like(owners, dtype=bool)
    best = 0
    for y in range(height):
        for x in range(width):
            if owners[y, x] != player or visited[y, x]:
                continue
            size = 0
            queue = [(y, x)]
            visited[y, x] = True
            while queue:
                cy, cx = queue.pop()
                size += 1
                for ny, nx in ((cy - 1, cx), (cy + 1, cx), (cy, cx - 1), (cy, cx + 1)):
                    if 0 <= ny < height and 0 <= nx < width and not visited[ny, nx] and owners[ny, nx] == player:
                        visited[ny, nx] = True
                        queue.append((ny, nx))
            best = max(best, size)
    return best


def calculate_game_phase(board: Board) -> str:
    total = board.width * board.height
    filled = len(board.occupied_coordinates())
    if total == 0 or filled == total:
        return 'endgame'
    ratio = filled / total
    if ratio <= 1 / 3:
        return 'opening'
    elif ratio <= 2 / 3:
        return 'midgame'
    else:
        return 'endgame'


def count_moves_by_kind(board: Board) -> Dict[str, int]:
    moves = board.get_legal_moves()
    return {
        'legal_places': sum(1 for m in moves if isinstance(m, Place)),
        'legal_swaps': sum(1 for m in moves if isinstance(m, Swap)),
    }


def extract_board_features(board: Board) -> Dict[str, Any]:
    owners = ownership_grid(board)
    locked = locked_grid(board)
    points: List[int] = board.count_victory_points()
    total = owners.size
    feats: Dict[str, Any] = {
        'width': board.width,
        'height': board.height,
        'current_turn': board.current_turn,
        'empty_cells': int(np.count_nonzero(owners == -1)),
        'fill_ratio': float(np.count_nonzero(owners != -1) / total) if total else 0.0,
        'game_phase': calculate_game_phase(board),
        'win_state': str(board.check_win_condition()),
    }
    for p in PLAYERS:
        mine = owners == p
        feats[f'p{p}_tokens'] = int(np.count_nonzero(mine))
        feats[f'p{p}_locked'] = int(np.count_nonzero(mine & locked))
        feats[f'p{p}_victory_points'] = points[p]
        feats[f'p{p}_largest_group'] = largest_group(owners, p)
    feats.update(count_moves_by_kind(board))
    return feats
