"""
Tactics and simple motifs: immediate wins and cells that currently score.
Teaching notes:
- An immediate win is a move after which no legal move is left and `player` leads on points.
- Scoring cells are the same test the locking sweep uses, applied to locked tokens too.
"""
from typing import List

from .game_basics import Board, Coordinate, Move, Winner
from .solver import advance_generated


def immediate_winning_moves(board: Board, player: int) -> List[Move]:
    wins: List[Move] = []
    for move in board.get_legal_moves():
        if advance_generated(board, move).check_win_condition() == Winner(player):
            wins.append(move)
    return wins


def victory_point_cells(board: Board, player: int) -> List[Coordinate]:
    cells: List[Coordinate] = []
    for c in board.occupied_coordinates():
        token = board.get_cell(c)
        if token is not None and token.player == player and board.is_victory_point(c):
            cells.append(c)
    return cells
