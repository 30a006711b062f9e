from lockgrid.game_basics import Coordinate, Place, deserialize_board
from lockgrid.solver import find_best_move
from lockgrid.tactics import immediate_winning_moves, victory_point_cells


def test_immediate_winning_moves():
    b = deserialize_board("OXO/XxX/OX.")
    assert immediate_winning_moves(b, 0) == [Place(Coordinate(2, 2))]
    assert immediate_winning_moves(b, 1) == []


def test_no_immediate_win_when_solver_needs_two_moves():
    b = deserialize_board("OXO/X.X/OX.")
    assert immediate_winning_moves(b, 0) == []
    assert find_best_move(b, 0) is not None


def test_victory_point_cells():
    b = deserialize_board("OXO/XXX/OXx")
    assert victory_point_cells(b, 0) == [Coordinate(1, 1)]
    assert victory_point_cells(b, 1) == []


def test_victory_point_cells_include_unlocked_tokens():
    b = deserialize_board(".x./xxx/.x.")
    assert victory_point_cells(b, 0) == [Coordinate(1, 1)]
