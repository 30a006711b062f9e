from lockgrid.game_basics import Board, Coordinate, Draw, NotOver, Place, Winner, deserialize_board, serialize_board
from lockgrid.trajectories import play_solver_game, random_playout

TWO_MOVE_WIN = "OXO/X.X/OX."


def test_solver_game_plays_to_a_win():
    rec = play_solver_game(deserialize_board(TWO_MOVE_WIN), player=0)
    assert rec.moves == [Place(Coordinate(1, 1)), Place(Coordinate(2, 2))]
    assert rec.outcome == Winner(0)
    assert rec.finished
    assert len(rec.boards) == 3
    # the second move is made by player 1, still chosen for player 0
    assert serialize_board(rec.final_board) == "OXO/XXX/OXo"
    assert rec.final_board.current_turn == 0


def test_solver_game_stops_without_winning_line():
    start = deserialize_board(TWO_MOVE_WIN)
    rec = play_solver_game(start, player=1)
    assert rec.moves == []
    assert rec.outcome == NotOver()
    assert not rec.finished
    assert rec.final_board == start


def test_solver_game_respects_max_plies():
    rec = play_solver_game(deserialize_board(TWO_MOVE_WIN), player=0, max_plies=1)
    assert rec.moves == [Place(Coordinate(1, 1))]
    assert rec.outcome == NotOver()


def test_solver_game_on_finished_board():
    rec = play_solver_game(deserialize_board("XO/OX"))
    assert rec.moves == []
    assert rec.outcome == Draw()


def test_random_playout_is_reproducible():
    a = random_playout(Board.new((3, 3)), seed=7)
    b = random_playout(Board.new((3, 3)), seed=7)
    assert a.moves == b.moves
    assert a.outcome == b.outcome
    for board, move, nxt in zip(a.boards, a.moves, a.boards[1:]):
        assert board.advance(move) == nxt


def test_random_playout_max_plies():
    rec = random_playout(Board.new((3, 3)), seed=1, max_plies=2)
    assert len(rec.moves) == 2
    assert rec.outcome == NotOver()
