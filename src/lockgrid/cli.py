from __future__ import annotations

import argparse
import json
import logging
from typing import Optional

from .features import extract_board_features
from .game_basics import (
    Board,
    Draw,
    IllegalMove,
    Winner,
    deserialize_board,
    parse_move,
)
from .settings import default_board_size, default_solver_player, parse_size
from .solver import find_best_move
from .tactics import immediate_winning_moves, victory_point_cells
from .trajectories import play_solver_game


BOARD_HELP = 'Board rows separated by "/", e.g. "xo./.X./..." (.=empty, x/o=unlocked, X/O=locked)'


def _add_board_args(p: argparse.ArgumentParser, required: bool = True) -> None:
    p.add_argument("--board", required=required, help=BOARD_HELP)
    p.add_argument("--turn", type=int, choices=[0, 1], default=0, help="Player to move (default: 0)")


def _add_player_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--player",
        type=int,
        choices=[0, 1],
        default=None,
        help="Player the solver searches a win for (default: $LOCKGRID_SOLVER_PLAYER or 0)",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="lockgrid", description="Locking grid game and win solver")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_play = sub.add_parser("play", help="Let the solver play a game from an empty or given board")
    p_play.add_argument(
        "--size",
        default=None,
        help="Board size WxH for a fresh board (default: $LOCKGRID_BOARD_SIZE or 5x5)",
    )
    _add_board_args(p_play, required=False)
    _add_player_arg(p_play)
    p_play.add_argument("--max-plies", type=int, default=None, help="Stop after this many moves")

    p_moves = sub.add_parser("moves", help="List legal moves in enumeration order")
    _add_board_args(p_moves)

    p_adv = sub.add_parser("advance", help="Apply one move and print the resulting board")
    _add_board_args(p_adv)
    p_adv.add_argument("--move", required=True, help='Move, e.g. "place:0,0" or "swap:0,0:1,0"')

    p_sol = sub.add_parser("solve", help="Find the first move that leads to a win for a player")
    _add_board_args(p_sol)
    _add_player_arg(p_sol)

    p_score = sub.add_parser("score", help="Show victory points and the win state")
    _add_board_args(p_score)

    p_tac = sub.add_parser("tactics", help="List immediate wins and scoring cells for a player")
    _add_board_args(p_tac)
    _add_player_arg(p_tac)

    p_feat = sub.add_parser("features", help="Print board features as JSON")
    _add_board_args(p_feat)

    return p


def _load_board(ns: argparse.Namespace) -> Optional[Board]:
    try:
        return deserialize_board(ns.board, current_turn=ns.turn)
    except ValueError as e:
        logging.error("Invalid board string: %s", e)
        return None


def _outcome_line(board: Board) -> str:
    state = board.check_win_condition()
    if state == Draw():
        return "Game ended in a draw!"
    if isinstance(state, Winner):
        return f"Game over, player {state.player} won!"
    return "Game is not over."


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("lockgrid"))
        except Exception:
            print("unknown")
        return 0

    player = None
    if hasattr(ns, "player"):
        try:
            player = ns.player if ns.player is not None else default_solver_player()
        except ValueError as e:
            logging.error("%s", e)
            return 2

    if ns.cmd == "play":
        if ns.board:
            board = _load_board(ns)
            if board is None:
                return 2
        else:
            try:
                size = parse_size(ns.size) if ns.size else default_board_size()
            except ValueError as e:
                logging.error("%s", e)
                return 2
            board = Board.new(size)
        logging.info("solver plays for player %d on a %dx%d board", player, board.width, board.height)
        record = play_solver_game(board, player=player, max_plies=ns.max_plies)
        for b in record.boards:
            print(b)
        if record.finished:
            print(_outcome_line(record.final_board))
        elif ns.max_plies is not None and len(record.moves) >= ns.max_plies:
            print(f"Stopped after {len(record.moves)} moves.")
        else:
            print(f"No winning line found for player {player}.")
        return 0

    if ns.cmd is None:
        parser.print_help()
        return 0

    board = _load_board(ns)
    if board is None:
        return 2

    if ns.cmd == "moves":
        for m in board.get_legal_moves():
            print(m)
        return 0

    if ns.cmd == "advance":
        try:
            nxt = board.advance(parse_move(ns.move))
        except IllegalMove as e:
            logging.error("Illegal move: %s", e)
            return 2
        except ValueError as e:
            logging.error("Invalid move string: %s", e)
            return 2
        print(nxt, end="")
        return 0

    if ns.cmd == "solve":
        move = find_best_move(board, player)
        logging.info("player=%d best_move=%s", player, move)
        print(move if move is not None else "none")
        return 0

    if ns.cmd == "score":
        p0, p1 = board.count_victory_points()
        print(f"victory_points=[{p0}, {p1}] state={board.check_win_condition()}")
        return 0

    if ns.cmd == "tactics":
        wins = immediate_winning_moves(board, player)
        cells = victory_point_cells(board, player)
        print(f"player={player} wins={[str(m) for m in wins]} scoring={[str(c) for c in cells]}")
        return 0

    if ns.cmd == "features":
        print(json.dumps(extract_board_features(board), sort_keys=True))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
