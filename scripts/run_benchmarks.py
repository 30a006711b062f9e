#!/usr/bin/env python3
from __future__ import annotations

import logging
import math
import statistics as stats
import time
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from lockgrid.game_basics import Board, deserialize_board
from lockgrid.solver import find_best_move
from lockgrid.trajectories import random_playout


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 10
    playout_seeds: int = 200
    positions: Dict[str, str] = field(default_factory=lambda: {
        "one_move_win": "OXO/XxX/OX.",
        "two_move_win": "OXO/X.X/OX.",
        "no_win_for_1": "OXO/X.X/OX.",
        "open_corner": "xX./XxX/.X.",
    })


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    cfg = Config()
    for name, text in cfg.positions.items():
        board = deserialize_board(text)
        player = 1 if name == "no_win_for_1" else 0
        times: List[float] = []
        move = None
        for _ in range(cfg.repeats):
            t0 = time.perf_counter()
            move = find_best_move(board, player)
            times.append(time.perf_counter() - t0)
        m, h = ci95(times)
        logging.info("%s: player=%d move=%s mean=%.5fs ± %.5fs (95%% CI)", name, player, move, m, h)

    t0 = time.perf_counter()
    plies = [len(random_playout(Board.new((4, 4)), seed=s).moves) for s in range(cfg.playout_seeds)]
    elapsed = time.perf_counter() - t0
    logging.info(
        "random playouts 4x4: n=%d mean_plies=%.2f total=%.3fs",
        cfg.playout_seeds,
        stats.fmean(plies),
        elapsed,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
