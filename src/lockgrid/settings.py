"""Environment-first defaults for the CLI and the driver.

Order: explicit CLI flag -> LOCKGRID_* environment variable -> built-in default.
"""

from __future__ import annotations

import os
from typing import Tuple

DEFAULT_BOARD_SIZE = (5, 5)
DEFAULT_SOLVER_PLAYER = 0


def parse_size(text: str) -> Tuple[int, int]:
    """Parse "WxH" (e.g. "5x5") into (width, height)."""
    parts = text.lower().strip().split('x')
    if len(parts) != 2:
        raise ValueError(f"invalid board size {text!r}, expected WxH")
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"invalid board size {text!r}, expected WxH") from None
    if width < 0 or height < 0:
        raise ValueError(f"board dimensions must be non-negative: {text!r}")
    return width, height


def default_board_size() -> Tuple[int, int]:
    env = os.getenv("LOCKGRID_BOARD_SIZE")
    return parse_size(env) if env else DEFAULT_BOARD_SIZE


def default_solver_player() -> int:
    env = os.getenv("LOCKGRID_SOLVER_PLAYER")
    if not env:
        return DEFAULT_SOLVER_PLAYER
    player = int(env)
    if player not in (0, 1):
        raise ValueError(f"LOCKGRID_SOLVER_PLAYER must be 0 or 1, got {env!r}")
    return player
