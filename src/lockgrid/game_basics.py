"""
Game basics: board representation, moves, the locking rule, scoring and text format.
Teaching notes:
- The board is a row-major tuple of cells (index = width * y + x); a cell is None or a Token.
- A Board is a frozen snapshot. advance() never mutates it; it returns the next snapshot.
- Tokens only ever go empty -> unlocked -> locked, so every line of play is finite.
- A token with more than 3 same-player orthogonal neighbours is a victory point and
  gets locked by the sweep that runs after each move.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Tuple, Union

VICTORY_NEIGHBOR_THRESHOLD = 3
PLAYER_GLYPHS = {0: 'x', 1: 'o'}
FALLBACK_GLYPH = 'h'
EMPTY_GLYPH = '.'
ROW_SEPARATOR = '/'


class IllegalMove(ValueError):
    """Raised by Board.advance for a move the position does not allow."""


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass(frozen=True)
class Token:
    player: int
    locked: bool = False

    @property
    def glyph(self) -> str:
        g = PLAYER_GLYPHS.get(self.player, FALLBACK_GLYPH)
        return g.upper() if self.locked else g


Cell = Optional[Token]


@dataclass(frozen=True)
class Place:
    coordinate: Coordinate

    def __str__(self) -> str:
        return f"place:{self.coordinate}"


@dataclass(frozen=True)
class Swap:
    first: Coordinate
    second: Coordinate

    def __str__(self) -> str:
        return f"swap:{self.first}:{self.second}"


Move = Union[Place, Swap]


@dataclass(frozen=True)
class NotOver:
    def __str__(self) -> str:
        return "not_over"


@dataclass(frozen=True)
class Draw:
    def __str__(self) -> str:
        return "draw"


@dataclass(frozen=True)
class Winner:
    player: int

    def __str__(self) -> str:
        return f"winner:{self.player}"


WinState = Union[NotOver, Draw, Winner]


@dataclass(frozen=True)
class Board:
    """Current state of the game board, plus advance() to play a move on it."""

    size: Tuple[int, int]
    cells: Tuple[Cell, ...]
    current_turn: int = 0

    def __post_init__(self) -> None:
        width, height = self.size
        if len(self.cells) != width * height:
            raise ValueError(
                f"expected {width * height} cells for a {width}x{height} board, got {len(self.cells)}"
            )

    @classmethod
    def new(cls, size: Tuple[int, int]) -> "Board":
        width, height = size
        return cls(size=(width, height), cells=(None,) * (width * height), current_turn=0)

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    # -- addressing -------------------------------------------------------

    def coordinates(self) -> Iterator[Coordinate]:
        """Every coordinate of the grid in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coordinate(x, y)

    def on_grid(self, c: Coordinate) -> bool:
        return 0 <= c.x < self.width and 0 <= c.y < self.height

    def cell_index(self, c: Coordinate) -> int:
        return self.width * c.y + c.x

    def get_cell(self, c: Coordinate) -> Cell:
        # Off-grid coordinates read as empty; see neighbor_coordinates.
        if not self.on_grid(c):
            return None
        return self.cells[self.cell_index(c)]

    def _is_unlocked(self, c: Coordinate) -> bool:
        token = self.get_cell(c)
        return token is not None and not token.locked

    def occupied_coordinates(self) -> List[Coordinate]:
        return [c for c in self.coordinates() if self.get_cell(c) is not None]

    def neighbor_coordinates(self, c: Coordinate) -> List[Coordinate]:
        """Orthogonal neighbours in left, right, up, down order.

        The downward neighbour is bounded by the board width, not its height.
        On non-square boards this drops or adds a row of neighbours; an added
        coordinate past the last row is off the grid and counts as empty.
        """
        neighbors: List[Coordinate] = []
        if c.x > 0:
            neighbors.append(Coordinate(c.x - 1, c.y))
        if c.x < self.width - 1:
            neighbors.append(Coordinate(c.x + 1, c.y))
        if c.y > 0:
            neighbors.append(Coordinate(c.x, c.y - 1))
        if c.y < self.width - 1:
            neighbors.append(Coordinate(c.x, c.y + 1))
        return neighbors

    # -- rules ------------------------------------------------------------

    def get_legal_moves(self) -> List[Move]:
        """Legal moves in row-major order.

        Each unlocked token lists a swap with every other unlocked token, so
        Swap(a, b) and Swap(b, a) both appear. The solver returns the first
        winning move it meets, which makes this order significant.
        """
        unlocked = [c for c in self.coordinates() if self._is_unlocked(c)]
        moves: List[Move] = []
        for c in self.coordinates():
            token = self.get_cell(c)
            if token is None:
                moves.append(Place(c))
            elif not token.locked:
                moves.extend(Swap(c, other) for other in unlocked if other != c)
        return moves

    def advance(self, move: Move) -> "Board":
        """Play `move` for the side to move and return the next snapshot."""
        cells = list(self.cells)
        if isinstance(move, Place):
            c = self._checked(move.coordinate)
            if cells[self.cell_index(c)] is not None:
                raise IllegalMove(f"cannot place on occupied cell {c}")
            cells[self.cell_index(c)] = Token(player=self.current_turn)
        elif isinstance(move, Swap):
            i1 = self.cell_index(self._checked(move.first))
            i2 = self.cell_index(self._checked(move.second))
            if cells[i1] is None or cells[i2] is None:
                raise IllegalMove(f"cannot swap {move.first} and {move.second}: both cells must be occupied")
            t1, t2 = cells[i1], cells[i2]
            cells[i1] = replace(t2, locked=True)
            cells[i2] = replace(t1, locked=True)
        else:
            raise TypeError(f"not a move: {move!r}")

        moved = replace(self, cells=tuple(cells))
        return replace(moved._lock_victory_points(), current_turn=(self.current_turn + 1) % 2)

    def _checked(self, c: Coordinate) -> Coordinate:
        if not self.on_grid(c):
            raise IllegalMove(f"coordinate {c} is off the {self.width}x{self.height} board")
        return c

    def _lock_victory_points(self) -> "Board":
        # All locks are decided on this snapshot before any is applied.
        to_lock = [
            self.cell_index(c) for c in self.coordinates()
            if self._is_unlocked(c) and self.is_victory_point(c)
        ]
        if not to_lock:
            return self
        cells = list(self.cells)
        for i in to_lock:
            cells[i] = replace(cells[i], locked=True)
        return replace(self, cells=tuple(cells))

    def is_victory_point(self, c: Coordinate) -> bool:
        token = self.get_cell(c)
        if token is None:
            return False
        same = 0
        for n in self.neighbor_coordinates(c):
            neighbor = self.get_cell(n)
            if neighbor is not None and neighbor.player == token.player:
                same += 1
        return same > VICTORY_NEIGHBOR_THRESHOLD

    def count_victory_points(self) -> List[int]:
        points = [0, 0]
        for c in self.coordinates():
            token = self.get_cell(c)
            if token is not None and token.player in (0, 1) and self.is_victory_point(c):
                points[token.player] += 1
        return points

    def check_win_condition(self) -> WinState:
        if self.get_legal_moves():
            return NotOver()
        p0, p1 = self.count_victory_points()
        if p0 == p1:
            return Draw()
        return Winner(0) if p0 > p1 else Winner(1)

    def __str__(self) -> str:
        return render_board(self)


# -- text format --------------------------------------------------------------


def row_strings(board: Board) -> List[str]:
    rows = []
    for y in range(board.height):
        row = []
        for x in range(board.width):
            token = board.get_cell(Coordinate(x, y))
            row.append(EMPTY_GLYPH if token is None else token.glyph)
        rows.append(''.join(row))
    return rows


def render_board(board: Board) -> str:
    lines = [f" - Board: (current turn: {board.current_turn})"]
    lines.extend(row_strings(board))
    return '\n'.join(lines) + '\n'


def serialize_board(board: Board) -> str:
    return ROW_SEPARATOR.join(row_strings(board))


def _parse_glyph(ch: str) -> Cell:
    if ch == EMPTY_GLYPH:
        return None
    for player, g in PLAYER_GLYPHS.items():
        if ch == g:
            return Token(player)
        if ch == g.upper():
            return Token(player, locked=True)
    raise ValueError(f"unknown cell glyph {ch!r}")


def deserialize_board(text: str, current_turn: int = 0) -> Board:
    """Parse rows such as "xo./.X./..." (or newline separated) into a Board.

    The position is taken as written: no locking sweep is applied.
    """
    if current_turn not in (0, 1):
        raise ValueError(f"current_turn must be 0 or 1, got {current_turn}")
    raw = text.strip().replace('\n', ROW_SEPARATOR)
    rows = [r.strip() for r in raw.split(ROW_SEPARATOR) if r.strip()]
    if not rows:
        raise ValueError("empty board string")
    width = len(rows[0])
    if any(len(r) != width for r in rows):
        raise ValueError("all board rows must have the same length")
    cells = tuple(_parse_glyph(ch) for r in rows for ch in r)
    return Board(size=(width, len(rows)), cells=cells, current_turn=current_turn)


def _parse_coordinate(text: str) -> Coordinate:
    parts = text.split(',')
    if len(parts) != 2:
        raise ValueError(f"invalid coordinate {text!r}, expected x,y")
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"invalid coordinate {text!r}, expected x,y") from None
    if x < 0 or y < 0:
        raise ValueError(f"coordinates must be non-negative: {text!r}")
    return Coordinate(x, y)


def parse_move(text: str) -> Move:
    """Inverse of str(move): "place:x,y" or "swap:x1,y1:x2,y2"."""
    kind, _, rest = text.strip().partition(':')
    kind = kind.lower()
    if kind == 'place':
        return Place(_parse_coordinate(rest))
    if kind == 'swap':
        first, sep, second = rest.partition(':')
        if not sep:
            raise ValueError(f"invalid swap {text!r}, expected swap:x1,y1:x2,y2")
        return Swap(_parse_coordinate(first), _parse_coordinate(second))
    raise ValueError(f"unknown move kind {kind!r}")
