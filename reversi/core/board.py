"""Reversi board: move legality, flipping and piece counts.

The functions in this module work on a plain grid (a list of 8 rows of 8
``Piece`` values) owned by the caller, so the search can explore copies
without building board objects. ``ReversiBoard`` wraps one grid with move
history for callers that want a stateful board.
"""

from enum import IntEnum
from typing import List, NamedTuple, Optional, Tuple

BOARD_SIZE = 8

# Returned by count_flips_for_direction when no line can be completed.
INVALID_LINE = -1


class Piece(IntEnum):
    EMPTY = 0
    P1 = 1
    P2 = 2


Grid = List[List[Piece]]


class Position(NamedTuple):
    row: int
    col: int

    def __str__(self) -> str:
        return f"{chr(ord('A') + self.col)}{self.row + 1}"


DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

ALL_POSITIONS: Tuple[Position, ...] = tuple(
    Position(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
)


def opponent(piece: Piece) -> Piece:
    if piece == Piece.P1:
        return Piece.P2
    if piece == Piece.P2:
        return Piece.P1
    raise ValueError("EMPTY has no opponent")


def new_grid() -> Grid:
    """Return the starting configuration."""
    grid = [[Piece.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    grid[3][4] = Piece.P1
    grid[4][3] = Piece.P1
    grid[3][3] = Piece.P2
    grid[4][4] = Piece.P2
    return grid


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


# --- Contract checks ---

def _check_grid(grid: Grid) -> None:
    if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
        raise ValueError("grid must be 8x8")


def _check_player(piece: Piece) -> None:
    if piece not in (Piece.P1, Piece.P2):
        raise ValueError(f"mover must be P1 or P2, got {piece!r}")


def _check_position(position) -> None:
    row, col = position
    if not (isinstance(row, int) and isinstance(col, int)):
        raise ValueError(f"position must hold integers: {tuple(position)}")
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"position out of range: {tuple(position)}")


def _check(grid: Grid, mover: Piece, position=None) -> None:
    _check_grid(grid)
    _check_player(mover)
    if position is not None:
        _check_position(position)


# --- Move counting ---

def _walk(grid: Grid, mover: Piece, row: int, col: int, dr: int, dc: int) -> int:
    row += dr
    col += dc
    flips = 0
    while 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
        cell = grid[row][col]
        if cell == Piece.EMPTY:
            return INVALID_LINE
        if cell == mover:
            return flips
        flips += 1
        row += dr
        col += dc
    return INVALID_LINE


def _count_move(grid: Grid, mover: Piece, row: int, col: int) -> int:
    if grid[row][col] != Piece.EMPTY:
        return 0
    total = 0
    for dr, dc in DIRECTIONS:
        flips = _walk(grid, mover, row, col, dr, dc)
        if flips > 0:
            total += flips
    return total


def count_flips_for_direction(grid: Grid, mover: Piece, position, direction) -> int:
    """
    Count opponent discs ``mover`` would flip along one direction.

    Returns INVALID_LINE if the walk leaves the board or reaches an empty cell
    before a ``mover`` disc, 0 if the adjacent cell is already ``mover``'s.
    """
    _check(grid, mover, position)
    dr, dc = direction
    if (dr, dc) not in DIRECTIONS:
        raise ValueError(f"not a direction: {direction}")
    return _walk(grid, mover, position[0], position[1], dr, dc)


def count_move(grid: Grid, mover: Piece, position) -> int:
    """Total discs flipped by playing ``position``; 0 means illegal."""
    _check(grid, mover, position)
    return _count_move(grid, mover, position[0], position[1])


def is_legal(grid: Grid, mover: Piece, position) -> bool:
    return count_move(grid, mover, position) > 0


def apply_move(grid: Grid, mover: Piece, position) -> int:
    """
    Place ``mover`` on ``position`` and flip every completed line in place.

    Returns the number of discs flipped. An occupied target is left alone and
    0 is returned; callers are expected to check legality first.
    """
    _check(grid, mover, position)
    row, col = position
    if grid[row][col] != Piece.EMPTY:
        return 0
    grid[row][col] = mover
    total = 0
    for dr, dc in DIRECTIONS:
        flips = _walk(grid, mover, row, col, dr, dc)
        if flips <= 0:
            continue
        r, c = row + dr, col + dc
        for _ in range(flips):
            grid[r][c] = mover
            r += dr
            c += dc
        total += flips
    return total


# --- Whole-board queries ---

def legal_positions(grid: Grid, mover: Piece) -> List[Position]:
    _check(grid, mover)
    return [p for p in ALL_POSITIONS if _count_move(grid, mover, p.row, p.col) > 0]


def legal_count(grid: Grid, mover: Piece) -> int:
    _check(grid, mover)
    return sum(1 for p in ALL_POSITIONS if _count_move(grid, mover, p.row, p.col) > 0)


def can_move(grid: Grid, mover: Piece) -> bool:
    _check(grid, mover)
    return any(_count_move(grid, mover, p.row, p.col) > 0 for p in ALL_POSITIONS)


def game_over(grid: Grid) -> bool:
    """True when neither side has a legal move (the board need not be full)."""
    return not can_move(grid, Piece.P1) and not can_move(grid, Piece.P2)


def piece_count(grid: Grid, piece: Piece) -> int:
    _check_grid(grid)
    return sum(row.count(piece) for row in grid)


def winner(grid: Grid) -> Optional[Piece]:
    """The side with strictly more discs, or None on a tie."""
    p1 = piece_count(grid, Piece.P1)
    p2 = piece_count(grid, Piece.P2)
    if p1 > p2:
        return Piece.P1
    if p2 > p1:
        return Piece.P2
    return None


class ReversiBoard:
    def __init__(self, grid: Optional[Grid] = None):
        """Initialize from a grid or the standard starting position."""
        self._grid = new_grid()
        self.move_history: List[Tuple[Piece, Position]] = []
        if grid is not None:
            self.set_grid(grid)

    def reset(self):
        """Reset to the initial position."""
        self._grid = new_grid()
        self.move_history.clear()

    @property
    def grid(self) -> Grid:
        """A copy of the underlying grid."""
        return copy_grid(self._grid)

    def set_grid(self, grid: Grid):
        _check_grid(grid)
        self._grid = [[Piece(cell) for cell in row] for row in grid]

    def is_legal(self, mover: Piece, position) -> bool:
        return is_legal(self._grid, mover, position)

    def play(self, mover: Piece, position) -> int:
        """Apply a move and record it. Returns the number of discs flipped."""
        _check_position(position)
        if self._grid[position[0]][position[1]] != Piece.EMPTY:
            raise ValueError(f"cell already occupied: {Position(*position)}")
        flipped = apply_move(self._grid, mover, position)
        self.move_history.append((mover, Position(*position)))
        return flipped

    def legal_positions(self, mover: Piece) -> List[Position]:
        return legal_positions(self._grid, mover)

    def legal_count(self, mover: Piece) -> int:
        return legal_count(self._grid, mover)

    def can_move(self, mover: Piece) -> bool:
        return can_move(self._grid, mover)

    def game_over(self) -> bool:
        return game_over(self._grid)

    def piece_count(self, piece: Piece) -> int:
        return piece_count(self._grid, piece)

    def empty_count(self) -> int:
        return piece_count(self._grid, Piece.EMPTY)

    def winner(self) -> Optional[Piece]:
        return winner(self._grid)
