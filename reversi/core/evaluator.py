"""Static evaluator for Reversi positions."""

from typing import List, Optional

from reversi.config import CONFIG, EvalConfig
from reversi.core.board import (
    BOARD_SIZE,
    Grid,
    Piece,
    game_over,
    opponent,
    piece_count,
    winner,
)

# Terminal scores. Every heuristic score lies strictly between DRAW_SCORE and
# WIN_SCORE, and LOSS_SCORE + margin stays below DRAW_SCORE.
WIN_SCORE = 500000
LOSS_SCORE = -500000
DRAW_SCORE = -250000


class Evaluator:
    def __init__(self, config: Optional[EvalConfig] = None):
        self.cfg = config or CONFIG.eval
        quadrant = self.cfg.weights
        if len(quadrant) != 4 or any(len(row) != 4 for row in quadrant):
            raise ValueError("weights must be a 4x4 quadrant")

        # Expand the quadrant into the full 8x8 table once.
        half = BOARD_SIZE // 2
        self.table: List[List[int]] = [
            [quadrant[r if r < half else 7 - r][c if c < half else 7 - c] for c in range(BOARD_SIZE)]
            for r in range(BOARD_SIZE)
        ]

    def weight_at(self, grid: Grid, row: int, col: int) -> int:
        """Positional weight of a cell, raised to at least 1 once its corner is taken."""
        weight = self.table[row][col]
        corner_row = 0 if row < 4 else 7
        corner_col = 0 if col < 4 else 7
        if grid[corner_row][corner_col] != Piece.EMPTY:
            weight = max(1, weight)
        return weight

    def evaluate(self, grid: Grid, perspective: Piece) -> int:
        """
        Score ``grid`` from ``perspective``'s point of view.

        Finished games score WIN_SCORE or LOSS_SCORE plus the disc margin, so
        bigger wins and narrower losses rank higher. A tie scores DRAW_SCORE
        whichever side is asking.
        """
        other = opponent(perspective)

        if game_over(grid):
            result = winner(grid)
            if result is None:
                return DRAW_SCORE
            margin = piece_count(grid, perspective) - piece_count(grid, other)
            if result == perspective:
                return WIN_SCORE + margin
            return LOSS_SCORE + margin

        own = 0
        theirs = 0
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                cell = grid[row][col]
                if cell == Piece.EMPTY:
                    continue
                weight = self.weight_at(grid, row, col)
                if cell == perspective:
                    own += weight
                elif cell == other:
                    theirs += weight
        return own - theirs
