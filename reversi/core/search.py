import time
from dataclasses import dataclass
from typing import Optional, Tuple

from reversi.config import CONFIG
from reversi.core.board import (
    Grid,
    Piece,
    Position,
    apply_move,
    can_move,
    copy_grid,
    game_over,
    legal_count,
    legal_positions,
    opponent,
    piece_count,
)
from reversi.core.evaluator import Evaluator, WIN_SCORE, LOSS_SCORE, DRAW_SCORE
from reversi.core.utils import print_info

INF = 1000000


@dataclass
class Candidate:
    """A move, the grid it leads to, and its score (or ordering key)."""
    position: Optional[Position] = None
    grid: Optional[Grid] = None
    value: int = -INF


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: Optional[int] = None,
                 end_game_depth: Optional[int] = None):
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth if depth is not None else CONFIG.search.depth
        self.end_game_depth = end_game_depth if end_game_depth is not None else CONFIG.search.end_game_depth
        if self.max_depth < 1:
            raise ValueError("search depth must be at least 1")
        self.nodes = 0
        self._search_to_end = False

    def choose_move(self, grid: Grid, mover: Piece) -> Optional[Position]:
        """Best move for ``mover``, or None if it has no legal move."""
        move, _ = self.search_best_move(grid, mover)
        return move

    def search_best_move(self, grid: Grid, mover: Piece) -> Tuple[Optional[Position], Optional[int]]:
        if not can_move(grid, mover):
            return None, None

        self.nodes = 0
        search_grid = copy_grid(grid)
        start_time = time.time()

        self._search_to_end = piece_count(search_grid, Piece.EMPTY) <= self.end_game_depth
        try:
            best = self.search(search_grid, mover, -INF, INF, 1)
        finally:
            self._search_to_end = False

        if CONFIG.search.print_info:
            elapsed = time.time() - start_time
            print_info(self.max_depth, best.value, self.nodes, elapsed, best.position,
                       WIN_SCORE, LOSS_SCORE, DRAW_SCORE)

        return best.position, best.value

    def search(self, grid: Grid, mover: Piece, alpha: int, beta: int, ply: int) -> Candidate:
        """
        Negamax with fail-hard alpha-beta pruning.

        Returns the best Candidate for ``mover``; its value is from ``mover``'s
        point of view. Leaf and pass nodes return a Candidate without a position.
        The root (ply 1) is always expanded.
        """
        self.nodes += 1

        # Cutoff: exhaustive mode stops only at game end, otherwise at max depth.
        if self._search_to_end:
            if game_over(grid):
                return Candidate(value=self.evaluator.evaluate(grid, mover))
        elif ply >= self.max_depth and ply > 1:
            return Candidate(value=self.evaluator.evaluate(grid, mover))

        # Pass: the opponent moves on the same grid, still costs a ply.
        if not can_move(grid, mover):
            reply = self.search(grid, opponent(mover), -beta, -alpha, ply + 1)
            return Candidate(value=-reply.value)

        candidates = []
        for pos in legal_positions(grid, mover):
            next_grid = copy_grid(grid)
            apply_move(next_grid, mover, pos)
            candidates.append(Candidate(pos, next_grid, 0))

        # Ordering: fewest follow-up moves for the mover first, early plies only.
        if ply <= self.max_depth // 2:
            for cand in candidates:
                cand.value = legal_count(cand.grid, mover)
            candidates.sort(key=lambda c: c.value)

        best = Candidate(value=-INF)
        for cand in candidates:
            cand.value = -self.search(cand.grid, opponent(mover), -beta, -alpha, ply + 1).value

            if cand.value > best.value:
                best = cand
                alpha = max(alpha, cand.value)
                if alpha >= beta:
                    break

        return best
