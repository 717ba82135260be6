from typing import Optional, Tuple

from reversi.core.board import Piece, Position, ReversiBoard, opponent
from reversi.core.search import SearchEngine
from reversi.core.evaluator import Evaluator
from reversi.game import IllegalMoveError


class Engine:
    def __init__(self, depth: Optional[int] = None, end_game_depth: Optional[int] = None):
        self.board = ReversiBoard()
        self.search = SearchEngine(Evaluator(), depth=depth, end_game_depth=end_game_depth)
        self.turn = Piece.P1

    def reset(self):
        self.board.reset()
        self.turn = Piece.P1

    def legal(self, position) -> bool:
        return self.board.is_legal(self.turn, position)

    def apply(self, position) -> int:
        """Play ``position`` for the side to move and hand over the turn."""
        if not self.legal(position):
            raise IllegalMoveError(f"Illegal move: {Position(*position)}")
        flipped = self.board.play(self.turn, position)
        self.turn = opponent(self.turn)
        # Skip a side that has no move unless the game has ended.
        if not self.board.can_move(self.turn) and not self.board.game_over():
            self.turn = opponent(self.turn)
        return flipped

    def get_best_move(self) -> Tuple[Optional[Position], Optional[int]]:
        return self.search.search_best_move(self.board.grid, self.turn)

    def game_over(self) -> bool:
        return self.board.game_over()

    def piece_count(self, piece: Piece) -> int:
        return self.board.piece_count(piece)

    def winner(self) -> Optional[Piece]:
        return self.board.winner()
