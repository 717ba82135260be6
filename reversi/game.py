"""Players and a headless turn loop for full games."""

from enum import Enum
from typing import Optional, Protocol

from reversi.config import CONFIG
from reversi.core.board import Piece, Position, ReversiBoard, opponent
from reversi.core.search import SearchEngine


class IllegalMoveError(ValueError):
    """A player submitted a move that is not legal for it."""


class EndState(Enum):
    P1_WIN = "p1_win"
    P2_WIN = "p2_win"
    DRAW = "draw"


class Player(Protocol):
    name: str

    def move(self, board: ReversiBoard, piece: Piece) -> Optional[Position]:
        ...


class ComputerPlayer:
    def __init__(self, name: Optional[str] = None, depth: Optional[int] = None, end_game_depth: Optional[int] = None):
        self.name = name or CONFIG.ui.engine_name
        self.search = SearchEngine(depth=depth, end_game_depth=end_game_depth)

    def move(self, board: ReversiBoard, piece: Piece) -> Optional[Position]:
        return self.search.choose_move(board.grid, piece)


class Game:
    def __init__(self, first: Player, second: Player, board: Optional[ReversiBoard] = None):
        self.board = board or ReversiBoard()
        self.players = {Piece.P1: first, Piece.P2: second}
        self.active = Piece.P1
        self.move_count = 0
        self.pass_count = 0

    def play(self) -> EndState:
        """Play a full game from the starting position and return the result."""
        self.board.reset()
        self.active = Piece.P1
        self.move_count = 0
        self.pass_count = 0

        while not self.board.game_over():
            if self.board.can_move(self.active):
                player = self.players[self.active]
                pos = player.move(self.board, self.active)
                if pos is None or not self.board.is_legal(self.active, pos):
                    raise IllegalMoveError(f"Illegal move by {player.name}: {pos}")
                self.board.play(self.active, pos)
                self.move_count += 1
            else:
                self.pass_count += 1
            self.active = opponent(self.active)

        return self.result()

    def result(self) -> EndState:
        winner = self.board.winner()
        if winner == Piece.P1:
            return EndState.P1_WIN
        if winner == Piece.P2:
            return EndState.P2_WIN
        return EndState.DRAW
