"""Core engine components: board, evaluator and search."""

from .board import Piece, Position, ReversiBoard
from .evaluator import Evaluator
from .search import Candidate, SearchEngine
