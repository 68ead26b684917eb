"""Linearly homomorphic time lock puzzle module."""

from .Puzzle import Puzzle
from .PuzzleGenerator import PuzzleGenerator
from .PuzzleSolver import PuzzleSolver
from .HomomorphicCombiner import HomomorphicCombiner
from .abstract.IPuzzleGenerator import IPuzzleGenerator
from .abstract.IPuzzleSolver import IPuzzleSolver
from .abstract.IHomomorphicCombiner import IHomomorphicCombiner

__all__ = [
    "Puzzle",
    "PuzzleGenerator",
    "PuzzleSolver",
    "HomomorphicCombiner",
    "IPuzzleGenerator",
    "IPuzzleSolver",
    "IHomomorphicCombiner",
]
