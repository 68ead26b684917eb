"""Linearly homomorphic time lock puzzles."""

import logging

from .exceptions import InvalidPuzzleError, LHTLPError, NoInverseError, PrimeGenerationError
from .parameters import ParameterSet, ParameterSetup
from .puzzle import HomomorphicCombiner, Puzzle, PuzzleGenerator, PuzzleSolver
from .LHTLP import LHTLP

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LHTLP",
    "ParameterSet",
    "ParameterSetup",
    "Puzzle",
    "PuzzleGenerator",
    "PuzzleSolver",
    "HomomorphicCombiner",
    "LHTLPError",
    "NoInverseError",
    "PrimeGenerationError",
    "InvalidPuzzleError",
]
