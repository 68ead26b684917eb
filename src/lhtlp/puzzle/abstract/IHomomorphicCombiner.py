from abc import ABC, abstractmethod
from typing import Iterable
from ...parameters import ParameterSet
from ..Puzzle import Puzzle


class IHomomorphicCombiner(ABC):
    """Abstract base class defining the interface for homomorphic puzzle evaluation."""

    @staticmethod
    @abstractmethod
    def evaluate(params: ParameterSet, puzzles: Iterable[Puzzle]) -> Puzzle:
        """Combine puzzles into one whose solution is the sum of their secrets.

        Args:
            params (ParameterSet): The parameters all puzzles were generated under
            puzzles (Iterable[Puzzle]): Puzzles to combine, possibly none

        Returns:
            Puzzle: The combined puzzle
        """
