from abc import ABC, abstractmethod
from typing import List, Sequence
from ...mpc.types import MPZ
from ...parameters import ParameterSet
from ..Puzzle import Puzzle


class IPuzzleSolver(ABC):
    """Abstract base class defining the interface for a sequential puzzle solver."""

    @staticmethod
    @abstractmethod
    def solve(params: ParameterSet, puzzle: Puzzle) -> MPZ:
        """Open a puzzle by sequential squaring, without any trapdoor.

        Args:
            params (ParameterSet): The parameters the puzzle was generated under
            puzzle (Puzzle): The puzzle to solve

        Returns:
            MPZ: The locked secret
        """

    @staticmethod
    @abstractmethod
    def solve_many(params: ParameterSet, puzzles: Sequence[Puzzle]) -> List[MPZ]:
        """Solve independent puzzles in parallel using multiprocessing.

        Args:
            params (ParameterSet): The parameters the puzzles were generated under
            puzzles (Sequence[Puzzle]): Puzzles to solve

        Returns:
            List[MPZ]: Solutions in the same order as the input puzzles
        """
