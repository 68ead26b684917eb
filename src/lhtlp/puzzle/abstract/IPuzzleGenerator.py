from abc import ABC, abstractmethod
from typing import Iterable, List
from ...parameters import ParameterSet
from ..Puzzle import Puzzle


class IPuzzleGenerator(ABC):
    """Abstract base class defining the interface for a puzzle generator."""

    @staticmethod
    @abstractmethod
    def generate(params: ParameterSet, secret: int) -> Puzzle:
        """Lock a secret in a fresh, randomized puzzle.

        Args:
            params (ParameterSet): Public parameters
            secret (int): Non-negative integer below the modulus

        Returns:
            Puzzle: The puzzle
        """

    @staticmethod
    @abstractmethod
    def generate_many(params: ParameterSet, secrets: Iterable[int]) -> List[Puzzle]:
        """Lock each secret in its own independent puzzle.

        Args:
            params (ParameterSet): Public parameters
            secrets (Iterable[int]): Secrets to lock

        Returns:
            List[Puzzle]: One puzzle per secret, in the same order
        """
