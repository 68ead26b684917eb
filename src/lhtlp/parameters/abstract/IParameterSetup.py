from abc import ABC, abstractmethod
from ...mpc.types import MPZ
from ..ParameterSet import ParameterSet


class IParameterSetup(ABC):
    """Abstract base class defining the interface for generating puzzle parameters."""

    @staticmethod
    @abstractmethod
    def setup(security_bits: int, difficulty: MPZ) -> ParameterSet:
        """Generate a fresh parameter set.

        Args:
            security_bits (int): Bit size of each of the two safe primes
            difficulty (MPZ): Number of sequential squarings needed to solve a puzzle

        Returns:
            ParameterSet: The public parameters
        """
