from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IRandom(ABC):
    """Abstract base class defining the interface for secure random number generation."""

    @staticmethod
    @abstractmethod
    def get_int_range(low: int, high: int) -> MPZ:
        """Draw a uniformly random integer from a cryptographically secure source.

        Args:
            low (int): Inclusive lower bound
            high (int): Exclusive upper bound

        Returns:
            MPZ: An integer r with low <= r < high
        """
