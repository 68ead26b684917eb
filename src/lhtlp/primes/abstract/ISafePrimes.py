from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class ISafePrimes(ABC):
    """Abstract base class defining the interface for safe prime generation."""

    @staticmethod
    @abstractmethod
    def get_safe_prime(bit_size: int) -> MPZ:
        """Get a random safe prime, i.e. a prime p such that (p - 1) / 2 is also prime.

        Args:
            bit_size (int): Exact number of bits of the returned prime.

        Returns:
            MPZ: A random safe prime

        Raises:
            PrimeGenerationError: If the search gives up
        """
