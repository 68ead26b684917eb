from abc import ABC, abstractmethod
from ..types import MPZ


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            MPZ: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def is_integer(value: object) -> bool:
        """Whether value is a Python int (bool excluded) or an mpz."""

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (MPZ): Base value
            exp (MPZ): Exponent value
            mod (MPZ): Modulus value

        Returns:
            MPZ: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        """Compute base ** exp without reduction.

        Args:
            base (MPZ): Base value
            exp (MPZ): Exponent value

        Returns:
            MPZ: Result of exponentiation
        """

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute value % modulus.

        Args:
            value (MPZ): Value to reduce
            modulus (MPZ): Modulus to reduce by

        Returns:
            MPZ: Result of modular reduction
        """

    @staticmethod
    @abstractmethod
    def invert(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute the modular inverse of value.

        Args:
            value (MPZ): Value to invert
            modulus (MPZ): Modulus

        Returns:
            MPZ: x such that value * x == 1 (mod modulus)

        Raises:
            NoInverseError: If gcd(value, modulus) != 1
        """

    @staticmethod
    @abstractmethod
    def gcd(a: MPZ, b: MPZ) -> MPZ:
        """Greatest common divisor of a and b."""

    @staticmethod
    @abstractmethod
    def is_prime(value: MPZ, rounds: int) -> bool:
        """Probabilistic primality test.

        Args:
            value (MPZ): Candidate
            rounds (int): Number of Miller-Rabin rounds

        Returns:
            bool: False if value is composite, True if it is probably prime
        """

    @staticmethod
    @abstractmethod
    def next_prime(value: MPZ) -> MPZ:
        """Find the next prime number after the given value.

        Args:
            value (MPZ): Starting value

        Returns:
            MPZ: Next prime number
        """
