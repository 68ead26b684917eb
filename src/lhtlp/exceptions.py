"""Error taxonomy for the lhtlp package.

Argument validation raises plain ``ValueError``. The classes below cover the
failures that originate inside the construction itself. None of them carry
secrets, primes or group exponents.
"""

from typing import Any


class LHTLPError(Exception):
    """Base class for all lhtlp errors."""


class NoInverseError(LHTLPError, ArithmeticError):
    """Raised when a modular inverse is requested for a non-unit.

    Only happens with corrupted parameters or with a puzzle that was not
    produced under the parameter set it is being solved with.
    """

    def __init__(self, value: Any, modulus: Any) -> None:
        super().__init__(f"no inverse exists modulo a {int(modulus).bit_length()}-bit modulus")
        self.value = value
        self.modulus = modulus


class PrimeGenerationError(LHTLPError):
    """Raised when no safe prime of the requested size could be found."""

    def __init__(self, bit_size: int, attempts: int) -> None:
        super().__init__(
            f"could not find a {bit_size}-bit safe prime after {attempts} attempts"
        )
        self.bit_size = bit_size
        self.attempts = attempts


class InvalidPuzzleError(LHTLPError, ValueError):
    """Raised when a puzzle does not decode under the given parameters."""
