"""Prime number generation module."""

from .SafePrimes import SafePrimes
from .abstract.ISafePrimes import ISafePrimes

__all__ = ["SafePrimes", "ISafePrimes"]
