import logging

from ..exceptions import PrimeGenerationError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import PRIMALITY_TEST_ROUNDS
from ..random import Random
from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .abstract.ISafePrimes import ISafePrimes

logger = logging.getLogger(__name__)

MIN_BIT_SIZE = 3  # 5 = 0b101 is the smallest safe prime


class SafePrimes(ISafePrimes):
    """Implementation of safe prime generation.

    Draws a random (bit_size - 1)-bit starting point, then walks the Sophie
    Germain candidates q = next_prime(q) until 2q + 1 is prime. A walk that
    runs past the bit length starts over from a fresh random point.
    """

    @staticmethod
    def get_safe_prime(bit_size: int) -> MPZ:
        if bit_size < MIN_BIT_SIZE:
            raise ValueError(
                f"Safe primes need at least {MIN_BIT_SIZE} bits, got {bit_size}"
            )
        max_attempts = EnvironmentManager.get_int(
            EnvironmentVariables.SAFE_PRIME_MAX_ATTEMPTS
        )

        attempts = 0
        q = SafePrimes._random_sophie_germain_candidate(bit_size)
        while attempts < max_attempts:
            attempts += 1
            p = 2 * q + 1
            if p.bit_length() != bit_size:
                q = SafePrimes._random_sophie_germain_candidate(bit_size)
                continue
            if MPC.is_prime(p, PRIMALITY_TEST_ROUNDS):
                logger.debug(
                    "Found %d-bit safe prime after %d attempts", bit_size, attempts
                )
                return p
            q = MPC.next_prime(q)

        raise PrimeGenerationError(bit_size, attempts)

    # Private Methods
    # --------------

    @staticmethod
    def _random_sophie_germain_candidate(bit_size: int) -> MPZ:
        """First prime at or above a random point with the top bit of a (bit_size - 1)-bit number set."""
        low = 1 << (bit_size - 2)
        start = Random.get_int_range(low, low << 1)
        return MPC.next_prime(start - 1)
