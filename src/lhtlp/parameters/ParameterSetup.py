import logging

from ..mpc import MPC
from ..mpc.types import MPZ
from ..random import Random
from ..rsa import RSA
from ..primes.SafePrimes import MIN_BIT_SIZE
from .ParameterSet import ParameterSet
from .abstract.IParameterSetup import IParameterSetup
from ..mpc.constants import ONE, TWO

logger = logging.getLogger(__name__)


class ParameterSetup(IParameterSetup):
    """Implementation of parameter setup, the only place the group order is known."""

    @staticmethod
    def setup(security_bits: int, difficulty: MPZ) -> ParameterSet:
        if not MPC.is_integer(security_bits):
            raise ValueError(f"security_bits must be an integer, got {security_bits!r}")
        if not MPC.is_integer(difficulty):
            raise ValueError(f"difficulty must be an integer, got {difficulty!r}")
        if security_bits < MIN_BIT_SIZE:
            raise ValueError(f"security_bits must be at least {MIN_BIT_SIZE}, got {security_bits}")
        difficulty = MPC.mpz(difficulty)
        if difficulty < 0:
            raise ValueError(f"difficulty must be non-negative, got {difficulty}")

        rsa = RSA(security_bits)
        n = rsa.get_N()

        # g = (r^2)^-1 for a random unit r, so g is a quadratic residue
        r = ParameterSetup._random_unit(n)
        generator = MPC.invert(MPC.powmod(r, TWO, n), n)

        # h = g^(2^t) mod n, fast-forwarded through the group order
        exponent = MPC.powmod(TWO, difficulty, rsa.get_half_phi())
        forcing_element = MPC.powmod(generator, exponent, n)

        logger.info(
            "Set up %d-bit modulus with difficulty %s", n.bit_length(), difficulty
        )
        return ParameterSet(difficulty, n, generator, forcing_element)

    # Private Methods
    # --------------

    @staticmethod
    def _random_unit(n: MPZ) -> MPZ:
        """Draw r uniformly from [1, n) until gcd(r, n) == 1."""
        while True:
            r = Random.get_int_range(ONE, n)
            if MPC.gcd(r, n) == ONE:
                return r
