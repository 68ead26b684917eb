import secrets
from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.IRandom import IRandom


class Random(IRandom):
    """Implementation of secure random number generation."""

    @staticmethod
    def get_int_range(low: int, high: int) -> MPZ:
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        return MPC.mpz(low + secrets.randbelow(int(high - low)))
