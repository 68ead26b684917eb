import gmpy2
from ..exceptions import NoInverseError
from .abstract.IMPC import IMPC
from .types import MPZ


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def is_integer(value: object) -> bool:
        return isinstance(value, (int, type(gmpy2.mpz(0)))) and not isinstance(value, bool)

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        return base**exp

    @staticmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        return value % modulus  # gmpy2 supports % operator for mpz values

    @staticmethod
    def invert(value: MPZ, modulus: MPZ) -> MPZ:
        try:
            return gmpy2.invert(value, modulus)
        except ZeroDivisionError as e:
            raise NoInverseError(value, modulus) from e

    @staticmethod
    def gcd(a: MPZ, b: MPZ) -> MPZ:
        return gmpy2.gcd(a, b)

    @staticmethod
    def is_prime(value: MPZ, rounds: int) -> bool:
        return gmpy2.is_prime(value, rounds)

    @staticmethod
    def next_prime(value: MPZ) -> MPZ:
        return gmpy2.next_prime(value)
