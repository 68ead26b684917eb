from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.IRSA import IRSA
from ..exceptions import PrimeGenerationError
from ..primes import SafePrimes
from ..protocol_constants import DISTINCT_PRIME_MAX_ATTEMPTS


class RSA(IRSA):
    """RSA group over the product of two distinct safe primes.

    Holds the factorization, so an instance is the trapdoor. Callers keep it
    only as long as they need the group order.
    """

    def __init__(self, prime_bit_size: int) -> None:
        """Initialize RSA by generating two distinct random safe primes.

        Args:
            prime_bit_size (int): Number of bits of each prime.

        Raises:
            PrimeGenerationError: If no second, distinct safe prime of that size turns up
        """
        self._p = SafePrimes.get_safe_prime(prime_bit_size)
        self._q = SafePrimes.get_safe_prime(prime_bit_size)
        attempts = 1
        while self._q == self._p:
            if attempts >= DISTINCT_PRIME_MAX_ATTEMPTS:
                raise PrimeGenerationError(prime_bit_size, attempts)
            self._q = SafePrimes.get_safe_prime(prime_bit_size)
            attempts += 1

        self._N = self._calculate_N()
        self._phi = self._calculate_phi()

    def get_p(self) -> MPZ:
        return self._p

    def get_q(self) -> MPZ:
        return self._q

    def get_N(self) -> MPZ:
        return self._N

    def get_phi(self) -> MPZ:
        return self._phi

    def get_half_phi(self) -> MPZ:
        # p - 1 and q - 1 are both even, so this is exact
        return self._phi // 2

    def __repr__(self):
        # Never print the factors
        return f"<RSA(N_bits={self._N.bit_length()})>"

    # Private methods
    # --------------

    def _calculate_N(self) -> MPZ:
        """Calculate the RSA modulus N = p * q."""
        return MPC.mpz(self._p * self._q)

    def _calculate_phi(self) -> MPZ:
        """Calculate Euler's totient φ(N) = (p-1)(q-1)."""
        return MPC.mpz((self._p - 1) * (self._q - 1))
