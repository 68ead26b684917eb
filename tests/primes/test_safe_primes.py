import pytest
from unittest.mock import patch
from gmpy2 import mpz, is_prime

from lhtlp.exceptions import PrimeGenerationError
from lhtlp.mpc import MPC
from lhtlp.primes import SafePrimes


@pytest.mark.parametrize("bit_size", [3, 4, 16, 64, 128])
def test_get_safe_prime(bit_size):
    """Test that the result is a safe prime of exactly the requested size."""
    p = SafePrimes.get_safe_prime(bit_size)

    assert p.bit_length() == bit_size
    assert is_prime(p)
    assert is_prime((p - 1) // 2)


def test_smallest_safe_primes():
    """Test that 3-bit requests can only yield 5 or 7."""
    primes = {int(SafePrimes.get_safe_prime(3)) for _ in range(20)}
    assert primes <= {5, 7}


def test_too_small_bit_size_raises():
    """Test that there is no safe prime below 3 bits."""
    with pytest.raises(ValueError):
        SafePrimes.get_safe_prime(2)


def test_gives_up_after_max_attempts(monkeypatch):
    """Test that the search stops with PrimeGenerationError once the attempt bound is hit."""
    monkeypatch.setenv("SAFE_PRIME_MAX_ATTEMPTS", "5")

    with patch.object(MPC, "is_prime", return_value=False):
        with pytest.raises(PrimeGenerationError) as exc_info:
            SafePrimes.get_safe_prime(64)

    assert exc_info.value.bit_size == 64
    assert exc_info.value.attempts == 5
