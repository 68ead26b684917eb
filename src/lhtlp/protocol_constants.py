# protocol_constants.py

SECURITY_BITS = 1024  # Bit size of each safe prime
DIFFICULTY = 100_000_000  # Sequential squarings, roughly 5 seconds at 64-bit primes
PRIMALITY_TEST_ROUNDS = 25  # Miller-Rabin rounds for safe prime candidates
DISTINCT_PRIME_MAX_ATTEMPTS = 64  # Redraws of q while it equals p; 4 and 5 bits have a single safe prime
