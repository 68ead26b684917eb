"""Demonstration harness for setting up, combining and solving puzzles."""

import logging
import time

from lhtlp import LHTLP
from lhtlp.utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables

# Small values so the demonstration finishes in seconds
SECURITY_BITS = 64
DIFFICULTY = 1_000_000


def main():
    """Run the demonstration."""
    logging.basicConfig(
        level=EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 80)
    print("STEP 1: SETUP")
    print("=" * 80)
    print(f"  Security bits per prime: {SECURITY_BITS}")
    print(f"  Difficulty: {DIFFICULTY}")
    start_time = time.time()
    lhtlp = LHTLP.setup(SECURITY_BITS, DIFFICULTY)
    print(f"\nSetup took {time.time() - start_time:.4f} seconds")
    print(f"  N = {hex(lhtlp.get_parameters().get_modulus())}")

    print("\n" + "=" * 80)
    print("STEP 2: GENERATE AND COMBINE")
    print("=" * 80)
    first = lhtlp.generate(42)
    second = lhtlp.generate(13)
    bundle = lhtlp.evaluate([first, second])
    print(f"\n  first  = {first}")
    print(f"  second = {second}")
    print(f"  bundle = {bundle}")

    print("\n" + "=" * 80)
    print("STEP 3: SOLVE (Sequential Squaring)")
    print("=" * 80)
    start_time = time.time()
    solution = lhtlp.solve(bundle)
    print(f"\nSolved in {time.time() - start_time:.4f} seconds")
    print(f"  42 + 13 = {solution}")

    if solution == 55:
        print("\n✓ SOLUTION MATCHES ✓")
        return 0
    print("\n✗ SOLUTION MISMATCH ✗")
    return 1


if __name__ == "__main__":
    exit(main())
