"""Object interface bundling one parameter set with the puzzle operations."""

from typing import Iterable, List, Sequence

from .mpc.types import MPZ
from .parameters import ParameterSet, ParameterSetup
from .protocol_constants import DIFFICULTY, SECURITY_BITS
from .puzzle import HomomorphicCombiner, Puzzle, PuzzleGenerator, PuzzleSolver


class LHTLP:
    """A linearly homomorphic time lock puzzle instance.

    Example:
        lhtlp = LHTLP.setup(64, 100_000_000)
        bundle = lhtlp.evaluate([lhtlp.generate(42), lhtlp.generate(13)])
        assert lhtlp.solve(bundle) == 55
    """

    def __init__(self, params: ParameterSet) -> None:
        self._params = params

    @classmethod
    def setup(cls, security_bits: int = SECURITY_BITS, difficulty: int = DIFFICULTY) -> "LHTLP":
        """Set up a fresh instance.

        Args:
            security_bits (int): Bit size of each of the two safe primes
            difficulty (int): Number of sequential squarings needed to solve a puzzle.
                100_000_000 is roughly five seconds of work at 64-bit primes.
        """
        return cls(ParameterSetup.setup(security_bits, difficulty))

    def get_parameters(self) -> ParameterSet:
        return self._params

    def generate(self, secret: int) -> Puzzle:
        return PuzzleGenerator.generate(self._params, secret)

    def solve(self, puzzle: Puzzle) -> MPZ:
        return PuzzleSolver.solve(self._params, puzzle)

    def solve_many(self, puzzles: Sequence[Puzzle]) -> List[MPZ]:
        return PuzzleSolver.solve_many(self._params, puzzles)

    def evaluate(self, puzzles: Iterable[Puzzle]) -> Puzzle:
        return HomomorphicCombiner.evaluate(self._params, puzzles)

    def __repr__(self):
        return f"<LHTLP({self._params!r})>"
