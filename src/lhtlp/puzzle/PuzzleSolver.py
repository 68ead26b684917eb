import logging
import time
from multiprocessing import Pool
from typing import List, Sequence, Tuple

from ..exceptions import InvalidPuzzleError
from ..mpc import MPC
from ..mpc.constants import ONE, TWO
from ..mpc.types import MPZ
from ..parameters import ParameterSet
from ..utils.SystemSpecs import SystemSpecs
from .Puzzle import Puzzle
from .abstract.IPuzzleSolver import IPuzzleSolver

logger = logging.getLogger(__name__)


class PuzzleSolver(IPuzzleSolver):
    """Sequential puzzle solver (slow - does actual sequential squaring)."""

    @staticmethod
    def solve(params: ParameterSet, puzzle: Puzzle) -> MPZ:
        """Solve puzzle by sequential squaring (no trapdoor exists to shortcut it).

        This computes w = u^(2^t) mod n by calculating 2^t then doing the
        exponentiation. The exponent has t bits and no known shortcut, so the
        cost is t modular squarings.

        Then strips the blinding factor w^n from v and decodes the secret
        from v = 1 + s*n (mod n^2).

        Args:
            params: The parameters the puzzle was generated under
            puzzle: The puzzle to solve

        Returns:
            The locked secret

        Raises:
            NoInverseError: If w^n is not a unit mod n^2
            InvalidPuzzleError: If the puzzle does not decode under params
        """
        n = params.get_modulus()
        n2 = params.get_modulus_squared()
        t = params.get_difficulty()
        u, v = puzzle

        logger.debug("Starting %s sequential squarings", t)
        start_time = time.time()

        # Calculate 2^t first
        exp = MPC.pow(TWO, t)

        # Then calculate u^(2^t) mod n in one step
        w = MPC.powmod(u, exp, n)

        logger.debug("Sequential squaring took %.4f seconds", time.time() - start_time)

        blind_factor = MPC.invert(MPC.powmod(w, n, n2), n2)
        decoded = MPC.mod(v * blind_factor, n2)

        secret, remainder = divmod(decoded - ONE, n)
        if remainder != 0 or secret < 0:
            raise InvalidPuzzleError("Puzzle does not decode under the given parameters")
        return secret

    @staticmethod
    def solve_many(params: ParameterSet, puzzles: Sequence[Puzzle]) -> List[MPZ]:
        """
        Solve multiple puzzles in parallel using multiprocessing.

        Each solve stays sequential. Only independent puzzles run side by side.

        Args:
            params: The parameters the puzzles were generated under
            puzzles: Puzzles to solve

        Returns:
            List of solutions in the same order as input puzzles
        """
        if not puzzles:
            return []
        num_workers = min(SystemSpecs.get_num_parallel_processes(), len(puzzles))
        with Pool(num_workers) as pool:
            return pool.map(
                PuzzleSolver._solve_single, [(params, puzzle) for puzzle in puzzles]
            )

    # Private Methods
    # --------------

    @staticmethod
    def _solve_single(args: Tuple[ParameterSet, Puzzle]) -> MPZ:
        """Helper method to solve a single puzzle for multiprocessing."""
        params, puzzle = args
        return PuzzleSolver.solve(params, puzzle)
