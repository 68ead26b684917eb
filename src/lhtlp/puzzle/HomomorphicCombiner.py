from typing import Iterable

from ..mpc import MPC
from ..parameters import ParameterSet
from .Puzzle import Puzzle
from .abstract.IHomomorphicCombiner import IHomomorphicCombiner


class HomomorphicCombiner(IHomomorphicCombiner):
    """Implementation of homomorphic evaluation by componentwise multiplication."""

    @staticmethod
    def evaluate(params: ParameterSet, puzzles: Iterable[Puzzle]) -> Puzzle:
        n = params.get_modulus()
        n2 = params.get_modulus_squared()

        u, v = Puzzle.identity()
        for puzzle in puzzles:
            u = MPC.mod(u * puzzle.get_u(), n)
            v = MPC.mod(v * puzzle.get_v(), n2)
        return Puzzle(u, v)
