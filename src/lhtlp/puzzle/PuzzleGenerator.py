from typing import Iterable, List

from ..mpc import MPC
from ..mpc.constants import ONE
from ..parameters import ParameterSet
from ..random import Random
from .Puzzle import Puzzle
from .abstract.IPuzzleGenerator import IPuzzleGenerator


class PuzzleGenerator(IPuzzleGenerator):
    """Implementation of puzzle generation."""

    @staticmethod
    def generate(params: ParameterSet, secret: int) -> Puzzle:
        if secret < 0:
            raise ValueError("Secret must be non-negative")

        n = params.get_modulus()
        n2 = params.get_modulus_squared()

        r = Random.get_int_range(ONE, n2)
        u = MPC.powmod(params.get_generator(), r, n)

        # (1 + n)^s = 1 + s*n (mod n^2) encodes s additively
        blind = MPC.powmod(params.get_forcing_element(), r * n, n2)
        encoded = MPC.powmod(ONE + n, MPC.mpz(secret), n2)
        v = MPC.mod(blind * encoded, n2)

        return Puzzle(u, v)

    @staticmethod
    def generate_many(params: ParameterSet, secrets: Iterable[int]) -> List[Puzzle]:
        return [PuzzleGenerator.generate(params, secret) for secret in secrets]
