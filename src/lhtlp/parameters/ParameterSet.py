from ..mpc import MPC
from ..mpc.types import MPZ


class ParameterSet:
    """Public parameters of one linearly homomorphic time-lock puzzle instance.

    The factorization of the modulus is not part of the parameter set, so
    nobody holding it can open a puzzle faster than by sequential squaring.
    """

    def __init__(self, difficulty: MPZ, modulus: MPZ, generator: MPZ, forcing_element: MPZ) -> None:
        """Initialize a parameter set.

        Args:
            difficulty (MPZ): Number of sequential squarings needed to solve a puzzle
            modulus (MPZ): n = p * q for two safe primes p and q
            generator (MPZ): g, the inverse of a random square mod n
            forcing_element (MPZ): h = g^(2^difficulty) mod n, computed with the trapdoor
        """
        self._difficulty = MPC.mpz(difficulty)
        self._modulus = MPC.mpz(modulus)
        self._generator = MPC.mpz(generator)
        self._forcing_element = MPC.mpz(forcing_element)
        self._modulus_squared = self._modulus * self._modulus

    def get_difficulty(self) -> MPZ:
        return self._difficulty

    def get_modulus(self) -> MPZ:
        return self._modulus

    def get_modulus_squared(self) -> MPZ:
        return self._modulus_squared

    def get_generator(self) -> MPZ:
        return self._generator

    def get_forcing_element(self) -> MPZ:
        return self._forcing_element

    def __eq__(self, other):
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return (
            self._difficulty == other._difficulty
            and self._modulus == other._modulus
            and self._generator == other._generator
            and self._forcing_element == other._forcing_element
        )

    def __hash__(self):
        return hash((self._difficulty, self._modulus, self._generator, self._forcing_element))

    def __repr__(self):
        return f"<ParameterSet(difficulty={self._difficulty}, modulus_bits={self._modulus.bit_length()})>"
