from ..mpc import MPC
from ..mpc.types import MPZ


class Puzzle:
    """A linearly homomorphic time lock puzzle (u, v).

    Carries no reference to the parameters it was generated under.
    """

    def __init__(self, u: MPZ, v: MPZ) -> None:
        """Initialize a puzzle.

        Args:
            u (MPZ): Randomized group element mod n
            v (MPZ): Blinded encoding of the secret mod n^2
        """
        self._u = MPC.mpz(u)
        self._v = MPC.mpz(v)

    @staticmethod
    def identity() -> "Puzzle":
        """The neutral element of homomorphic evaluation, solving to 0."""
        return Puzzle(1, 1)

    def get_u(self) -> MPZ:
        return self._u

    def get_v(self) -> MPZ:
        return self._v

    def __iter__(self):
        return iter((self._u, self._v))

    def __eq__(self, other):
        if not isinstance(other, Puzzle):
            return NotImplemented
        return self._u == other._u and self._v == other._v

    def __hash__(self):
        return hash((self._u, self._v))

    def __repr__(self):
        return f"<Puzzle(u={hex(self._u)}, v={hex(self._v)})>"
