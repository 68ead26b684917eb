import pytest
from unittest.mock import patch
from gmpy2 import mpz

from lhtlp.exceptions import NoInverseError
from lhtlp.parameters import ParameterSet
from lhtlp.puzzle import HomomorphicCombiner, Puzzle, PuzzleGenerator, PuzzleSolver
from lhtlp.random import Random

# p = 23, q = 47, g = 811, difficulty 3 gives h = 811^8 = 363 (mod 1081)
N = 1081
N2 = N * N


@pytest.fixture
def sample_parameters():
    """Fixture for the parameter set over n = 1081 with difficulty 3."""
    return ParameterSet(3, N, 811, 363)


@pytest.fixture
def sample_puzzle(sample_parameters):
    """Fixture to lock the secret 42 with the known randomness r = 5."""
    with patch.object(Random, "get_int_range") as mock_random:
        mock_random.return_value = mpz(5)
        return PuzzleGenerator.generate(sample_parameters, 42)


def test_generate(sample_puzzle):
    """Test generate with fixed parameters and randomness."""
    # u = 811^5 = 811^4 * 811 = 1043 * 811 = 845873 = 531 (mod 1081)
    # v = h^(r*n) * (1 + n)^s, and (1 + n)^s = 1 + s*n (mod n^2)
    expected_v = pow(363, 5 * N, N2) * (1 + 42 * N) % N2

    assert sample_puzzle.get_u() == 531
    assert sample_puzzle.get_v() == expected_v


def test_randomness_is_drawn_below_modulus_squared(sample_parameters):
    """Test that r comes from [1, n^2)."""
    with patch.object(Random, "get_int_range") as mock_random:
        mock_random.return_value = mpz(5)
        PuzzleGenerator.generate(sample_parameters, 42)

    mock_random.assert_called_once_with(1, N2)


def test_sequential_squaring_reaches_forcing_element(sample_puzzle):
    """Test that u^(2^t) equals h^r, the value only the trapdoor could shortcut."""
    assert pow(int(sample_puzzle.get_u()), 2 ** 3, N) == pow(363, 5, N)


def test_solve(sample_parameters, sample_puzzle):
    """Test that the sample puzzle opens to its secret."""
    assert PuzzleSolver.solve(sample_parameters, sample_puzzle) == 42


def test_solve_every_secret_below_modulus(sample_parameters):
    """Test the full encoding space of the small group, including 0 and n - 1."""
    for secret in (0, 1, 2, 540, 1079, 1080):
        puzzle = PuzzleGenerator.generate(sample_parameters, secret)
        assert PuzzleSolver.solve(sample_parameters, puzzle) == secret


def test_secret_at_modulus_wraps(sample_parameters):
    """Test that secrets are only meaningful modulo n."""
    puzzle = PuzzleGenerator.generate(sample_parameters, N + 7)
    assert PuzzleSolver.solve(sample_parameters, puzzle) == 7


def test_evaluate(sample_parameters):
    """Test homomorphic evaluation with fixed randomness."""
    with patch.object(Random, "get_int_range") as mock_random:
        mock_random.side_effect = [mpz(5), mpz(9)]
        first = PuzzleGenerator.generate(sample_parameters, 100)
        second = PuzzleGenerator.generate(sample_parameters, 200)

    bundle = HomomorphicCombiner.evaluate(sample_parameters, [first, second])

    assert bundle.get_u() == first.get_u() * second.get_u() % N
    assert bundle.get_v() == first.get_v() * second.get_v() % N2
    assert PuzzleSolver.solve(sample_parameters, bundle) == 300


def test_zero_difficulty():
    """Test that with difficulty 0 solving is immediate decoding (h = g, w = u)."""
    params = ParameterSet(0, N, 811, 811)
    puzzle = PuzzleGenerator.generate(params, 99)
    assert PuzzleSolver.solve(params, puzzle) == 99


def test_solve_non_unit_raises(sample_parameters):
    """Test that a puzzle whose u shares a factor with n is rejected as corrupted."""
    with pytest.raises(NoInverseError):
        PuzzleSolver.solve(sample_parameters, Puzzle(23, 1))
