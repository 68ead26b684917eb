import logging
import pytest
from unittest.mock import patch

import lhtlp
from lhtlp import LHTLP, LHTLPError, NoInverseError, InvalidPuzzleError, PrimeGenerationError
from lhtlp.parameters import ParameterSetup
from lhtlp.protocol_constants import DIFFICULTY, SECURITY_BITS


@pytest.fixture(scope="module")
def lhtlp_instance():
    """Fixture to set up an instance the way the library documentation does, with a short delay."""
    return LHTLP.setup(64, 1000)


def test_setup_generate_solve(lhtlp_instance):
    puzzle = lhtlp_instance.generate(42)
    assert lhtlp_instance.solve(puzzle) == 42


def test_evaluate(lhtlp_instance):
    first = lhtlp_instance.generate(42)
    second = lhtlp_instance.generate(13)
    bundle = lhtlp_instance.evaluate([first, second])

    assert lhtlp_instance.solve(bundle) == 55


def test_solve_many(lhtlp_instance):
    puzzles = [lhtlp_instance.generate(secret) for secret in (5, 6)]
    assert lhtlp_instance.solve_many(puzzles) == [5, 6]


def test_parameters(lhtlp_instance):
    params = lhtlp_instance.get_parameters()
    assert params.get_difficulty() == 1000
    assert repr(lhtlp_instance) == f"<LHTLP({params!r})>"


def test_error_hierarchy():
    """Test that every library error can be caught through the common base."""
    for error in (NoInverseError, InvalidPuzzleError, PrimeGenerationError):
        assert issubclass(error, LHTLPError)
    assert issubclass(InvalidPuzzleError, ValueError)


def test_package_logger_has_null_handler():
    handlers = logging.getLogger(lhtlp.__name__).handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_setup_logs_without_leaking_factors(caplog):
    with caplog.at_level(logging.INFO, logger="lhtlp"):
        instance = LHTLP.setup(32, 10)

    assert "Set up" in caplog.text
    assert "difficulty 10" in caplog.text
    assert str(instance.get_parameters().get_modulus()) not in caplog.text


def test_setup_defaults_to_protocol_constants():
    """Test that setup without arguments uses the protocol's security bits and difficulty."""
    with patch.object(ParameterSetup, "setup") as mock_setup:
        LHTLP.setup()

    mock_setup.assert_called_once_with(SECURITY_BITS, DIFFICULTY)
