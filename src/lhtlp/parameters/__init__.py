"""Public parameter generation module."""

from .ParameterSet import ParameterSet
from .ParameterSetup import ParameterSetup
from .abstract.IParameterSetup import IParameterSetup

__all__ = ["ParameterSet", "ParameterSetup", "IParameterSetup"]
