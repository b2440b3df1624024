"""Interface protocols for ydict."""

from .presenter import PresenterProtocol
from .translator import Translator

__all__ = ["PresenterProtocol", "Translator"]
