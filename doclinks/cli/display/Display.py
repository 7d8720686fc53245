"""Abstract display interface."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """What the CLI needs to show command stages."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Announce an operation."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Report a successful result."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report a failed result."""

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Report a warning."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Report progress or other information."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Print structured output (``format`` is "yaml" or "json")."""
