"""Base formatter interface for analysis output rendering."""

from abc import ABC, abstractmethod

from ..analysis.models import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: AnalysisResult) -> None:
        """Write the rendered result to the terminal."""

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Return formatted string representation of the result."""
