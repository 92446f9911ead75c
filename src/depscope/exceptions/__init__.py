"""Exception hierarchy for depscope."""

from .analysis import (
    AnalysisCancelledError,
    AnalysisError,
    ManifestError,
    ParsingError,
)
from .base import DepscopeError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "DepscopeError",
    "AnalysisError",
    "ParsingError",
    "ManifestError",
    "AnalysisCancelledError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
