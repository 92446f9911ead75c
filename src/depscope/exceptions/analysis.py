"""Analysis-related exceptions: parsing, manifests, cancellation."""

from pathlib import Path

from .base import DepscopeError


class AnalysisError(DepscopeError):
    """Base class for analysis-related errors."""
    pass


class ParsingError(AnalysisError):
    """Raised when file content cannot be parsed."""

    def __init__(self, filepath: Path, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class ManifestError(AnalysisError):
    """Raised when a package manifest or compiler config cannot be decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Malformed manifest: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class AnalysisCancelledError(AnalysisError):
    """Raised when a run is cancelled before the graph snapshot is taken."""

    def __init__(self, completed: int, total: int):
        super().__init__(
            "Analysis cancelled before graph construction",
            details={"completed": str(completed), "total": str(total)},
        )
        self.completed = completed
        self.total = total
