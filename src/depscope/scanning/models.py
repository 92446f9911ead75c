"""Data models for scanned source files."""

from dataclasses import dataclass, field
from pathlib import Path

from .languages import Language, detect_language


@dataclass(frozen=True)
class SourceFile:
    """One file of the analyzed set.

    ``path`` is the identity: repo-relative, POSIX separators.
    ``abs_path`` is where the resolver starts its filesystem probes.
    """

    path: str
    abs_path: Path
    language: Language
    text: str = field(default="", repr=False, compare=False)

    @classmethod
    def from_path(cls, abs_path: Path, root: Path, text: str = "") -> "SourceFile":
        abs_path = Path(abs_path)
        try:
            rel = abs_path.relative_to(root).as_posix()
        except ValueError:
            rel = abs_path.as_posix()
        return cls(path=rel, abs_path=abs_path, language=detect_language(abs_path), text=text)


@dataclass(frozen=True)
class RawDependency:
    """A specifier string plus the file it was found in."""

    specifier: str
    source: SourceFile
