"""Resolution results."""

from dataclasses import dataclass
from enum import Enum


class ResolutionKind(str, Enum):
    """Which variant a resolved dependency is."""

    IN_REPO = "in_repo"  # confirmed file inside the repository
    EXTERNAL = "external"  # the raw specifier, left unresolved
    BEST_EFFORT = "best_effort"  # constructed path, existence unconfirmed


@dataclass(frozen=True)
class ResolvedDependency:
    """Exactly one resolution variant plus its value.

    For IN_REPO and BEST_EFFORT ``value`` is a repo-relative POSIX path;
    for EXTERNAL it is the raw specifier.
    """

    kind: ResolutionKind
    value: str

    @classmethod
    def in_repo(cls, path: str) -> "ResolvedDependency":
        return cls(ResolutionKind.IN_REPO, path)

    @classmethod
    def external(cls, specifier: str) -> "ResolvedDependency":
        return cls(ResolutionKind.EXTERNAL, specifier)

    @classmethod
    def best_effort(cls, path: str) -> "ResolvedDependency":
        return cls(ResolutionKind.BEST_EFFORT, path)

    @property
    def is_in_repo(self) -> bool:
        return self.kind is ResolutionKind.IN_REPO

    @property
    def is_external(self) -> bool:
        return self.kind is ResolutionKind.EXTERNAL

    @property
    def is_best_effort(self) -> bool:
        return self.kind is ResolutionKind.BEST_EFFORT

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.value}"
