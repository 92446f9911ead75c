"""Module resolution: specifier -> in-repo file, external token or best-effort path."""

from .base import ResolutionContext
from .manifests import CompilerConfig, ManifestCache
from .models import ResolutionKind, ResolvedDependency
from .resolver import STRATEGIES, ModuleResolver, resolve

__all__ = [
    "ModuleResolver",
    "resolve",
    "STRATEGIES",
    "ResolutionContext",
    "ManifestCache",
    "CompilerConfig",
    "ResolvedDependency",
    "ResolutionKind",
]
