"""
depscope - Multi-Language Source Dependency Graph Engine

Extracts import/require-style references from every source file in a
repository, resolves each one to a concrete file (or marks it external),
assembles a directed dependency graph and reports its structure:
circular-dependency groups (Tarjan SCC) and per-file coupling metrics
(afferent, efferent, instability).
"""

__version__ = "0.1.0"

from .analysis.engine import AnalysisEngine
from .analysis.models import AnalysisResult, AnalysisSummary
from .config import AnalysisConfig, load_config
from .graph.models import CouplingMetric, CycleGroup, DependencyGraph
from .resolution.models import ResolutionKind, ResolvedDependency
from .resolution.resolver import ModuleResolver
from .scanning.extractor import ImportExtractor
from .scanning.languages import Language, detect_language

__all__ = [
    "AnalysisEngine",  # Main entry point
    "AnalysisResult",
    "AnalysisSummary",
    "AnalysisConfig",
    "load_config",
    "ImportExtractor",
    "ModuleResolver",
    "ResolvedDependency",
    "ResolutionKind",
    "DependencyGraph",
    "CycleGroup",
    "CouplingMetric",
    "Language",
    "detect_language",
]
