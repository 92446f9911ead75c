"""Analysis pipeline: files in, dependency graph and structure out."""

from .engine import AnalysisEngine
from .models import AnalysisResult, AnalysisSummary

__all__ = ["AnalysisEngine", "AnalysisResult", "AnalysisSummary"]
