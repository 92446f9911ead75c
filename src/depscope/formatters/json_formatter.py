"""JSON formatter: machine-readable output for scripts and agents."""

import json

from ..analysis.models import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the analysis result as JSON."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result))

    def format(self, result: AnalysisResult) -> str:
        return json.dumps(result.to_dict(), indent=2)
