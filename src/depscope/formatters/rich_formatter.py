"""Rich terminal formatter: summary, cycles, coupling hot spots."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analysis.models import AnalysisResult
from .base import BaseFormatter


def _instability_label(value: float) -> str:
    if value >= 0.8:
        return f"[red]{value:.2f}[/red]"
    elif value >= 0.5:
        return f"[yellow]{value:.2f}[/yellow]"
    else:
        return f"[green]{value:.2f}[/green]"


class RichFormatter(BaseFormatter):
    """Human-readable terminal output. Only lists issues and the top-N files."""

    def __init__(self, console: Optional[Console] = None, top: int = 10):
        self.console = console or Console()
        self.top = top

    def render(self, result: AnalysisResult) -> None:
        self._print_summary(result)
        self._print_cycles(result)
        self._print_coupling(result)
        self._print_externals(result)

    def format(self, result: AnalysisResult) -> str:
        # Render into a private recording console and return its text
        original = self.console
        self.console = Console(record=True, width=original.width, file=io.StringIO())
        try:
            self.render(result)
            return self.console.export_text()
        finally:
            self.console = original

    # ── Sections ───────────────────────────────────────────────────

    def _print_summary(self, result: AnalysisResult) -> None:
        s = result.summary
        self.console.print()
        self.console.print(f"[bold cyan]DEPSCOPE[/bold cyan] {escape(str(result.root))}")
        self.console.print(
            f"  [bold]{s.module_count}[/bold] files, "
            f"[bold]{s.dependency_count}[/bold] dependency edges"
        )
        self.console.print(
            f"  [bold]{s.external_dependency_count}[/bold] external references, "
            f"[bold]{s.best_effort_count}[/bold] best-effort"
        )
        self.console.print(
            f"  average instability {s.average_instability:.2f}, "
            f"max afferent {s.max_afferent_coupling}, max efferent {s.max_efferent_coupling}"
        )
        self.console.print()

    def _print_cycles(self, result: AnalysisResult) -> None:
        if not result.cycles:
            self.console.print("[green]No circular dependencies[/green]")
            self.console.print()
            return

        self.console.print(f"[bold red]Circular Dependencies ({len(result.cycles)})[/bold red]")
        for cycle in result.cycles:
            chain = " -> ".join(cycle.nodes + cycle.nodes[:1])
            self.console.print(f"  {escape(chain)}")
            self.console.print(f"  [dim]({cycle.internal_edge_count} edges in cycle)[/dim]")
        self.console.print()

    def _print_coupling(self, result: AnalysisResult) -> None:
        if not result.coupling:
            return

        table = Table(title=f"Most Unstable Files (top {self.top})", title_justify="left")
        table.add_column("File", style="bold")
        table.add_column("Ca", justify="right")
        table.add_column("Ce", justify="right")
        table.add_column("Instability", justify="right")
        for metric in result.coupling[: self.top]:
            table.add_row(
                escape(metric.path),
                str(metric.afferent),
                str(metric.efferent),
                _instability_label(metric.instability),
            )
        self.console.print(table)
        self.console.print()

    def _print_externals(self, result: AnalysisResult) -> None:
        packages = result.external_packages().most_common(self.top)
        if not packages:
            return

        table = Table(title="Most Used External Dependencies", title_justify="left")
        table.add_column("Dependency")
        table.add_column("Files", justify="right")
        for name, count in packages:
            table.add_row(escape(name), str(count))
        self.console.print(table)
        self.console.print()

