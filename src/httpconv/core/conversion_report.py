"""Conversion report: counts, skipped units and the resulting exit status."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from loguru import logger
from rich.console import Console
from rich.table import Table

from .errors import ErrorCategory


EXIT_OK = 0
EXIT_FATAL = 1
EXIT_PARTIAL = 2


@dataclass
class SkippedUnit:
    """Record of a block, file or tree node that was left out."""

    kind: str  # "block", "file" or "node"
    source: str
    reason: str
    category: ErrorCategory = ErrorCategory.PARSING_ERROR
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class ConversionReport:
    """Accumulates what happened during one export or import run."""

    operation: str
    files_processed: int = 0
    files_written: int = 0
    requests_converted: int = 0
    skipped: List[SkippedUnit] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def record_skip(
        self,
        kind: str,
        source: str,
        reason: str,
        category: ErrorCategory = ErrorCategory.PARSING_ERROR,
    ) -> None:
        """Log and remember a unit that was skipped."""
        logger.warning(f"Skipping {kind} in {source}: {reason}")
        self.skipped.append(SkippedUnit(kind=kind, source=source, reason=reason, category=category))

    def record_warning(self, source: str, message: str) -> None:
        """Log a recoverable problem that did not drop a whole unit."""
        logger.warning(f"{source}: {message}")
        self.warnings.append(f"{source}: {message}")

    @property
    def has_skips(self) -> bool:
        return bool(self.skipped)

    @property
    def exit_code(self) -> int:
        """0 on a clean run, 2 when any block, file or node was skipped."""
        return EXIT_PARTIAL if self.has_skips else EXIT_OK

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation,
            "files_processed": self.files_processed,
            "files_written": self.files_written,
            "requests_converted": self.requests_converted,
            "skipped": [
                {"kind": s.kind, "source": s.source, "reason": s.reason, "category": s.category.value}
                for s in self.skipped
            ],
            "warnings": list(self.warnings),
        }

    def print_summary(self, console: Optional[Console] = None) -> None:
        """
        Print a summary table of the run.

        Args:
            console: Rich console to print to (stderr console if None)
        """
        console = console or Console(stderr=True)

        table = Table(title=f"{self.operation.capitalize()} Summary")
        table.add_column("Metric")
        table.add_column("Count", justify="right")
        table.add_row("Files processed", str(self.files_processed))
        table.add_row("Files written", str(self.files_written))
        table.add_row("Requests converted", str(self.requests_converted))
        table.add_row("Skipped units", str(len(self.skipped)))
        table.add_row("Warnings", str(len(self.warnings)))
        console.print(table)

        if self.skipped:
            console.print("[bold yellow]Skipped:[/bold yellow]")
            for unit in self.skipped:
                console.print(f"  {unit.kind} in {unit.source}: {unit.reason}", markup=False)
