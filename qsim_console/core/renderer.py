from __future__ import annotations

from typing import Iterable, List, Protocol

from .models import ExecutionReport, to_outcome


class TextSink(Protocol):
    """Anything the report can be written to, replacing its content."""

    def write(self, text: str) -> None: ...


def format_outcome_label(index: int, bit_width: int) -> str:
    """Base-2 form of *index*, left-padded with zeros to *bit_width* digits."""
    return format(index, "b").zfill(bit_width)


def format_percentage(probability: float) -> str:
    return f"{probability * 100:.4f}%"


def format_header(elapsed_ms: float) -> str:
    return f"Executed in {elapsed_ms:.2f} milliseconds"


class ResultRenderer:
    """
    Turns an outcome distribution into display text.

    Outcomes keep the order the engine produced them in. Any outcome whose
    probability is at or below ``threshold`` is left out of the report
    entirely rather than printed as zero.
    """

    def __init__(self, threshold: float = 0.0001) -> None:
        self._threshold = threshold

    @property
    def threshold(self) -> float:
        return self._threshold

    def build_report(
        self,
        outcomes: Iterable,
        elapsed_ms: float,
        bit_width: int,
    ) -> ExecutionReport:
        lines: List[str] = []
        for record in outcomes:
            outcome = to_outcome(record)
            if outcome.probability <= self._threshold:
                continue
            label = format_outcome_label(outcome.index, bit_width)
            lines.append(f"|{label}>: {format_percentage(outcome.probability)}")

        return ExecutionReport(
            elapsed_ms=elapsed_ms,
            header=format_header(elapsed_ms),
            lines=lines,
        )

    def render(
        self,
        outcomes: Iterable,
        elapsed_ms: float,
        bit_width: int,
        surface: TextSink,
    ) -> ExecutionReport:
        """Build the report and replace the surface's content with it."""
        report = self.build_report(outcomes, elapsed_ms, bit_width)
        surface.write(report.text)
        return report
