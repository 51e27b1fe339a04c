"""pdflatex and bibtex helpers: output filtering and build runners."""

from __future__ import annotations

from .log import (
    LABELS_CHANGED_WARNING,
    filter_interesting_lines,
    is_interesting,
    split_output,
)
from .runner import BuildOutcome, LatexBuilder, read_process_lines


__all__ = [
    "LABELS_CHANGED_WARNING",
    "BuildOutcome",
    "LatexBuilder",
    "filter_interesting_lines",
    "is_interesting",
    "read_process_lines",
    "split_output",
]
