"""Utilities for filtering the output of LaTeX engine runs.

pdflatex output may contain bytes that are not valid in any single text
encoding, so every helper here works on ``bytes`` and never decodes.
"""

from __future__ import annotations

from collections.abc import Iterable


LATEX_WARNING = b"LaTeX Warning:"
OVERFULL_HBOX_WARNING = b"Overfull \\hbox"
LATEX_ERROR = b"!"
LINE_NUMBER = b"l."

INTERESTING_PREFIXES: tuple[bytes, ...] = (
    LATEX_WARNING,
    OVERFULL_HBOX_WARNING,
    LATEX_ERROR,
    LINE_NUMBER,
)

LABELS_CHANGED_WARNING = (
    b"LaTeX Warning: Label(s) may have changed. Rerun to get cross-references right."
)


def split_output(data: bytes) -> list[bytes]:
    """Split captured tool output on newline bytes.

    Carriage returns are kept as part of the line. A final newline does not
    produce a trailing empty line.
    """
    if not data:
        return []
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return lines


def is_interesting(line: bytes) -> bool:
    """Return whether ``line`` starts with one of the reported prefixes."""
    return line.startswith(INTERESTING_PREFIXES)


def filter_interesting_lines(lines: Iterable[bytes]) -> list[bytes]:
    """Keep the warning, error and line-context lines, in their original order."""
    return [line for line in lines if is_interesting(line)]


__all__ = [
    "INTERESTING_PREFIXES",
    "LABELS_CHANGED_WARNING",
    "LATEX_ERROR",
    "LATEX_WARNING",
    "LINE_NUMBER",
    "OVERFULL_HBOX_WARNING",
    "filter_interesting_lines",
    "is_interesting",
    "split_output",
]
