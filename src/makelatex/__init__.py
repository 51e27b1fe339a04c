"""Watch-and-rebuild loop for authoring a single LaTeX document."""

from __future__ import annotations

from makelatex.adapters.latex import (
    LABELS_CHANGED_WARNING,
    BuildOutcome,
    LatexBuilder,
    filter_interesting_lines,
    is_interesting,
)
from makelatex.adapters.watch import OneShotWatch
from makelatex.core.config import DEFAULT_TOOLCHAIN, SessionConfig, Toolchain, derive_pdf_path
from makelatex.core.exceptions import MakeLatexError, ToolLaunchError
from makelatex.core.session import Session
from makelatex.version import get_version


__version__ = get_version()

__all__ = [
    "DEFAULT_TOOLCHAIN",
    "LABELS_CHANGED_WARNING",
    "BuildOutcome",
    "LatexBuilder",
    "MakeLatexError",
    "OneShotWatch",
    "Session",
    "SessionConfig",
    "ToolLaunchError",
    "Toolchain",
    "__version__",
    "derive_pdf_path",
    "filter_interesting_lines",
    "get_version",
    "is_interesting",
]
