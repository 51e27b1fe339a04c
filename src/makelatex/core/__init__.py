"""Core configuration, diagnostics and session objects."""

from __future__ import annotations

from .config import DEFAULT_TOOLCHAIN, SessionConfig, Toolchain, derive_pdf_path
from .exceptions import MakeLatexError, ToolLaunchError


__all__ = [
    "DEFAULT_TOOLCHAIN",
    "MakeLatexError",
    "SessionConfig",
    "ToolLaunchError",
    "Toolchain",
    "derive_pdf_path",
]
