"""CLI command implementations exposed via `makelatex.ui.cli`."""

from __future__ import annotations

from .watch import watch


__all__ = ["watch"]
