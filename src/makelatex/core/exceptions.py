"""Custom exception hierarchy for the build loop."""

from __future__ import annotations

from collections.abc import Sequence


class MakeLatexError(RuntimeError):
    """Base exception for make-latex failures."""


class ToolLaunchError(MakeLatexError):
    """Raised when an external program cannot be started."""

    def __init__(self, argv: Sequence[str], reason: str | None = None) -> None:
        self.argv = list(argv)
        program = self.argv[0] if self.argv else "<empty command>"
        message = f"Unable to launch '{program}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


__all__ = [
    "MakeLatexError",
    "ToolLaunchError",
]
