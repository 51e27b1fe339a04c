"""Diagnostic abstractions shared by the build runners and the CLI."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Interface used to surface warnings and structured events."""

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a human-friendly summary for selected diagnostic events."""
    data = dict(payload)

    if name == "latex_run":
        file = data.get("file") or "<unknown>"
        lines = data.get("lines", 0)
        returncode = data.get("returncode")
        details = [f"{lines} diagnostic line{'s' if lines != 1 else ''}"]
        if returncode is not None:
            details.append(f"exit status {returncode}")
        if data.get("rerun"):
            details.append("rerun")
        return f"Compiled {file} ({', '.join(details)})"

    if name == "bibtex_run":
        file = data.get("file") or "<unknown>"
        returncode = data.get("returncode")
        suffix = f" (exit status {returncode})" if returncode is not None else ""
        return f"Processed bibliography {file}{suffix}"

    return None


__all__ = [
    "DiagnosticEmitter",
    "NullEmitter",
    "format_event_message",
]
