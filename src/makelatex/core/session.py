"""Session façade tying configuration, builds and companion tools together."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console

from makelatex.adapters import launchers
from makelatex.adapters.latex.runner import BuildOutcome, LatexBuilder, say

from .config import DEFAULT_TOOLCHAIN, SessionConfig, Toolchain
from .diagnostics import DiagnosticEmitter, NullEmitter


@dataclass(slots=True)
class Session:
    """Operations available to the watch loop and to the command keys."""

    config: SessionConfig
    console: Console
    toolchain: Toolchain = DEFAULT_TOOLCHAIN
    emitter: DiagnosticEmitter = field(default_factory=NullEmitter)
    builder: LatexBuilder = field(init=False)

    def __post_init__(self) -> None:
        self.builder = LatexBuilder(self.console, toolchain=self.toolchain, emitter=self.emitter)

    def say(self, message: str, style: str | None = None) -> None:
        say(self.console, message, style)

    def make(self) -> BuildOutcome:
        return self.builder.build(self.config.main_file, False)

    def make_bibliography(self) -> None:
        self.builder.build_bibliography(self.config)

    def open_terminal(self) -> None:
        launchers.spawn_terminal(self.config.main_file, self.toolchain)

    def open_editor(self) -> None:
        launchers.spawn_editor(self.config.main_file, self.toolchain)

    def open_pdf_viewer(self) -> None:
        launchers.spawn_pdf_viewer(self.config.pdf_file, self.toolchain)


__all__ = ["Session"]
