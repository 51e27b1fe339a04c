"""Runtime helpers for pdflatex and bibtex runs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
from pathlib import Path
import subprocess

from rich.console import Console
from rich.text import Text

from makelatex.core.config import DEFAULT_TOOLCHAIN, SessionConfig, Toolchain
from makelatex.core.diagnostics import DiagnosticEmitter, NullEmitter
from makelatex.core.exceptions import ToolLaunchError

from .log import LABELS_CHANGED_WARNING, filter_interesting_lines, split_output


logger = logging.getLogger(__name__)

STATUS_PREFIX = "make-latex: "
RUN_COMPLETE_BANNER = "latex run complete -------------------------"
SUCCESS_STYLE = "green"
FAILURE_STYLE = "red"


@dataclass(frozen=True, slots=True)
class ProcessOutput:
    """Raw result of a captured external process run."""

    returncode: int
    lines: list[bytes]


@dataclass(frozen=True, slots=True)
class BuildOutcome:
    """Filtered result of a single pdflatex invocation."""

    lines: tuple[bytes, ...]
    returncode: int = 0
    rerun: bool = False

    @property
    def succeeded(self) -> bool:
        return not self.lines

    @property
    def labels_changed(self) -> bool:
        return LABELS_CHANGED_WARNING in self.lines


def read_process_lines(argv: Sequence[str]) -> ProcessOutput:
    """Run ``argv`` to completion and return its combined output as byte lines."""
    logger.debug("Running %s", " ".join(argv))
    try:
        completed = subprocess.run(
            list(argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        raise ToolLaunchError(argv, exc.strerror or str(exc)) from exc
    logger.debug("%s exited with status %s", argv[0], completed.returncode)
    return ProcessOutput(returncode=completed.returncode, lines=split_output(completed.stdout))


def say(console: Console, message: str, style: str | None = None) -> None:
    """Print a ``make-latex:`` status line."""
    console.print(Text(STATUS_PREFIX + message, style=style or ""), highlight=False)


def echo_raw_line(console: Console, line: bytes) -> None:
    """Write ``line`` to the console without re-encoding it."""
    stream = getattr(console.file, "buffer", None)
    if stream is None:
        console.out(line.decode("utf-8", errors="replace"), highlight=False)
        return
    console.file.flush()
    stream.write(line + b"\n")
    stream.flush()


class LatexBuilder:
    """Compile a document, report its diagnostics and rerun when references moved."""

    def __init__(
        self,
        console: Console,
        *,
        toolchain: Toolchain = DEFAULT_TOOLCHAIN,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.console = console
        self.toolchain = toolchain
        self.emitter = emitter or NullEmitter()

    def build(self, file: Path | str, is_rerun: bool = False) -> BuildOutcome:
        """Run the typesetting tool once, plus at most one rerun pass."""
        result = read_process_lines(self.toolchain.latex_command(file))
        outcome = BuildOutcome(
            lines=tuple(filter_interesting_lines(result.lines)),
            returncode=result.returncode,
            rerun=is_rerun,
        )
        for line in outcome.lines:
            echo_raw_line(self.console, line)
        # The banner reflects the filtered output only, not the exit status.
        say(
            self.console,
            RUN_COMPLETE_BANNER,
            SUCCESS_STYLE if outcome.succeeded else FAILURE_STYLE,
        )
        self.emitter.event(
            "latex_run",
            {
                "file": str(file),
                "lines": len(outcome.lines),
                "returncode": outcome.returncode,
                "rerun": is_rerun,
            },
        )

        if not is_rerun and outcome.labels_changed:
            say(self.console, "rerunning")
            self.build(file, True)
        return outcome

    def build_bibliography(self, config: SessionConfig) -> None:
        """Run bibtex when configured, then compile twice to settle citations."""
        if config.bibtex_file:
            result = read_process_lines(self.toolchain.bibtex_command(config.bibtex_file))
            for line in result.lines:
                echo_raw_line(self.console, line)
            self.emitter.event(
                "bibtex_run",
                {"file": config.bibtex_file, "returncode": result.returncode},
            )
            if result.returncode != 0:
                self.emitter.warning(
                    f"bibtex exited with status {result.returncode} for {config.bibtex_file}"
                )
        else:
            logger.debug("No bibliography file configured; skipping bibtex")

        self.build(config.main_file, False)
        self.build(config.main_file, False)


__all__ = [
    "FAILURE_STYLE",
    "RUN_COMPLETE_BANNER",
    "STATUS_PREFIX",
    "SUCCESS_STYLE",
    "BuildOutcome",
    "LatexBuilder",
    "ProcessOutput",
    "echo_raw_line",
    "read_process_lines",
    "say",
]
