"""Detached launches of the terminal, editor and PDF viewer."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from pathlib import Path
import shlex
import subprocess

from makelatex.core.config import DEFAULT_TOOLCHAIN, Toolchain
from makelatex.core.exceptions import ToolLaunchError


logger = logging.getLogger(__name__)


def spawn_process(argv: Sequence[str]) -> subprocess.Popen[bytes]:
    """Start ``argv`` in its own session without waiting for it."""
    logger.debug("Spawning %s", shlex.join(argv))
    try:
        return subprocess.Popen(
            list(argv),
            stdin=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise ToolLaunchError(argv, exc.strerror or str(exc)) from exc


def terminal_command(
    main_file: Path | str, toolchain: Toolchain = DEFAULT_TOOLCHAIN
) -> list[str]:
    """Open a terminal in the directory holding the real main file."""
    directory = Path(main_file).resolve().parent
    return [toolchain.terminal, "-cd", str(directory)]


def editor_command(
    main_file: Path | str, toolchain: Toolchain = DEFAULT_TOOLCHAIN
) -> list[str]:
    """Open the editor inside a terminal so it can act as a synctex server."""
    return [
        toolchain.terminal,
        "-e",
        "sh",
        "-c",
        f"{toolchain.editor} {shlex.quote(str(main_file))}",
    ]


def viewer_command(
    pdf_file: Path | str, toolchain: Toolchain = DEFAULT_TOOLCHAIN
) -> list[str]:
    """Open the viewer with reverse search pointing back at the editor."""
    return [toolchain.viewer, "-s", "-x", toolchain.synctex_command, str(pdf_file)]


def spawn_terminal(
    main_file: Path | str, toolchain: Toolchain = DEFAULT_TOOLCHAIN
) -> subprocess.Popen[bytes]:
    return spawn_process(terminal_command(main_file, toolchain))


def spawn_editor(
    main_file: Path | str, toolchain: Toolchain = DEFAULT_TOOLCHAIN
) -> subprocess.Popen[bytes]:
    return spawn_process(editor_command(main_file, toolchain))


def spawn_pdf_viewer(
    pdf_file: Path | str, toolchain: Toolchain = DEFAULT_TOOLCHAIN
) -> subprocess.Popen[bytes]:
    return spawn_process(viewer_command(pdf_file, toolchain))


__all__ = [
    "editor_command",
    "spawn_editor",
    "spawn_pdf_viewer",
    "spawn_process",
    "spawn_terminal",
    "terminal_command",
    "viewer_command",
]
