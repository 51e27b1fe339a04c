"""Shared Typer option definitions for the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
DIAGNOSTICS_PANEL = "Diagnostics"

MainFileArgument = Annotated[
    Path,
    typer.Argument(
        metavar="MAIN_FILE",
        help="Root LaTeX document to watch and compile.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ExtraFilesArgument = Annotated[
    list[Path] | None,
    typer.Argument(
        metavar="[FILES]...",
        help="Additional files belonging to the document.",
        show_default=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

BibtexOption = Annotated[
    str | None,
    typer.Option(
        "--bibtex",
        "-b",
        metavar="FILE",
        help="The bibtex file your tex file uses.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase diagnostic output (repeat for more detail).",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
