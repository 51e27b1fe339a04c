"""Implementation of the `make-latex` command."""

from __future__ import annotations

from makelatex.core.config import SessionConfig
from makelatex.core.session import Session

from .._options import (
    BibtexOption,
    DebugOption,
    ExtraFilesArgument,
    MainFileArgument,
    VerbosityOption,
)
from ..diagnostics import CliEmitter
from ..loop import run_session
from ..state import configure_logging, set_cli_state


def watch(
    main_file: MainFileArgument,
    extra_files: ExtraFilesArgument = None,
    bibtex: BibtexOption = None,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
) -> None:
    """Watch a LaTeX document, rebuild it on save and serve single-key commands.

    Keys: m rebuild, b bibtex + two builds, t terminal, e editor, p PDF viewer,
    q quit.
    """
    state = set_cli_state(verbosity=verbose, debug=debug)
    configure_logging(state)

    config = SessionConfig.from_arguments(
        main_file,
        bibtex_file=bibtex,
        extra_files=extra_files,
    )
    session = Session(
        config=config,
        console=state.console,
        emitter=CliEmitter(state=state),
    )
    run_session(session)
