"""Typer application wiring for the make-latex CLI."""

from __future__ import annotations

import typer

from makelatex.core.exceptions import MakeLatexError
from makelatex.ui.cli.commands.watch import watch

from .state import debug_enabled, emit_error, get_cli_state


app = typer.Typer(
    help="Watch, compile and inspect a LaTeX document from a single terminal.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


app.command()(watch)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app(prog_name="make-latex")
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except MakeLatexError as exc:
        if debug_enabled():
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    except Exception as exc:  # pragma: no cover - last-resort reporting
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
