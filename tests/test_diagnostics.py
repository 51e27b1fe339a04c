from __future__ import annotations

import pytest

from makelatex.core.diagnostics import DiagnosticEmitter, NullEmitter, format_event_message
from makelatex.ui.cli.diagnostics import CliEmitter
from makelatex.ui.cli.state import set_cli_state


def test_null_emitter_is_noop(capsys: pytest.CaptureFixture[str]) -> None:
    emitter = NullEmitter()

    emitter.warning("nothing to see")
    emitter.event("ignored", {"value": 1})

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_emitters_satisfy_protocol() -> None:
    assert isinstance(NullEmitter(), DiagnosticEmitter)
    assert isinstance(CliEmitter(state=set_cli_state(verbosity=0)), DiagnosticEmitter)


def test_format_event_message() -> None:
    assert (
        format_event_message("latex_run", {"file": "a.tex", "lines": 0, "returncode": 0})
        == "Compiled a.tex (0 diagnostic lines, exit status 0)"
    )
    assert (
        format_event_message("latex_run", {"file": "doc.tex", "lines": 1, "rerun": True})
        == "Compiled doc.tex (1 diagnostic line, rerun)"
    )
    assert (
        format_event_message("bibtex_run", {"file": "a", "returncode": 2})
        == "Processed bibliography a (exit status 2)"
    )
    assert format_event_message("unknown", {}) is None


def test_cli_emitter_bridges_state(capsys: pytest.CaptureFixture[str]) -> None:
    state = set_cli_state(verbosity=1, debug=False)
    emitter = CliEmitter(state=state)

    emitter.warning("bibtex exited with status 2 for refs")
    emitter.event("bibtex_run", {"file": "refs", "returncode": 2})

    captured = capsys.readouterr()
    assert "warning: bibtex exited with status 2 for refs" in captured.err
    assert "Processed bibliography refs" in captured.out


def test_cli_emitter_warns_even_when_quiet(capsys: pytest.CaptureFixture[str]) -> None:
    state = set_cli_state(verbosity=0, debug=False)
    emitter = CliEmitter(state=state)

    emitter.event("latex_run", {"file": "doc.tex", "lines": 0})
    emitter.warning("bibtex exited with status 1 for doc")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "warning: bibtex exited with status 1 for doc" in captured.err
