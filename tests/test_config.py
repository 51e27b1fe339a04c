from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from makelatex.core.config import DEFAULT_TOOLCHAIN, SessionConfig, Toolchain, derive_pdf_path


@pytest.mark.parametrize(
    ("main_file", "expected"),
    [
        ("paper.tex", "paper.pdf"),
        ("notes.v2.tex", "notes.v2.pdf"),
        ("paper", "paper.pdf"),
        ("chapters/intro.ltx", "chapters/intro.pdf"),
    ],
)
def test_pdf_path_replaces_final_extension(main_file: str, expected: str) -> None:
    assert derive_pdf_path(main_file) == Path(expected)
    assert SessionConfig.from_arguments(main_file).pdf_file == Path(expected)


def test_pdf_file_cannot_be_set_independently() -> None:
    config = SessionConfig.from_arguments("paper.tex")

    # Older interpreters report non-field writes on slotted frozen classes as TypeError.
    with pytest.raises((AttributeError, TypeError)):
        config.pdf_file = Path("other.pdf")  # type: ignore[misc]
    assert config.pdf_file == Path("paper.pdf")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.main_file = Path("other.tex")  # type: ignore[misc]


def test_from_arguments_normalises_values() -> None:
    config = SessionConfig.from_arguments(
        "paper.tex",
        bibtex_file="",
        extra_files=["a.tex", Path("b.tex")],
    )

    assert config.main_file == Path("paper.tex")
    assert config.bibtex_file is None
    assert config.extra_files == (Path("a.tex"), Path("b.tex"))


def test_default_toolchain_commands() -> None:
    assert DEFAULT_TOOLCHAIN.latex_command(Path("paper.tex")) == [
        "pdflatex",
        "--halt-on-error",
        "-interaction=nonstopmode",
        "-synctex=1",
        "paper.tex",
    ]
    assert DEFAULT_TOOLCHAIN.bibtex_command("paper") == ["bibtex", "paper"]


def test_toolchain_overrides() -> None:
    toolchain = Toolchain(latex="xelatex")

    assert toolchain.latex_command("a.tex")[0] == "xelatex"
    assert toolchain.bibtex == "bibtex"
