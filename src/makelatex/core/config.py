"""Session and toolchain configuration objects."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path


PDF_EXTENSION = "pdf"


def derive_pdf_path(main_file: Path | str) -> Path:
    """Return ``main_file`` with its final extension replaced by ``pdf``."""
    return Path(main_file).with_suffix(f".{PDF_EXTENSION}")


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Immutable description of the document being worked on."""

    main_file: Path
    bibtex_file: str | None = None
    extra_files: tuple[Path, ...] = field(default_factory=tuple)

    @property
    def pdf_file(self) -> Path:
        """Output document produced by the typesetting tool."""
        return derive_pdf_path(self.main_file)

    @classmethod
    def from_arguments(
        cls,
        main_file: Path | str,
        *,
        bibtex_file: str | None = None,
        extra_files: Iterable[Path | str] | None = None,
    ) -> SessionConfig:
        """Build a configuration from raw command-line values."""
        return cls(
            main_file=Path(main_file),
            bibtex_file=bibtex_file or None,
            extra_files=tuple(Path(entry) for entry in extra_files or ()),
        )


@dataclass(frozen=True, slots=True)
class Toolchain:
    """Names of the external programs driven by a session."""

    latex: str = "pdflatex"
    bibtex: str = "bibtex"
    terminal: str = "urxvt"
    editor: str = "vim --servername SYNCTEX"
    viewer: str = "zathura"
    synctex_command: str = "vim --servername SYNCTEX --remote-send %{line}gg"

    def latex_command(self, file: Path | str) -> list[str]:
        """Return the argv compiling ``file`` in batch mode with synctex output."""
        return [
            self.latex,
            "--halt-on-error",
            "-interaction=nonstopmode",
            "-synctex=1",
            str(file),
        ]

    def bibtex_command(self, bibtex_file: str) -> list[str]:
        """Return the argv running the bibliography tool."""
        return [self.bibtex, bibtex_file]


DEFAULT_TOOLCHAIN = Toolchain()


__all__ = [
    "DEFAULT_TOOLCHAIN",
    "PDF_EXTENSION",
    "SessionConfig",
    "Toolchain",
    "derive_pdf_path",
]
