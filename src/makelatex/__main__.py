"""Allow ``python -m makelatex``."""

from makelatex.ui.cli import main


if __name__ == "__main__":
    main()
