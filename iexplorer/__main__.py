"""Module entrypoint for ``python -m iexplorer``."""

from .cli import main


if __name__ == "__main__":
    main()
