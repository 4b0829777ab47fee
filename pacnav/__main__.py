"""Module entrypoint for ``python -m pacnav``."""

from .cli import main


if __name__ == "__main__":
    main()
