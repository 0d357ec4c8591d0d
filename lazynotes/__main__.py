"""Module entrypoint for ``python -m lazynotes``."""

from .cli import main


if __name__ == "__main__":
    main()
