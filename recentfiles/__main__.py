"""Module entrypoint for ``python -m recentfiles``."""

from .cli import main


if __name__ == "__main__":
    main()
