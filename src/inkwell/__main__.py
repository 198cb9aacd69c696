"""Module entrypoint for ``python -m inkwell``."""

from inkwell.cli import app

if __name__ == "__main__":
    app()
