"""Main entry point for ``python -m strkit``."""

from strkit.cli.main import app

if __name__ == "__main__":
    app(prog_name="strkit")
