"""Entry point for running as `python -m jeopardy_tool`."""

from jeopardy_tool.cli.main import app

if __name__ == "__main__":
    app()
