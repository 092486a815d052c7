"""Allow ``python -m mkdo``."""

from mkdo.cli.app import app

if __name__ == "__main__":
    app(prog_name="mkdo")
