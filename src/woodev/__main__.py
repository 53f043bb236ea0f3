"""Allow ``python -m woodev``."""

from woodev.cli.cli import app

if __name__ == "__main__":
    app()
