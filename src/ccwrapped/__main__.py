"""Allow ``python -m ccwrapped``."""

from ccwrapped.cli import app

if __name__ == "__main__":
    app()
