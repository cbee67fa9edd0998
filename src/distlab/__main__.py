"""Allow ``python -m distlab``."""

from .cli import app

if __name__ == "__main__":
    app()
