"""Allow running lps as ``python -m lps``."""

from lps.cli.main import app

if __name__ == "__main__":
    app()
