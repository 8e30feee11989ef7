# streamhub/__main__.py
"""
Allows the CLI to be started with `python -m streamhub`.
"""
from streamhub.cli import app

if __name__ == "__main__":
    app()
