"""
Entry point for ``python -m officehours``.
"""

from .cli.app import app

if __name__ == "__main__":
    app()
