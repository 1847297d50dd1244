"""Permite ejecutar `python -m vozform`."""

from vozform.cli import app

if __name__ == "__main__":
    app()
