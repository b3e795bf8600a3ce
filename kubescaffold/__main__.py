"""
Punto de entrada: python -m kubescaffold
"""

from kubescaffold.cli.app import app

if __name__ == "__main__":
    app()
