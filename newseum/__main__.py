"""Entry point for newseum: python -m newseum"""

from newseum.cli.app import app

if __name__ == "__main__":
    app()
