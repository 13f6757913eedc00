"""Allow ``python -m docspine``."""

from docspine.cli.app import run

if __name__ == "__main__":
    run()
