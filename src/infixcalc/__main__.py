"""Run the infixcalc CLI.

Usage:
    python -m infixcalc eval "3 + 2 * 4"
"""

from infixcalc.cli.main import cli

if __name__ == "__main__":
    cli()
