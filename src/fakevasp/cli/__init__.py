"""
fakevasp CLI.

This package splits CLI commands into focused modules:
- main:   run, block
- stopcar: stop, clear
"""

import typer

from fakevasp.cli.main import configure_logging, load_environment, register_commands
from fakevasp.cli.stopcar import register_stopcar_commands

app = typer.Typer(help="fakevasp - interactive VASP stand-in for test harnesses")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging (DEBUG level)"
    ),
):
    """
    fakevasp - interactive VASP stand-in for test harnesses.
    """
    configure_logging(verbose)
    load_environment()


register_commands(app)
register_stopcar_commands(app)

if __name__ == "__main__":
    app()
