"""
CLI subcommands for the STOPCAR sentinel.

Usage:
    fakevasp stop [--work-dir DIR]
    fakevasp clear [--work-dir DIR]
"""

from pathlib import Path

import typer

from fakevasp.config import SENTINEL_NAME
from fakevasp.stopcar import clear_stopcar, write_stopcar


def register_stopcar_commands(app: typer.Typer):
    @app.command()
    def stop(
        work_dir: Path = typer.Option(
            Path("."), "--work-dir", "-w", help="Directory of the running emulator"
        ),
    ):
        """Write STOPCAR so the emulator exits on its next input line."""
        path = write_stopcar(work_dir)
        typer.echo(f"✅ Wrote {path}")

    @app.command()
    def clear(
        work_dir: Path = typer.Option(
            Path("."), "--work-dir", "-w", help="Directory of the emulator"
        ),
    ):
        """Remove STOPCAR."""
        if clear_stopcar(work_dir):
            typer.echo(f"✅ Removed {SENTINEL_NAME}")
        else:
            typer.echo(f"No {SENTINEL_NAME} in {work_dir}")
