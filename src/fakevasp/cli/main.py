"""
Top-level CLI commands: run, block.
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from fakevasp.config import TEMPLATE_DIR_ENV, EmulatorConfig
from fakevasp.errors import ConfigurationError
from fakevasp.transcript import write_progress_block


def configure_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    from fakevasp.logger import setup_logging

    log_level = "DEBUG" if verbose else "WARNING"
    setup_logging(level=log_level)


def load_environment():
    """Load variables from ./.env without overriding the real environment."""
    env_file = Path.cwd() / ".env"
    if env_file.is_file():
        load_dotenv(env_file, override=False)

        from fakevasp.logger import get_logger

        get_logger(__name__).debug(f"Loaded environment from {env_file}")


def register_commands(app: typer.Typer):
    @app.command()
    def run(
        template_dir: Optional[Path] = typer.Option(
            None,
            "--template-dir",
            "-t",
            help=f"Directory holding INCAR, POTCAR and KPOINTS (default: ${TEMPLATE_DIR_ENV})",
        ),
        work_dir: Optional[Path] = typer.Option(
            None, "--work-dir", "-w", help="Directory to run in (default: cwd)"
        ),
    ):
        """Emulate an interactive VASP run on stdin/stdout."""
        from fakevasp.emulator import run_emulator

        try:
            config = EmulatorConfig.from_env(template_dir=template_dir, work_dir=work_dir)
        except ConfigurationError as e:
            typer.echo(f"❌ {e}", err=True)
            raise typer.Exit(code=2)

        code = run_emulator(config, stdin=sys.stdin, stdout=sys.stdout)
        raise typer.Exit(code=code)

    @app.command()
    def block():
        """Print one progress block."""
        write_progress_block(sys.stdout)
