"""
Fixture emulator for an interactive VASP run.

The emulator copies INCAR, POTCAR and KPOINTS from the template directory,
prints one progress block, and then prints the block again for every line it
reads from stdin. It stops with status 0 when stdin closes, or with status 1
when a STOPCAR file shows up in the working directory.

Usage:
    BBM_TPL_DIR=/path/to/templates fakevasp run < positions.txt
"""

import shutil
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from fakevasp.config import EmulatorConfig
from fakevasp.logger import get_logger
from fakevasp.transcript import write_progress_block, write_sentinel_message

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_STOPPED = 1


def copy_templates(config: EmulatorConfig) -> List[Path]:
    """
    Copy the input templates into the working directory.

    Copy errors are not caught: a missing template aborts the run.

    Returns:
        The copied file paths, in template order.
    """
    copied = []
    for name in config.template_files:
        source = config.template_dir / name
        target = config.work_dir / name
        shutil.copyfile(source, target)
        logger.debug(f"Copied {source} -> {target}")
        copied.append(target)
    return copied


class Emulator:
    """Replays the progress transcript once per stdin line."""

    def __init__(
        self,
        config: EmulatorConfig,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.config = config
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.steps = 0

    def sentinel_present(self) -> bool:
        return self.config.sentinel_path.exists()

    def emit(self) -> None:
        write_progress_block(self.stdout)
        self.steps += 1

    def run(self) -> int:
        """Run until stdin closes or the sentinel appears; return the exit code."""
        self.emit()

        while True:
            line = self.stdin.readline()
            if not line:
                logger.info(f"stdin closed after {self.steps} blocks")
                return EXIT_OK

            if self.sentinel_present():
                write_sentinel_message(self.stdout)
                logger.info(f"{self.config.sentinel_name} found after {self.steps} blocks")
                return EXIT_STOPPED

            self.emit()


def run_emulator(
    config: EmulatorConfig,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Copy the templates, then run the read loop."""
    copy_templates(config)
    return Emulator(config, stdin=stdin, stdout=stdout).run()
