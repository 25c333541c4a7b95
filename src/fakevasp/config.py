"""
Emulator configuration.

The template directory comes from the BBM_TPL_DIR environment variable unless
given explicitly; the working directory defaults to the current directory.
"""

import os
from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, Field

from fakevasp.errors import ConfigurationError

TEMPLATE_DIR_ENV = "BBM_TPL_DIR"
TEMPLATE_FILES = ("INCAR", "POTCAR", "KPOINTS")
SENTINEL_NAME = "STOPCAR"


class EmulatorConfig(BaseModel):
    """Where the emulator copies its inputs from and where it runs."""

    template_dir: Path
    work_dir: Path = Field(default_factory=Path.cwd)
    template_files: Tuple[str, ...] = TEMPLATE_FILES
    sentinel_name: str = SENTINEL_NAME

    @property
    def sentinel_path(self) -> Path:
        return self.work_dir / self.sentinel_name

    @classmethod
    def from_env(
        cls,
        template_dir: Optional[Path] = None,
        work_dir: Optional[Path] = None,
    ) -> "EmulatorConfig":
        """
        Build a config, falling back to the environment for the template dir.

        Raises:
            ConfigurationError: if no template directory is given or set.
        """
        if template_dir is None:
            value = os.environ.get(TEMPLATE_DIR_ENV, "").strip()
            if not value:
                raise ConfigurationError(
                    f"Template directory not set: export {TEMPLATE_DIR_ENV} "
                    "or pass --template-dir"
                )
            template_dir = Path(value)

        return cls(template_dir=template_dir, work_dir=work_dir or Path.cwd())
