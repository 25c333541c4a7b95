"""Writing and clearing the STOPCAR sentinel."""

from pathlib import Path

from fakevasp.config import SENTINEL_NAME
from fakevasp.logger import get_logger

logger = get_logger(__name__)

STOPCAR_CONTENT = "LABORT = .TRUE.\n"


def write_stopcar(work_dir: Path, sentinel_name: str = SENTINEL_NAME) -> Path:
    """Ask a running solver in `work_dir` to abort at its next step."""
    path = Path(work_dir) / sentinel_name
    path.write_text(STOPCAR_CONTENT, encoding="utf-8")
    logger.info(f"Wrote {path}")
    return path


def clear_stopcar(work_dir: Path, sentinel_name: str = SENTINEL_NAME) -> bool:
    """Remove the sentinel. Returns False if there was none."""
    path = Path(work_dir) / sentinel_name
    if not path.exists():
        return False
    path.unlink()
    logger.info(f"Removed {path}")
    return True
