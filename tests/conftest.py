"""Shared pytest fixtures and configuration."""

import pytest

from fakevasp.config import TEMPLATE_DIR_ENV, TEMPLATE_FILES, EmulatorConfig

# POTCAR content is not valid UTF-8 on purpose: copies must be byte-exact
TEMPLATE_CONTENT = {
    "INCAR": b"SYSTEM = test\nINTERACTIVE = .TRUE.\nNSW = 0\n",
    "POTCAR": b"PAW_PBE Si 05Jan2001\n\xb5\xe7\xd7\xd3\n",
    "KPOINTS": b"Gamma\n0\nG\n1 1 1\n",
}


@pytest.fixture
def template_dir(tmp_path):
    """A template directory with INCAR, POTCAR and KPOINTS."""
    path = tmp_path / "templates"
    path.mkdir()
    for name in TEMPLATE_FILES:
        (path / name).write_bytes(TEMPLATE_CONTENT[name])
    return path


@pytest.fixture
def work_dir(tmp_path):
    """An empty directory for the emulator to run in."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def config(template_dir, work_dir):
    return EmulatorConfig(template_dir=template_dir, work_dir=work_dir)


@pytest.fixture
def template_env(monkeypatch, template_dir):
    """Point BBM_TPL_DIR at the template directory."""
    monkeypatch.setenv(TEMPLATE_DIR_ENV, str(template_dir))
    return template_dir


@pytest.fixture
def template_content():
    """Bytes written to each template file."""
    return dict(TEMPLATE_CONTENT)
