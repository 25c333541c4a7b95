"""
Unit tests for emulator configuration.
"""

from pathlib import Path

import pytest

from fakevasp.config import TEMPLATE_DIR_ENV, EmulatorConfig
from fakevasp.errors import ConfigurationError


def test_config_defaults(template_dir, work_dir):
    """Test that file names and sentinel default to the VASP ones."""
    config = EmulatorConfig(template_dir=template_dir, work_dir=work_dir)

    assert config.template_files == ("INCAR", "POTCAR", "KPOINTS")
    assert config.sentinel_name == "STOPCAR"
    assert config.sentinel_path == work_dir / "STOPCAR"


def test_config_reads_template_dir_from_env(template_env, work_dir):
    """Test that BBM_TPL_DIR supplies the template directory."""
    config = EmulatorConfig.from_env(work_dir=work_dir)

    assert config.template_dir == template_env
    assert config.work_dir == work_dir


def test_config_explicit_template_dir_wins(monkeypatch, template_dir, work_dir):
    monkeypatch.setenv(TEMPLATE_DIR_ENV, "/somewhere/else")

    config = EmulatorConfig.from_env(template_dir=template_dir, work_dir=work_dir)

    assert config.template_dir == template_dir


def test_config_work_dir_defaults_to_cwd(template_env, work_dir, monkeypatch):
    monkeypatch.chdir(work_dir)

    config = EmulatorConfig.from_env()

    assert config.work_dir == Path.cwd()


@pytest.mark.parametrize("value", [None, "", "   "])
def test_config_missing_template_dir(monkeypatch, value):
    """Test that an unset or blank BBM_TPL_DIR is a configuration error."""
    if value is None:
        monkeypatch.delenv(TEMPLATE_DIR_ENV, raising=False)
    else:
        monkeypatch.setenv(TEMPLATE_DIR_ENV, value)

    with pytest.raises(ConfigurationError, match=TEMPLATE_DIR_ENV):
        EmulatorConfig.from_env()
