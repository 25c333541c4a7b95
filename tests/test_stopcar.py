"""
Unit tests for the STOPCAR helpers.
"""

from fakevasp.stopcar import STOPCAR_CONTENT, clear_stopcar, write_stopcar


class TestStopcar:
    def test_write_creates_sentinel(self, work_dir):
        path = write_stopcar(work_dir)

        assert path == work_dir / "STOPCAR"
        assert path.read_text() == "LABORT = .TRUE.\n"
        assert STOPCAR_CONTENT == "LABORT = .TRUE.\n"

    def test_write_custom_name(self, work_dir):
        path = write_stopcar(work_dir, sentinel_name="ABORT")
        assert path.name == "ABORT"
        assert path.exists()

    def test_clear_removes_sentinel(self, work_dir):
        write_stopcar(work_dir)

        assert clear_stopcar(work_dir) is True
        assert not (work_dir / "STOPCAR").exists()

    def test_clear_without_sentinel(self, work_dir):
        assert clear_stopcar(work_dir) is False
