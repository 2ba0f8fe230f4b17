import os

import pytest


@pytest.fixture
def bundled_table_text():
    """The text of the bundled bit-table YAML, for tests that write modified copies."""
    from novatel_decoder.tables import _default_table_path

    with open(_default_table_path()) as f:
        return f.read()


@pytest.fixture
def write_table(tmp_path):
    """Writes YAML text to a temporary table file and returns its path."""

    def _write(text: str, name: str = "status_bits.yml") -> str:
        path = tmp_path / name
        path.write_text(text)
        return os.fspath(path)

    return _write
