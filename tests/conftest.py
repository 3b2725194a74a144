import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def write_lines(tmp_path):
    def _write(name, lines):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return _write
