import pytest

from pdfsigscan.core.config import Config, set_config


@pytest.fixture(autouse=True)
def default_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    set_config(Config.default())
    yield
    set_config(Config.default())


@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, content: bytes):
        path = tmp_path / name
        path.write_bytes(content)
        return path
    return _write
