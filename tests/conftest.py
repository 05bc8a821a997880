import pytest

from dotenv_exec.config import CONFIG_PATH_VAR, OPTION_VARS


@pytest.fixture(autouse=True)
def _clean_dotenv_config(monkeypatch):
    """Keep the caller's DOTENV_CONFIG_* settings out of the tests."""
    for name in (CONFIG_PATH_VAR, *OPTION_VARS.values()):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_env(tmp_path):
    """Write a dotenv file under tmp_path and return its path as a string."""

    def _write(text: str, name: str = "a.env", encoding: str = "utf-8") -> str:
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return str(path)

    return _write
