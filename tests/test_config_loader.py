from pathlib import Path

import pytest
from pydantic import ValidationError

from src.utils.config_loader import load_necessitous_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("NECESSITOUS_API_URL", "NECESSITOUS_API_TIMEOUT", "INTEGRATIONS_MODE"):
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.setattr("src.utils.config_loader.load_dotenv", lambda: False)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "necessitous_config.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_default_config_file_loads():
    config = load_necessitous_config()
    assert config.api.requests_path == "requests"
    assert config.integrations.mode == "auto"


def test_empty_file_uses_defaults(tmp_path):
    config = load_necessitous_config(_write(tmp_path, ""))
    assert config.api.base_url == ""
    assert config.api.timeout_seconds == 20.0
    assert config.use_real_client() is False


def test_base_url_switches_auto_mode_to_real(tmp_path):
    config = load_necessitous_config(_write(tmp_path, "api:\n  base_url: https://api.example.org/\n"))
    assert config.use_real_client() is True


def test_env_overrides_file(tmp_path, monkeypatch):
    monkeypatch.setenv("NECESSITOUS_API_URL", "https://env.example.org/")
    monkeypatch.setenv("NECESSITOUS_API_TIMEOUT", "5")
    monkeypatch.setenv("INTEGRATIONS_MODE", " MOCK ")

    config = load_necessitous_config(_write(tmp_path, "api:\n  base_url: https://file.example.org/\n"))

    assert config.api.base_url == "https://env.example.org/"
    assert config.api.timeout_seconds == 5.0
    assert config.use_real_client() is False


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_necessitous_config(tmp_path / "missing.yml")


def test_invalid_values_raise(tmp_path):
    with pytest.raises(ValidationError):
        load_necessitous_config(_write(tmp_path, "integrations:\n  mode: sometimes\n"))
