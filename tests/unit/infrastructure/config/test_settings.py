from pathlib import Path

import pytest

from routectl.infrastructure.config import settings


@pytest.fixture
def fresh_settings(monkeypatch, tmp_path: Path):
    """Unloaded settings module working from an empty directory."""
    monkeypatch.setattr(settings, "_config", {})
    monkeypatch.setattr(settings, "_loaded", False)
    monkeypatch.chdir(tmp_path)
    return settings


def test_yaml_values_support_nested_and_flat_keys(fresh_settings, tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("logging:\n  level: DEBUG\nsession.file: /tmp/s.yaml\n")

    fresh_settings.load_configuration(config_file=config_file)

    assert fresh_settings.get_config("logging.level") == "DEBUG"
    assert fresh_settings.get_config("session.file") == "/tmp/s.yaml"
    assert fresh_settings.get_config("logging.file", "fallback") == "fallback"


def test_environment_overrides_yaml(fresh_settings, tmp_path: Path, monkeypatch):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("uaa:\n  default_origin: uaa\n")
    monkeypatch.setenv("ROUTECTL_UAA_DEFAULT_ORIGIN", "ldap")

    fresh_settings.load_configuration(config_file=config_file)

    assert fresh_settings.get_default_origin() == "ldap"


def test_dotenv_file_is_loaded(fresh_settings, tmp_path: Path, monkeypatch):
    # setenv first so monkeypatch removes what load_dotenv writes
    monkeypatch.setenv("ROUTECTL_PLATFORM_CLIENT_FACTORY", "")
    monkeypatch.delenv("ROUTECTL_PLATFORM_CLIENT_FACTORY")
    env_file = tmp_path / ".env"
    env_file.write_text("ROUTECTL_PLATFORM_CLIENT_FACTORY=pkg.mod:factory\n")

    fresh_settings.load_configuration(config_file=tmp_path / "missing.yaml")

    assert fresh_settings.get_config("platform.client_factory") == "pkg.mod:factory"


def test_test_config_wins(fresh_settings, monkeypatch):
    monkeypatch.setenv("ROUTECTL_SESSION_FILE", "/from/env.yaml")
    fresh_settings.set_config_for_testing({"session.file": "~/override.yaml"})

    assert fresh_settings.get_session_file() == Path("~/override.yaml").expanduser()

    fresh_settings.clear_test_config()
    assert fresh_settings.get_session_file() == Path("/from/env.yaml")


def test_default_origin_is_empty(fresh_settings, monkeypatch):
    monkeypatch.delenv("ROUTECTL_UAA_DEFAULT_ORIGIN", raising=False)
    assert fresh_settings.get_default_origin() == ""
