import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file


def test_defaults():
    settings = AppSettings(_env_file=None)

    assert settings.seed_examples is True
    assert settings.show_banner is True
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ANIMAL_HIERARCHY_SEED_EXAMPLES", "false")
    monkeypatch.setenv("ANIMAL_HIERARCHY_LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.seed_examples is False
    assert settings.log_level == "DEBUG"


def test_dotenv_in_working_directory(tmp_path):
    (tmp_path / ".env").write_text("ANIMAL_HIERARCHY_SHOW_BANNER=0\n", encoding="utf-8")

    settings = AppSettings(_env_file=str(tmp_path / ".env"))

    assert settings.show_banner is False


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("ANIMAL_HIERARCHY_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_user_env_file_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_env_file() == tmp_path / "animal-hierarchy" / ".env"


def test_user_env_file_is_read_at_construction(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    user_env = tmp_path / "xdg" / "animal-hierarchy" / ".env"
    user_env.parent.mkdir(parents=True)
    user_env.write_text("ANIMAL_HIERARCHY_SEED_EXAMPLES=false\n", encoding="utf-8")

    settings = AppSettings()

    assert settings.seed_examples is False
