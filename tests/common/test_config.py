import logging

from common.config import DEFAULT_ENVIRONMENT, DEFAULT_LOG_LEVEL, Settings


def test_defaults_without_environment() -> None:
    settings = Settings.from_env()

    assert settings.environment == DEFAULT_ENVIRONMENT
    assert settings.log_level == DEFAULT_LOG_LEVEL
    assert settings.resolved_log_level() == logging.WARNING


def test_process_environment_wins_over_env_file(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("HEADERTOOL_ENV=staging\nHEADERTOOL_LOG_LEVEL=INFO\n", encoding="utf-8")
    monkeypatch.setenv("HEADERTOOL_LOG_LEVEL", "ERROR")

    settings = Settings.from_env(env_files=[str(env_file)])

    assert settings.environment == "staging"
    assert settings.resolved_log_level() == logging.ERROR


def test_missing_env_file_is_skipped(tmp_path) -> None:
    settings = Settings.from_env(env_files=[str(tmp_path / "absent.env")])

    assert settings.log_level == DEFAULT_LOG_LEVEL


def test_numeric_and_unknown_levels() -> None:
    assert Settings(log_level="10").resolved_log_level() == logging.DEBUG
    assert Settings(log_level="debug").resolved_log_level() == logging.DEBUG
    assert Settings(log_level="loud").resolved_log_level() is None


def test_non_ascii_digit_level_is_unknown() -> None:
    assert Settings(log_level="²").resolved_log_level() is None
