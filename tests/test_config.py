import pytest

from config import (
    DEFAULT_WORD_COUNT,
    WORDS_ENV_VAR,
    ConfigurationError,
    Settings,
    settings_from_args,
)


def test_defaults(monkeypatch):
    monkeypatch.delenv(WORDS_ENV_VAR, raising=False)
    settings = settings_from_args([])
    assert settings.word_count == DEFAULT_WORD_COUNT == 24
    assert settings.corpus_path is None
    assert settings.corpus_url is None
    assert settings.seed is None
    assert settings.log_level == "WARNING"


def test_words_flag(monkeypatch):
    monkeypatch.delenv(WORDS_ENV_VAR, raising=False)
    assert settings_from_args(["-w", "10"]).word_count == 10
    assert settings_from_args(["--words", "3"]).word_count == 3


def test_environment_sets_default_and_flag_wins(monkeypatch):
    monkeypatch.setenv(WORDS_ENV_VAR, "40")
    assert settings_from_args([]).word_count == 40
    assert settings_from_args(["--words", "5"]).word_count == 5


def test_non_integer_environment_value_is_rejected(monkeypatch):
    monkeypatch.setenv(WORDS_ENV_VAR, "lots")
    with pytest.raises(ConfigurationError):
        settings_from_args([])


def test_zero_words_is_rejected(monkeypatch):
    monkeypatch.delenv(WORDS_ENV_VAR, raising=False)
    with pytest.raises(ConfigurationError):
        settings_from_args(["--words", "0"])


def test_corpus_path_and_url_are_exclusive():
    settings = Settings(corpus_path="words.txt", corpus_url="https://example.com/w.txt")
    with pytest.raises(ConfigurationError):
        settings.validate()


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.delenv(WORDS_ENV_VAR, raising=False)
    assert settings_from_args(["--log-level", "debug"]).log_level == "DEBUG"


def test_unknown_log_level_exits_with_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        settings_from_args(["--log-level", "chatty"])
    assert exc_info.value.code == 2


def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)
