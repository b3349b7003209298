import pytest

from delimited.errors import SettingsError
from delimited.settings import Settings, load_settings


def test_defaults() -> None:
    settings = load_settings({})
    assert settings == Settings(log_level="WARNING", separator="\t", missing="")


def test_reads_prefixed_variables() -> None:
    settings = load_settings(
        {
            "DELIMITED_LOG_LEVEL": "debug",
            "DELIMITED_SEPARATOR": ",",
            "DELIMITED_MISSING": "-",
            "UNRELATED": "ignored",
        }
    )
    assert settings.log_level == "DEBUG"
    assert settings.separator == ","
    assert settings.missing == "-"


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DELIMITED_SEPARATOR", "|")
    assert load_settings().separator == "|"


def test_invalid_level() -> None:
    with pytest.raises(SettingsError, match="Invalid environment configuration"):
        load_settings({"DELIMITED_LOG_LEVEL": "loud"})


def test_updated_validates() -> None:
    settings = load_settings({})
    assert settings.updated(missing="?").missing == "?"
    with pytest.raises(SettingsError, match="Invalid setting"):
        settings.updated(log_level="loud")
