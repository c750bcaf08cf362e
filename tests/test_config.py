from __future__ import annotations

import pytest

from momentum_backtest.config import DEFAULT_UNIVERSE, Settings, parse_bool, parse_symbols

ENV_KEYS = [
    "YEAR",
    "SYMBOLS",
    "DATA_DIR",
    "DATA_FORMAT",
    "RESULTS_DIR",
    "SHOULD_DOWNLOAD",
    "EXCHANGE_SUFFIX",
    "DOWNLOAD_THROTTLE_SECONDS",
    "MAX_WORKERS",
    "LOG_LEVEL",
]


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("momentum_backtest.config.load_dotenv", lambda *args, **kwargs: None)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_settings_defaults_from_empty_env(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)

    settings = Settings.from_env()

    assert settings.year == 2018
    assert settings.symbols == DEFAULT_UNIVERSE
    assert settings.data_format == "json"
    assert settings.should_download is False
    assert settings.max_workers == 8


def test_settings_from_env_reads_values(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("YEAR", "2019")
    monkeypatch.setenv("SYMBOLS", "infy, tcs,INFY")
    monkeypatch.setenv("DATA_FORMAT", "CSV")
    monkeypatch.setenv("SHOULD_DOWNLOAD", "yes")
    monkeypatch.setenv("MAX_WORKERS", "3")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.year == 2019
    assert settings.symbols == ["INFY", "TCS"]
    assert settings.data_format == "csv"
    assert settings.should_download is True
    assert settings.max_workers == 3
    assert settings.log_level == "DEBUG"


def test_settings_reject_invalid_values(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("DATA_FORMAT", "parquet")

    with pytest.raises(ValueError, match="data_format"):
        Settings.from_env()


def test_with_overrides_validates() -> None:
    with pytest.raises(ValueError, match="max_workers"):
        Settings().with_overrides(max_workers=0)


def test_universe_snapshot_is_immutable_copy() -> None:
    settings = Settings(symbols=["ACC", "acc", "TCS"])

    universe = settings.universe()

    assert universe.symbols == ("ACC", "TCS")
    settings.symbols.append("SBIN")
    assert universe.symbols == ("ACC", "TCS")


def test_parse_helpers() -> None:
    assert parse_bool(None, True) is True
    assert parse_bool("off", True) is False
    assert parse_symbols(" , ", ["ACC"]) == ["ACC"]
