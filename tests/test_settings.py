from __future__ import annotations

from pathlib import Path

import pytest

from prop_confidence import runtime_config
from prop_confidence.runtime_config import load_runtime_config, set_current_runtime_config
from prop_confidence.settings import Settings


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(runtime_config, "_CURRENT_RUNTIME_CONFIG", None)
    for key in ("WEATHER_WIND_SPEED_MPH", "VENUE_IS_HOME", "BOARD_MIN_CONFIDENCE"):
        monkeypatch.delenv(f"PROP_CONFIDENCE_{key}", raising=False)


def _use_config(tmp_path: Path, text: str) -> None:
    config_path = tmp_path / "runtime.toml"
    config_path.write_text(text, encoding="utf-8")
    set_current_runtime_config(load_runtime_config(config_path))


def test_settings_defaults(tmp_path: Path) -> None:
    _use_config(tmp_path, "")

    settings = Settings(_env_file=None)

    assert settings.weather_temperature_f == 72.0
    assert settings.venue_is_home is True
    assert settings.report_default_format == "csv"


def test_from_runtime_uses_runtime_values(tmp_path: Path) -> None:
    _use_config(tmp_path, "[weather]\nwind_speed_mph = 19\n[board]\nmin_confidence = 55\n")

    settings = Settings.from_runtime()

    assert settings.weather_wind_speed_mph == 19.0
    assert settings.board_min_confidence == 55
    assert settings.reports_dir == str((tmp_path / "reports").resolve())


def test_env_overrides_runtime_values(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _use_config(tmp_path, "[weather]\nwind_speed_mph = 19\n[venue]\nis_home = true\n")
    monkeypatch.setenv("PROP_CONFIDENCE_WEATHER_WIND_SPEED_MPH", "3")
    monkeypatch.setenv("PROP_CONFIDENCE_VENUE_IS_HOME", "false")

    settings = Settings.from_runtime()

    assert settings.weather_wind_speed_mph == 3.0
    assert settings.venue_is_home is False


def test_providers_reflect_settings() -> None:
    settings = Settings(
        _env_file=None, weather_wind_speed_mph=21.0, venue_dome=True, venue_is_home=False
    )

    weather = settings.weather_provider().conditions(player=None, prop=None)
    venue = settings.venue_provider().conditions(player=None, prop=None)

    assert weather.wind_speed_mph == 21.0
    assert venue.dome is True
    assert venue.is_home is False


def test_dotenv_overrides_runtime_values(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _use_config(tmp_path, "[weather]\nwind_speed_mph = 8\ntemperature_f = 40\n")
    (tmp_path / ".env").write_text(
        "PROP_CONFIDENCE_WEATHER_WIND_SPEED_MPH=20\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    settings = Settings.from_runtime()

    assert settings.weather_wind_speed_mph == 20.0
    assert settings.weather_temperature_f == 40.0


def test_env_var_outranks_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _use_config(tmp_path, "[weather]\nwind_speed_mph = 8\n")
    (tmp_path / ".env").write_text(
        "PROP_CONFIDENCE_WEATHER_WIND_SPEED_MPH=20\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PROP_CONFIDENCE_WEATHER_WIND_SPEED_MPH", "30")

    assert Settings.from_runtime().weather_wind_speed_mph == 30.0
