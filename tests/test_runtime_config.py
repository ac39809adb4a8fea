from __future__ import annotations

from pathlib import Path

import pytest

from prop_confidence import runtime_config
from prop_confidence.runtime_config import (
    current_runtime_config,
    load_runtime_config,
    set_current_runtime_config,
)


def test_load_runtime_config_from_explicit_path(tmp_path: Path) -> None:
    config_path = tmp_path / "runtime.toml"
    config_path.write_text(
        "\n".join(
            [
                "[paths]",
                'reports_dir = "out"',
                "[weather]",
                "temperature_f = 20",
                'wind_speed_mph = "18.5"',
                "dome = true",
                "[venue]",
                "is_home = false",
                "[board]",
                'default_league = "NBA"',
                "min_confidence = 55",
                "[report]",
                'default_format = "Parquet"',
            ]
        ),
        encoding="utf-8",
    )

    config = load_runtime_config(config_path)

    assert config.config_path == config_path.resolve()
    assert config.reports_dir == (tmp_path / "out").resolve()
    assert config.weather_temperature_f == 20.0
    assert config.weather_wind_speed_mph == 18.5
    assert config.weather_dome is True
    assert config.weather_precipitation_in == 0.0
    assert config.venue_is_home is False
    assert config.venue_crowd_noise_db == 85.0
    assert config.board_default_league == "nba"
    assert config.board_min_confidence == 55
    assert config.report_default_format == "parquet"


def test_load_runtime_config_defaults_for_empty_file(tmp_path: Path) -> None:
    config_path = tmp_path / "runtime.toml"
    config_path.write_text("", encoding="utf-8")

    config = load_runtime_config(config_path)

    assert config.reports_dir == (tmp_path / "reports").resolve()
    assert config.weather_wind_speed_mph == 8.0
    assert config.venue_is_home is True
    assert config.board_default_league == "all"
    assert config.report_default_format == "csv"


def test_load_runtime_config_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError, match="runtime config file not found"):
        load_runtime_config(tmp_path / "missing.toml")


def test_load_runtime_config_invalid_toml(tmp_path: Path) -> None:
    config_path = tmp_path / "runtime.toml"
    config_path.write_text("[weather\n", encoding="utf-8")

    with pytest.raises(RuntimeError, match="invalid runtime config TOML"):
        load_runtime_config(config_path)


def test_load_runtime_config_section_must_be_table(tmp_path: Path) -> None:
    config_path = tmp_path / "runtime.toml"
    config_path.write_text('weather = "windy"\n', encoding="utf-8")

    with pytest.raises(RuntimeError, match=r"section \[weather\] must be a table"):
        load_runtime_config(config_path)


def test_missing_default_config_falls_back_to_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(runtime_config, "DEFAULT_CONFIG_PATH", tmp_path / "runtime.toml")
    monkeypatch.setattr(
        runtime_config, "DEFAULT_LOCAL_OVERRIDE_PATH", tmp_path / "runtime.local.toml"
    )

    config = load_runtime_config()

    assert config.weather_temperature_f == 72.0
    assert config.reports_dir == (tmp_path / "reports").resolve()


def test_local_override_is_merged(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    base = tmp_path / "runtime.toml"
    base.write_text("[weather]\ntemperature_f = 60\nwind_speed_mph = 4\n", encoding="utf-8")
    local = tmp_path / "runtime.local.toml"
    local.write_text("[weather]\nwind_speed_mph = 22\n", encoding="utf-8")
    monkeypatch.setattr(runtime_config, "DEFAULT_CONFIG_PATH", base)
    monkeypatch.setattr(runtime_config, "DEFAULT_LOCAL_OVERRIDE_PATH", local)

    config = load_runtime_config()

    assert config.weather_temperature_f == 60.0
    assert config.weather_wind_speed_mph == 22.0


def test_with_path_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "runtime.toml"
    config_path.write_text("", encoding="utf-8")
    config = load_runtime_config(config_path)

    assert config.with_path_overrides(reports_dir=tmp_path / "x").reports_dir == tmp_path / "x"
    assert config.with_path_overrides().reports_dir == config.reports_dir


def test_current_runtime_config_is_cached(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(runtime_config, "_CURRENT_RUNTIME_CONFIG", None)
    config_path = tmp_path / "runtime.toml"
    config_path.write_text("[board]\nmin_confidence = 60\n", encoding="utf-8")
    config = load_runtime_config(config_path)

    set_current_runtime_config(config)

    assert current_runtime_config() is config
    assert current_runtime_config().board_min_confidence == 60
