"""Runtime configuration loader (config-first, flag-overrides)."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "runtime.toml"
DEFAULT_LOCAL_OVERRIDE_PATH = Path(__file__).resolve().parents[2] / "config" / "runtime.local.toml"


@dataclass(frozen=True)
class RuntimeConfig:
    """Materialized runtime configuration."""

    config_path: Path
    reports_dir: Path
    weather_temperature_f: float
    weather_wind_speed_mph: float
    weather_precipitation_in: float
    weather_dome: bool
    venue_is_home: bool
    venue_dome: bool
    venue_altitude_ft: float
    venue_crowd_noise_db: float
    board_default_league: str
    board_min_confidence: int
    report_default_format: str

    def with_path_overrides(self, *, reports_dir: Path | None = None) -> RuntimeConfig:
        """Return copy with explicit CLI path overrides applied."""
        return replace(self, reports_dir=reports_dir or self.reports_dir)


_CURRENT_RUNTIME_CONFIG: RuntimeConfig | None = None


def set_current_runtime_config(config: RuntimeConfig | None) -> None:
    global _CURRENT_RUNTIME_CONFIG
    _CURRENT_RUNTIME_CONFIG = config


def current_runtime_config() -> RuntimeConfig:
    config = _CURRENT_RUNTIME_CONFIG
    if config is not None:
        return config
    loaded = load_runtime_config()
    set_current_runtime_config(loaded)
    return loaded


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for key, value in overlay.items():
        existing = out.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            out[key] = _deep_merge(existing, value)
        else:
            out[key] = value
    return out


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        payload = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuntimeError(f"failed reading runtime config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise RuntimeError(f"invalid runtime config TOML: {path}") from exc
    if not isinstance(payload, dict):
        raise RuntimeError(f"runtime config root must be a table: {path}")
    return payload


def _as_table(payload: dict[str, Any], key: str) -> dict[str, Any]:
    value = payload.get(key, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RuntimeError(f"runtime config section [{key}] must be a table")
    return value


def _as_str(value: Any, *, default: str) -> str:
    if isinstance(value, str):
        stripped = value.strip()
        if stripped:
            return stripped
    return default


def _as_bool(value: Any, *, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_int(value: Any, *, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _as_float(value: Any, *, default: float) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return default
    return default


def _resolve_path(raw: Any, *, default: str, base_dir: Path) -> Path:
    value = _as_str(raw, default=default)
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return path


def load_runtime_config(config_path: Path | None = None) -> RuntimeConfig:
    """Load runtime config from `config/runtime.toml` plus optional local override.

    An explicit path must exist. Without one, a missing default file yields the
    built-in defaults.
    """
    if config_path is not None:
        source = config_path.expanduser().resolve()
        if not source.exists():
            raise RuntimeError(f"runtime config file not found: {source}")
        payload = _read_toml(source)
    else:
        source = DEFAULT_CONFIG_PATH
        payload = _read_toml(source) if source.exists() else {}
        if DEFAULT_LOCAL_OVERRIDE_PATH.exists():
            payload = _deep_merge(payload, _read_toml(DEFAULT_LOCAL_OVERRIDE_PATH))

    paths = _as_table(payload, "paths")
    weather = _as_table(payload, "weather")
    venue = _as_table(payload, "venue")
    board = _as_table(payload, "board")
    report = _as_table(payload, "report")
    base_dir = source.parent

    return RuntimeConfig(
        config_path=source,
        reports_dir=_resolve_path(paths.get("reports_dir"), default="reports", base_dir=base_dir),
        weather_temperature_f=_as_float(weather.get("temperature_f"), default=72.0),
        weather_wind_speed_mph=_as_float(weather.get("wind_speed_mph"), default=8.0),
        weather_precipitation_in=_as_float(weather.get("precipitation_in"), default=0.0),
        weather_dome=_as_bool(weather.get("dome"), default=False),
        venue_is_home=_as_bool(venue.get("is_home"), default=True),
        venue_dome=_as_bool(venue.get("dome"), default=False),
        venue_altitude_ft=_as_float(venue.get("altitude_ft"), default=0.0),
        venue_crowd_noise_db=_as_float(venue.get("crowd_noise_db"), default=85.0),
        board_default_league=_as_str(board.get("default_league"), default="all").lower(),
        board_min_confidence=_as_int(board.get("min_confidence"), default=0),
        report_default_format=_as_str(report.get("default_format"), default="csv").lower(),
    )
