"""Weather and venue condition providers.

The engine never looks conditions up itself. A provider is asked once per
scoring call and the resulting conditions are handed to the analyzers, so a
real data source can replace the static placeholders without touching the
aggregator.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Protocol

from prop_confidence.models import Player, Prop


@dataclass(frozen=True)
class WeatherConditions:
    temperature_f: float = 72.0
    wind_speed_mph: float = 8.0
    precipitation_in: float = 0.0
    dome: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class VenueConditions:
    is_home: bool = True
    dome: bool = False
    altitude_ft: float = 0.0
    crowd_noise_db: float = 85.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class WeatherProvider(Protocol):
    def conditions(self, *, player: Player, prop: Prop) -> WeatherConditions:
        raise NotImplementedError


class VenueProvider(Protocol):
    def conditions(self, *, player: Player, prop: Prop) -> VenueConditions:
        raise NotImplementedError


class StaticWeatherProvider:
    """Returns the same placeholder conditions for every prop."""

    def __init__(self, conditions: WeatherConditions | None = None) -> None:
        self._conditions = conditions or WeatherConditions()

    def conditions(self, *, player: Player, prop: Prop) -> WeatherConditions:
        del player, prop
        return self._conditions


class StaticVenueProvider:
    """Returns the same placeholder venue for every prop."""

    def __init__(self, conditions: VenueConditions | None = None) -> None:
        self._conditions = conditions or VenueConditions()

    def conditions(self, *, player: Player, prop: Prop) -> VenueConditions:
        del player, prop
        return self._conditions
