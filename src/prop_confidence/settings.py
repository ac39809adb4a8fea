"""Application settings for prop-confidence."""

from typing import Any

from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from prop_confidence.providers import (
    StaticVenueProvider,
    StaticWeatherProvider,
    VenueConditions,
    WeatherConditions,
)
from prop_confidence.runtime_config import current_runtime_config

ENV_PREFIX = "PROP_CONFIDENCE_"


class RuntimeConfigSettingsSource(PydanticBaseSettingsSource):
    """Values from the current runtime config; env vars and `.env` rank above it."""

    def _values(self) -> dict[str, Any]:
        runtime = current_runtime_config()
        return {
            "reports_dir": str(runtime.reports_dir),
            "weather_temperature_f": runtime.weather_temperature_f,
            "weather_wind_speed_mph": runtime.weather_wind_speed_mph,
            "weather_precipitation_in": runtime.weather_precipitation_in,
            "weather_dome": runtime.weather_dome,
            "venue_is_home": runtime.venue_is_home,
            "venue_dome": runtime.venue_dome,
            "venue_altitude_ft": runtime.venue_altitude_ft,
            "venue_crowd_noise_db": runtime.venue_crowd_noise_db,
            "board_default_league": runtime.board_default_league,
            "board_min_confidence": runtime.board_min_confidence,
            "report_default_format": runtime.report_default_format,
        }

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._values().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._values()


class Settings(BaseSettings):
    """Effective settings.

    Precedence: init kwargs, `PROP_CONFIDENCE_*` env vars, `.env`, runtime config,
    field defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reports_dir: str = "reports"
    weather_temperature_f: float = 72.0
    weather_wind_speed_mph: float = 8.0
    weather_precipitation_in: float = 0.0
    weather_dome: bool = False
    venue_is_home: bool = True
    venue_dome: bool = False
    venue_altitude_ft: float = 0.0
    venue_crowd_noise_db: float = 85.0
    board_default_league: str = "all"
    board_min_confidence: int = 0
    report_default_format: str = "csv"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            RuntimeConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @classmethod
    def from_runtime(cls) -> "Settings":
        """Construct settings layered over the current runtime config."""
        return cls()

    def weather_provider(self) -> StaticWeatherProvider:
        return StaticWeatherProvider(
            WeatherConditions(
                temperature_f=self.weather_temperature_f,
                wind_speed_mph=self.weather_wind_speed_mph,
                precipitation_in=self.weather_precipitation_in,
                dome=self.weather_dome,
            )
        )

    def venue_provider(self) -> StaticVenueProvider:
        return StaticVenueProvider(
            VenueConditions(
                is_home=self.venue_is_home,
                dome=self.venue_dome,
                altitude_ft=self.venue_altitude_ft,
                crowd_noise_db=self.venue_crowd_noise_db,
            )
        )
