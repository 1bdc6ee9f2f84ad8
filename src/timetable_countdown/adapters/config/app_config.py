"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SCHEDULE_OVERRIDES = ("auto", "weekday", "saturday", "sunday")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Service configuration
    timezone: str = Field(
        default="Asia/Hong_Kong",
        description="Civil timezone the timetables are published in (IANA timezone name)",
    )
    schedule_override: str = Field(
        default="auto",
        description="Day-type override: 'auto', 'weekday', 'saturday' or 'sunday'",
    )
    service_day_start_hour: int = Field(
        default=6,
        ge=0,
        le=23,
        description="Local hour at which a new service day starts (earlier hours belong to the previous day)",
    )
    rollover_max_days: int = Field(
        default=1,
        ge=1,
        description="Days to search forward for the next departure once today's service has ended",
    )

    # Display configuration
    upcoming_limit: int = Field(
        default=5,
        ge=1,
        description="Number of later departures shown for non-extendable bus routes",
    )
    full_list_gap_minutes: int = Field(
        default=60,
        ge=0,
        description="Gap to the next bus above which the rest of the day is listed",
    )
    refresh_interval_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Interval between board evaluations in watch mode",
    )
    default_route: str | None = Field(
        default=None,
        description="Route id shown when none is given on the command line",
    )
    log_level: str = Field(default="INFO", description="Logging level")

    # TOML config file path (routes, timetables, badge rules, holidays)
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML file with routes, timetables, badge rules and holidays",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @field_validator("schedule_override")
    @classmethod
    def validate_schedule_override(cls, v: str) -> str:
        """Validate schedule override is one of the supported modes."""
        if v.lower() not in _SCHEDULE_OVERRIDES:
            raise ValueError(
                "schedule_override must be one of 'auto', 'weekday', 'saturday' or 'sunday'"
            )
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.upper()

    def zone(self) -> ZoneInfo:
        """Return the configured timezone."""
        return ZoneInfo(self.timezone)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, updating settings from its [service] section."""
        if not self.config_file:
            raise ValueError("config_file must be set to load timetable configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        service = toml_data.get("service", {})
        if isinstance(service, dict):
            if "timezone" in service:
                self.timezone = str(service["timezone"])
            if "service_day_start_hour" in service:
                self.service_day_start_hour = int(service["service_day_start_hour"])
            if "upcoming_limit" in service:
                self.upcoming_limit = int(service["upcoming_limit"])
            if "full_list_gap_minutes" in service:
                self.full_list_gap_minutes = int(service["full_list_gap_minutes"])
            if "default_route" in service and self.default_route is None:
                self.default_route = str(service["default_route"])

        return toml_data

    def get_routes_config(self) -> list[dict[str, Any]]:
        """Parse and return the [[routes]] tables from the TOML file.

        Raises ValueError if routes is not a list, a route has no id, or route ids are not unique.
        """
        toml_data = self._load_toml_data()

        routes = toml_data.get("routes", [])
        if not isinstance(routes, list):
            raise ValueError("TOML config 'routes' must be a list")

        result_routes: list[dict[str, Any]] = []
        for route in routes:
            if not isinstance(route, dict):
                continue
            if "id" not in route:
                raise ValueError("All routes must have an 'id' field")
            result_routes.append(route)

        ids = [route["id"] for route in result_routes]
        if len(ids) != len(set(ids)):
            duplicates = [i for i in ids if ids.count(i) > 1]
            raise ValueError(f"Route ids must be unique. Duplicate ids found: {set(duplicates)}")

        return result_routes

    def get_badge_rules_config(self) -> tuple[list[dict[str, Any]], str | None]:
        """Parse and return the [[badge_rules]] tables and the optional rules_version."""
        toml_data = self._load_toml_data()

        rules = toml_data.get("badge_rules", [])
        if not isinstance(rules, list):
            raise ValueError("TOML config 'badge_rules' must be a list")
        version = toml_data.get("rules_version")
        return [r for r in rules if isinstance(r, dict)], str(version) if version else None

    def get_holidays_config(self) -> list[Any]:
        """Parse and return the holiday dates from the [calendar] section."""
        toml_data = self._load_toml_data()

        calendar = toml_data.get("calendar", {})
        if not isinstance(calendar, dict):
            raise ValueError("TOML config 'calendar' must be a table")
        holidays = calendar.get("holidays", [])
        if not isinstance(holidays, list):
            raise ValueError("TOML config 'calendar.holidays' must be a list")
        return holidays
