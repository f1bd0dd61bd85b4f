"""Environment-driven settings for the provider clients."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from fleetrisk.constants import FUEL_WINDOW_MINUTES
from fleetrisk.exceptions import FleetRiskConfigError


class Settings(BaseSettings):
    """Provider endpoints, credentials and fetch tuning.

    Scoring thresholds live in :mod:`fleetrisk.constants` and are not
    configurable.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    gps_api_base: str = ""
    gps_api_user: str = ""
    gps_api_password: str = ""
    openweather_key: str = ""
    openweather_base: str = "https://api.openweathermap.org/data/2.5"
    http_timeout: float = 30.0
    weather_cache_ttl: float = 600.0
    fuel_window_minutes: float = FUEL_WINDOW_MINUTES

    @property
    def gps_credentials(self) -> tuple[str, str]:
        return (self.gps_api_user, self.gps_api_password)

    def require_gps_credentials(self) -> None:
        """Raise if any GPS provider variable is unset."""
        missing = [
            env
            for env, value in (
                ("GPS_API_BASE", self.gps_api_base),
                ("GPS_API_USER", self.gps_api_user),
                ("GPS_API_PASSWORD", self.gps_api_password),
            )
            if not value
        ]
        if missing:
            raise FleetRiskConfigError(f"Missing GPS API environment variables: {', '.join(missing)}")
