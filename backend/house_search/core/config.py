from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    LOGGER: int = 20

    # HTTP surface
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["*"]

    # IP geolocation provider (ip-api.com)
    IP_LOCATION_URL: str = "http://ip-api.com/json/"
    TRUST_FORWARDED_FOR: bool = True

    # Routing provider (OSRM)
    OSRM_URL: str = "http://router.project-osrm.org"
    OSRM_PROFILE: str = "driving"

    UPSTREAM_TIMEOUT: float = 10.0

    # Mock house generator
    HOUSES_PER_REQUEST: int = 50
    DEFAULT_RADIUS_METERS: float = 7500.0

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
