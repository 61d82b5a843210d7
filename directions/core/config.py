from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "Directions Gateway"
    PROJECT_DESCRIPTION: str = "Builds, sends and reconciles turn-by-turn directions requests"
    VERSION: str = "0.3.0"
    API_V1_STR: str = "/api/v1"

    # Directions API Settings
    DIRECTIONS_BASE_URL: str = "https://api.mapbox.com"
    DIRECTIONS_USER: str = "mapbox"
    DIRECTIONS_PROFILE: str = "driving"
    DIRECTIONS_GEOMETRIES: str = "polyline6"
    DIRECTIONS_ACCESS_TOKEN: str = ""
    DIRECTIONS_CLIENT_APP_NAME: str = ""

    # URLs at or above this length are sent as form-encoded POST requests
    MAX_URL_SIZE: int = 1024 * 8
    REQUEST_TIMEOUT: float = 30.0

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
