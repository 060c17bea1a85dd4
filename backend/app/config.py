from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # Eventbrite (ticketed events)
    eventbrite_api_key: str = ""
    eventbrite_base_url: str = "https://www.eventbriteapi.com/v3"

    # Google Places (self-guided visits)
    google_maps_api_key: str = ""
    google_places_base_url: str = "https://maps.googleapis.com/maps/api/place"

    # Outbound HTTP
    http_timeout_seconds: float = 15.0

    # Weekly event cache
    event_cache_ttl_hours: int = 24

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
