from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    default_tz: str = "UTC"  # "today" for ETA projections is taken in this zone
    planner_api_key: str | None = None

    log_level: str = "INFO"
    log_file: str | None = None  # e.g. "logs/targetkernel.log"; stream-only when unset

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
