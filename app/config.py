from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql+asyncpg://localhost:5432/cycle_energy"
    api_key: str | None = None
    log_level: str = "INFO"

    # Curve sampling resolution per Bézier segment (floor of 100 enforced in builder)
    curve_bezier_steps: int = 200

    # Submission relay: GitHub repository_dispatch target. Relay falls back to local storage when unset.
    dispatch_api_url: str = "https://api.github.com"
    dispatch_owner: str | None = None
    dispatch_repo: str | None = None
    dispatch_token: str | None = None
    dispatch_event_type: str = "form_submission"
    dispatch_timeout_s: float = 10.0

    submission_storage: str = "memory"  # "memory" | "sql"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
