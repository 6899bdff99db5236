from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Service settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    Canvas geometry is not configured here, see `RenderConfig`.
    """

    github_graphql_url: str = "https://api.github.com/graphql"
    github_api_url: str = "https://api.github.com"
    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1
    log_level: str = "INFO"
    rate_limit_per_minute: int = 30
    render_rate_limit_per_minute: int = 120
    rate_limit_window_seconds: int = 60

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
