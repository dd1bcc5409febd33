from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GHWRAPPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # GitHub API - only used by the commit URL fallback
    github_token: str = ""
    api_base_url: str = "https://api.github.com"
    api_version: str = "2022-11-28"

    # HTTP timeouts (seconds)
    request_timeout: float = 30.0
    connect_timeout: float = 5.0

    # Commits fetched through their API URL are kept this long
    commit_cache_ttl: int = 3600
    commit_cache_maxsize: int = 1024

    log_level: str = "INFO"


settings = Settings()
