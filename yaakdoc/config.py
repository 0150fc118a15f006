"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from YAAKDOC_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="YAAKDOC_", env_file=".env")

    app_name: str = "yaakdoc"

    # CORS settings
    cors_origins: list[str] = ["*"]

    # Logging settings
    log_level: str = "INFO"

    # Whether tree views served over HTTP also list workspace-root requests
    include_root_requests: bool = False

    # Maximum number of loaded exports kept in memory
    max_exports: int = 32


settings = Settings()
