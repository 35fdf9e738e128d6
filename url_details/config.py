"""Runtime configuration, overridable through ``URL_DETAILS_*`` environment variables."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """URL details service configuration."""

    timeout: float = 10.0  # seconds
    max_body_bytes: int = 150 * 1024  # 150 KB
    max_redirects: int = 5
    user_agent: str = "url-details/1.0"
    block_private_hosts: bool = True

    # Process-wide; read once from the environment when the router is imported
    rate_limit: str = "30/minute"

    # Header set by the fronting platform once the caller is authenticated
    role_header: str = "X-User-Role"
    allowed_roles: List[str] = ["administrator", "editor", "author", "contributor"]

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="URL_DETAILS_")


settings = Settings()
