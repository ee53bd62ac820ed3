"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from flowtop.constants.defaults import (
    ALT_TIMEZONE_DEFAULT,
    FETCH_TIMEOUT_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    REQUEST_TIMEOUT_DEFAULT,
)
from flowtop.constants.limits import (
    FETCH_TIMEOUT_MIN,
    REFRESH_INTERVAL_MAX,
    REFRESH_INTERVAL_MIN,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Cluster scope
    namespace: str = NAMESPACE_DEFAULT  # "" = all namespaces
    context: str | None = None

    # Refresh cycle
    refresh_interval: int = Field(
        default=REFRESH_INTERVAL_DEFAULT,
        ge=REFRESH_INTERVAL_MIN,
        le=REFRESH_INTERVAL_MAX,
    )  # seconds
    fetch_timeout: float = Field(default=FETCH_TIMEOUT_DEFAULT, ge=FETCH_TIMEOUT_MIN)
    request_timeout: str = REQUEST_TIMEOUT_DEFAULT  # kubectl --request-timeout

    # Display
    alt_timezone: str = ALT_TIMEZONE_DEFAULT
    use_alt_timezone: bool = False


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
