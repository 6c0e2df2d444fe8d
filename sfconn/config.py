import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import SalesforceConfigError

DEFAULT_LOGIN_URL = "https://login.salesforce.com"
CONNECT_TIMEOUT = 3.0
DEFAULT_READ_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    connection_type: Optional[str] = None
    login_url: str = DEFAULT_LOGIN_URL
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None
    api_version: Optional[str] = None
    request_timeout: Tuple[float, float] = (CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT)
    log_level: int = logging.INFO


def _env(name: str) -> Optional[str]:
    # Empty strings count as unset, same as a missing variable.
    return os.getenv(name) or None


def _read_timeout() -> float:
    raw = _env("SALESFORCE_REQUEST_TIMEOUT")
    if raw is None:
        return DEFAULT_READ_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise SalesforceConfigError(f"SALESFORCE_REQUEST_TIMEOUT must be a number of seconds, got {raw!r}")
    if value <= 0:
        raise SalesforceConfigError(f"SALESFORCE_REQUEST_TIMEOUT must be positive, got {raw!r}")
    return value


def load_settings() -> Settings:
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    return Settings(
        connection_type=_env("SALESFORCE_CONNECTION_TYPE"),
        login_url=_env("SALESFORCE_INSTANCE_URL") or DEFAULT_LOGIN_URL,
        client_id=_env("SALESFORCE_CLIENT_ID"),
        client_secret=_env("SALESFORCE_CLIENT_SECRET"),
        username=_env("SALESFORCE_USERNAME"),
        password=_env("SALESFORCE_PASSWORD"),
        token=_env("SALESFORCE_TOKEN"),
        api_version=_env("SALESFORCE_API_VERSION"),
        request_timeout=(CONNECT_TIMEOUT, _read_timeout()),
        log_level=level,
    )


def configure_logging(settings: Settings) -> None:
    # basicConfig writes to stderr, which keeps stdout free for a host protocol.
    logging.basicConfig(level=settings.log_level)
