import logging
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from simple_salesforce import Salesforce, SalesforceLogin

from .base import ConnectionConfig, ConnectionType, lookup_connection_type
from .config import Settings, load_settings
from .describe_cache import CachedDescribeConnection
from .errors import SalesforceConfigError
from .oauth import fetch_client_credentials_token

logger = logging.getLogger(__name__)

SALESFORCE_HOST_SUFFIX = ".salesforce.com"


def resolve_connection_type(config: ConnectionConfig, settings: Settings) -> ConnectionType:
    raw = config.type or settings.connection_type
    connection_type = lookup_connection_type(raw)
    if connection_type is None:
        if raw:
            logger.warning("Unknown SALESFORCE_CONNECTION_TYPE %r; using username/password", raw)
        return ConnectionType.USER_PASSWORD
    return connection_type


def login_domain(login_url: str) -> str:
    """Map a login URL to the ``domain`` simple_salesforce expects.

    ``https://login.salesforce.com`` -> ``login``,
    ``https://acme.my.salesforce.com`` -> ``acme.my``.
    """
    host = (urlparse(login_url).hostname or "").lower()
    if not host.endswith(SALESFORCE_HOST_SUFFIX):
        raise SalesforceConfigError(f"Login URL must be a salesforce.com host, got {login_url!r}")
    return host[:-len(SALESFORCE_HOST_SUFFIX)]


def _version_kwargs(settings: Settings) -> Dict[str, Any]:
    return {"version": settings.api_version} if settings.api_version else {}


def _connect_client_credentials(settings: Settings, login_url: str) -> Salesforce:
    if not settings.client_id or not settings.client_secret:
        raise SalesforceConfigError(
            "SALESFORCE_CLIENT_ID and SALESFORCE_CLIENT_SECRET are required for OAuth 2.0 Client Credentials Flow"
        )
    logger.info("Connecting to Salesforce using OAuth 2.0 Client Credentials Flow")
    token = fetch_client_credentials_token(
        login_url, settings.client_id, settings.client_secret, settings.request_timeout
    )
    # Built straight from the token response, no login handshake.
    return Salesforce(
        instance_url=token["instance_url"],
        session_id=token["access_token"],
        **_version_kwargs(settings),
    )


def _connect_username_password(settings: Settings, login_url: str) -> Salesforce:
    if not settings.username or not settings.password:
        raise SalesforceConfigError(
            "SALESFORCE_USERNAME and SALESFORCE_PASSWORD are required for Username/Password authentication"
        )
    domain = login_domain(login_url)
    logger.info("Connecting to Salesforce using Username/Password authentication")

    login_kwargs: Dict[str, Any] = {"domain": domain}
    if settings.api_version:
        login_kwargs["sf_version"] = settings.api_version
    # The security token is sent as a password suffix; an empty
    # security_token keeps SalesforceLogin on the plain SOAP login.
    session_id, instance = SalesforceLogin(
        username=settings.username,
        password=settings.password + (settings.token or ""),
        security_token="",
        **login_kwargs,
    )
    return Salesforce(instance=instance, session_id=session_id, **_version_kwargs(settings))


def create_connection(
        config: Optional[ConnectionConfig] = None,
        settings: Optional[Settings] = None,
) -> CachedDescribeConnection:
    """Authenticate against Salesforce and return a describe-caching handle.

    ``config`` overrides the connection type and login URL; anything it
    leaves unset comes from ``settings`` (read from the environment when
    not given).
    """
    config = config or ConnectionConfig()
    try:
        settings = settings or load_settings()
        connection_type = resolve_connection_type(config, settings)
        login_url = config.login_url or settings.login_url

        if connection_type is ConnectionType.OAUTH_CLIENT_CREDENTIALS:
            sf = _connect_client_credentials(settings, login_url)
        else:
            sf = _connect_username_password(settings, login_url)
        return CachedDescribeConnection(sf)
    except Exception:
        logger.exception("Error connecting to Salesforce")
        raise
