import logging
from typing import Any, Dict, Tuple
from urllib.parse import urljoin

import requests

from .errors import SalesforceAuthError

logger = logging.getLogger(__name__)

TOKEN_PATH = "/services/oauth2/token"


def token_url(login_url: str) -> str:
    # An absolute path replaces whatever path the login URL carries.
    return urljoin(login_url, TOKEN_PATH)


def fetch_client_credentials_token(
        login_url: str,
        client_id: str,
        client_secret: str,
        timeout: Tuple[float, float],
) -> Dict[str, Any]:
    """Exchange client credentials for an access token.

    Returns the decoded token response, which carries at least
    ``access_token`` and ``instance_url``.

    Raises:
        SalesforceAuthError: on transport failure, a non-JSON body, a
            non-200 status or a response without the expected fields.
    """
    url = token_url(login_url)
    logger.debug("Requesting OAuth token from %s", url)
    try:
        resp = requests.post(
            url,
            data={
                "grant_type": "client_credentials",
                "client_id": client_id,
                "client_secret": client_secret,
            },
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise SalesforceAuthError(f"OAuth request error: {e}") from e

    try:
        payload = resp.json()
    except ValueError as e:
        raise SalesforceAuthError(f"Failed to parse OAuth response: {e}") from e
    if not isinstance(payload, dict):
        raise SalesforceAuthError(f"Failed to parse OAuth response: expected an object, got {type(payload).__name__}")

    if resp.status_code != 200:
        raise SalesforceAuthError(
            f"OAuth token request failed: {payload.get('error')} - {payload.get('error_description')}"
        )

    missing = [k for k in ("access_token", "instance_url") if not payload.get(k)]
    if missing:
        raise SalesforceAuthError(f"OAuth token response missing {', '.join(missing)}")
    return payload
