from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class ConnectionType(str, Enum):
    USER_PASSWORD = "User_Password"
    OAUTH_CLIENT_CREDENTIALS = "OAuth_2.0_Client_Credentials"


# accepted spellings for SALESFORCE_CONNECTION_TYPE, compared lowercased
_ALIASES = {
    "user_password": ConnectionType.USER_PASSWORD,
    "username-password": ConnectionType.USER_PASSWORD,
    "username_password": ConnectionType.USER_PASSWORD,
    "oauth_2.0_client_credentials": ConnectionType.OAUTH_CLIENT_CREDENTIALS,
    "oauth-client-credentials": ConnectionType.OAUTH_CLIENT_CREDENTIALS,
    "oauth_client_credentials": ConnectionType.OAUTH_CLIENT_CREDENTIALS,
}


def lookup_connection_type(value: Union[str, ConnectionType, None]) -> Optional[ConnectionType]:
    """Return the matching ConnectionType, or None when value is empty or unknown."""
    if isinstance(value, ConnectionType):
        return value
    if not value:
        return None
    return _ALIASES.get(value.strip().lower())


@dataclass(frozen=True)
class ConnectionConfig:
    # Both fields fall back to the environment when left unset.
    type: Optional[ConnectionType] = None
    login_url: Optional[str] = None


class DescribeCapable(ABC):
    @abstractmethod
    def describe_global(self) -> Dict[str, Any]:
        ...

    @abstractmethod
    def describe(self, object_name: str) -> Dict[str, Any]:
        ...
