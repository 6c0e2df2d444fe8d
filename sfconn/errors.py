class SalesforceConfigError(ValueError):
    """Raised when required Salesforce settings are missing or unusable."""


class SalesforceAuthError(RuntimeError):
    """Raised when the OAuth token exchange fails."""
