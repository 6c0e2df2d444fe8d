import logging

from sfconn.config import configure_logging, load_settings
from sfconn.describe_cache import CachedDescribeConnection
from sfconn.session import SalesforceSession

cfg = load_settings()
configure_logging(cfg)

# Process-wide holder; create_connection re-reads the environment on each attempt.
session = SalesforceSession()


def get_connection() -> CachedDescribeConnection:
    return session.get()


if __name__ == "__main__":
    # usage: python main.py  (credentials from SALESFORCE_* env vars)
    conn = get_connection()
    result = conn.describe_global()
    logging.info("Connected to %s; %d sObjects visible", conn.sf_instance, len(result.get("sobjects", [])))
