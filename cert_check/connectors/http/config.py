"""Configuration for the HTTP connector."""

from cert_check.connectors.base import ConnectorConfig


class HttpConnectorConfig(ConnectorConfig):
    """Configuration for the HTTP connector."""

    user_agent: str | None = None
