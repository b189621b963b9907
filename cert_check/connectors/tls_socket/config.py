"""Configuration for the socket connector."""

from pydantic import Field

from cert_check.connectors.base import ConnectorConfig


class SocketConnectorConfig(ConnectorConfig):
    """Configuration for the socket connector."""

    # Used for fixtures that do not name a port
    default_port: int = Field(default=443, ge=1, le=65535)
