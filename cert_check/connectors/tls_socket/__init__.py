"""Raw TLS socket connector module."""

from cert_check.connectors.tls_socket.config import SocketConnectorConfig
from cert_check.connectors.tls_socket.connector import SocketConnector
from cert_check.connectors.tls_socket.manifest import socket_manifest

__all__ = ["SocketConnector", "SocketConnectorConfig", "socket_manifest"]
