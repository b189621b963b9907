"""Socket suite manifest."""

from cert_check.connectors.manifest import SuiteManifest
from cert_check.connectors.tls_socket.config import SocketConnectorConfig
from cert_check.connectors.tls_socket.connector import SocketConnector
from cert_check.oracle import SOCKET_ALLOWED_ERRORS

socket_manifest = SuiteManifest(
    config_cls=SocketConnectorConfig,
    connector_factory=SocketConnector.from_config,
    select_fixtures=lambda table: table.sockets,
    allowed_errors=SOCKET_ALLOWED_ERRORS,
)
