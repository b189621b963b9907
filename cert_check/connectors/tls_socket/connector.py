"""Raw TLS socket connector implementation."""

import asyncio
import logging
import socket
import ssl
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from cert_check.connectors.base import Connector, describe_error
from cert_check.connectors.tls_socket.config import SocketConnectorConfig
from cert_check.models.fixture import CertTest
from cert_check.models.result import Failure, Outcome, Success

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SocketConnector(Connector):
    """Wraps a plain TCP socket in TLS and performs the handshake on connect."""

    config: SocketConnectorConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: SocketConnectorConfig
    ) -> AsyncGenerator["SocketConnector", None]:
        """Create connector; sockets are owned by each attempt."""
        yield cls(config=config)

    def handshake(self, context: ssl.SSLContext, hostname: str, port: int) -> None:
        """Connect and complete the TLS handshake, then close the socket.

        Every address the hostname resolves to is tried, IPv6 included.
        """
        address = (hostname, port)
        with socket.create_connection(address, timeout=self.config.timeout) as sock:
            with context.wrap_socket(sock, server_hostname=hostname) as tls_sock:
                log.debug(
                    "Handshake with %s:%d done (%s, %s)",
                    hostname,
                    port,
                    tls_sock.version(),
                    tls_sock.cipher(),
                )

    async def attempt(self, test: CertTest) -> Outcome:
        """Run the blocking handshake in a worker thread."""
        port = test.port if test.port is not None else self.config.default_port
        log.debug("Connecting to %s:%d (%s)", test.target, port, test.desc)
        context = self.config.create_ssl_context()
        try:
            await asyncio.to_thread(self.handshake, context, test.target, port)
        except OSError as e:
            message = describe_error(e)
            log.debug("Handshake with %s:%d failed: %s", test.target, port, message)
            return Failure(message=message)

        return Success()
