"""HTTP(S) connector module."""

from cert_check.connectors.http.config import HttpConnectorConfig
from cert_check.connectors.http.connector import HttpConnector
from cert_check.connectors.http.manifest import http_concurrent_manifest, http_manifest

__all__ = [
    "HttpConnector",
    "HttpConnectorConfig",
    "http_concurrent_manifest",
    "http_manifest",
]
