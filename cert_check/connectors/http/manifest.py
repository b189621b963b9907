"""HTTP suite manifests, sequential and concurrent."""

from cert_check.connectors.http.config import HttpConnectorConfig
from cert_check.connectors.http.connector import HttpConnector
from cert_check.connectors.manifest import SuiteManifest
from cert_check.oracle import HTTP_ALLOWED_ERRORS

http_manifest = SuiteManifest(
    config_cls=HttpConnectorConfig,
    connector_factory=HttpConnector.from_config,
    select_fixtures=lambda table: table.http,
    allowed_errors=HTTP_ALLOWED_ERRORS,
)

http_concurrent_manifest = SuiteManifest(
    config_cls=HttpConnectorConfig,
    connector_factory=HttpConnector.from_config,
    select_fixtures=lambda table: table.http,
    allowed_errors=HTTP_ALLOWED_ERRORS,
    concurrent=True,
)
