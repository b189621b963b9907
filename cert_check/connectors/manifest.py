"""Suite manifest definition for the plugin system."""

from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from cert_check.connectors.base import Connector, ConnectorConfig
from cert_check.models.fixture import CertTest, FixtureTable
from cert_check.oracle import ErrorAllowList


@dataclass(frozen=True, kw_only=True)
class SuiteManifest[ConfigT: ConnectorConfig]:
    """Manifest describing a suite plugin.

    A suite pairs a connector with the fixtures it runs, the error messages it
    accepts and whether attempts are dispatched concurrently.
    """

    config_cls: type[ConfigT]
    connector_factory: Callable[[ConfigT], AbstractAsyncContextManager[Connector]]
    select_fixtures: Callable[[FixtureTable], Sequence[CertTest]]
    allowed_errors: ErrorAllowList
    concurrent: bool = False
