"""HTTP(S) connector implementation."""

import logging
from collections.abc import AsyncGenerator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass

import aiohttp

from cert_check.connectors.base import Connector, describe_error
from cert_check.connectors.http.config import HttpConnectorConfig
from cert_check.models.fixture import CertTest
from cert_check.models.result import Failure, Outcome, Success

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class HttpConnector(Connector):
    """Fetches a fixture URL with a fresh client session per attempt."""

    config: HttpConnectorConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: HttpConnectorConfig
    ) -> AsyncGenerator["HttpConnector", None]:
        """Create connector; sessions are owned by each attempt."""
        yield cls(config=config)

    def _headers(self) -> Mapping[str, str]:
        if self.config.user_agent is None:
            return {}
        return {"User-Agent": self.config.user_agent}

    async def attempt(self, test: CertTest) -> Outcome:
        """Fetch the target URL and read its content.

        HTTP error statuses count as failures, redirects are followed.
        """
        log.debug("Fetching %s (%s)", test.target, test.desc)
        ssl_context = self.config.create_ssl_context()
        try:
            async with aiohttp.ClientSession(
                connector=aiohttp.TCPConnector(ssl=ssl_context),
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
                raise_for_status=True,
            ) as session:
                async with session.get(
                    test.target, headers=self._headers()
                ) as response:
                    content = await response.read()
        except (aiohttp.ClientError, OSError, TimeoutError) as e:
            message = describe_error(e)
            log.debug("Fetch of %s failed: %s", test.target, message)
            return Failure(message=message)

        return Success(content=content)
