"""Integration tests for the HTTP connector."""

import aiohttp
import pytest
from aioresponses import aioresponses as aioresponses_cls
from yarl import URL

from cert_check.connectors.http import HttpConnector, HttpConnectorConfig
from cert_check.models.result import Failure, Success
from cert_check.oracle import HTTP_ALLOWED_ERRORS
from cert_check.testing.factories import CertTestFactory
from cert_check.testing.tls import CertificateFiles

TARGET = "https://expired.badssl.com/"


@pytest.fixture
def connector() -> HttpConnector:
    """Create connector with default configuration."""
    return HttpConnector(config=HttpConnectorConfig())


class TestMockedAttempt:
    """Tests against mocked HTTP responses."""

    async def test_returns_content_on_success(
        self, connector: HttpConnector, aioresponses: aioresponses_cls
    ) -> None:
        """Returns response body as success."""
        aioresponses.get(TARGET, status=200, body="<html>badssl</html>")

        outcome = await connector.attempt(CertTestFactory.build(target=TARGET))

        assert outcome == Success(content=b"<html>badssl</html>")

    async def test_http_error_status_is_failure(
        self, connector: HttpConnector, aioresponses: aioresponses_cls
    ) -> None:
        """4xx and 5xx responses count as failed attempts."""
        aioresponses.get(TARGET, status=503)

        outcome = await connector.attempt(CertTestFactory.build(target=TARGET))

        assert isinstance(outcome, Failure)
        assert "503" in outcome.message

    async def test_client_error_is_failure(
        self, connector: HttpConnector, aioresponses: aioresponses_cls
    ) -> None:
        """Client errors are converted into failures."""
        aioresponses.get(
            TARGET,
            exception=aiohttp.ClientConnectionError(
                "[SSL: CERTIFICATE_VERIFY_FAILED] certificate verify failed"
            ),
        )

        outcome = await connector.attempt(CertTestFactory.build(target=TARGET))

        assert isinstance(outcome, Failure)
        assert HTTP_ALLOWED_ERRORS.matches(outcome.message)

    async def test_timeout_is_failure_with_message(
        self, connector: HttpConnector, aioresponses: aioresponses_cls
    ) -> None:
        """Timeouts without text still produce a message."""
        aioresponses.get(TARGET, exception=TimeoutError())

        outcome = await connector.attempt(CertTestFactory.build(target=TARGET))

        assert outcome == Failure(message="TimeoutError")

    async def test_sends_user_agent(self, aioresponses: aioresponses_cls) -> None:
        """Configured user agent is sent with the request."""
        connector = HttpConnector(config=HttpConnectorConfig(user_agent="cert-check"))
        aioresponses.get(TARGET, status=200)

        await connector.attempt(CertTestFactory.build(target=TARGET))

        call = aioresponses.requests[("GET", URL(TARGET))][0]
        assert call.kwargs["headers"]["User-Agent"] == "cert-check"


class TestLocalServerAttempt:
    """Tests against a local HTTPS server."""

    async def test_succeeds_with_trusted_ca(
        self, certificates: CertificateFiles, tls_port: int
    ) -> None:
        """Fetch succeeds when the issuing CA is trusted."""
        connector = HttpConnector(
            config=HttpConnectorConfig(ca_file=certificates.ca_file, timeout=10)
        )

        outcome = await connector.attempt(
            CertTestFactory.build(target=f"https://127.0.0.1:{tls_port}/")
        )

        assert outcome == Success(content=b"ok")

    async def test_fails_with_untrusted_ca(self, tls_port: int) -> None:
        """Fetch fails verification against the system trust store."""
        connector = HttpConnector(config=HttpConnectorConfig(timeout=10))

        outcome = await connector.attempt(
            CertTestFactory.build(target=f"https://127.0.0.1:{tls_port}/")
        )

        assert isinstance(outcome, Failure)
        assert "certificate verify failed" in outcome.message
        assert HTTP_ALLOWED_ERRORS.matches(outcome.message)

    async def test_fails_with_expired_certificate(
        self, expired_certificates: CertificateFiles, expired_tls_port: int
    ) -> None:
        """Fetch fails for an expired certificate even with a trusted CA."""
        connector = HttpConnector(
            config=HttpConnectorConfig(
                ca_file=expired_certificates.ca_file, timeout=10
            )
        )

        outcome = await connector.attempt(
            CertTestFactory.build(target=f"https://127.0.0.1:{expired_tls_port}/")
        )

        assert isinstance(outcome, Failure)
        assert "certificate verify failed" in outcome.message
        assert "expired" in outcome.message
