"""Certificate checks against live endpoints.

Warning: these tests perform external networking. Run with:

    pytest tests/live --run-network
"""

import asyncio
from collections.abc import Mapping

import pytest

from cert_check.catalog import HTTP_CERT_TESTS, SOCKET_CERT_TESTS
from cert_check.connectors.http import HttpConnector, HttpConnectorConfig
from cert_check.connectors.tls_socket import SocketConnector, SocketConnectorConfig
from cert_check.models.fixture import CertTest
from cert_check.models.result import Outcome, Verdict
from cert_check.oracle import HTTP_ALLOWED_ERRORS, SOCKET_ALLOWED_ERRORS, judge
from cert_check.runner import SuiteRunner

pytestmark = pytest.mark.network


def enforce(verdict: Verdict) -> None:
    """Turn an oracle verdict into a pytest outcome."""
    if verdict.status == "skip":
        pytest.skip(verdict.reason or "known issue")
    if verdict.status == "fail":
        pytest.fail(verdict.reason or "unexpected outcome")


def fixture_id(test: CertTest) -> str:
    """Use the fixture description as test id."""
    return test.desc


@pytest.mark.parametrize("cert_test", HTTP_CERT_TESTS, ids=fixture_id)
async def test_httpclient(cert_test: CertTest) -> None:
    """Fetch each HTTP fixture with a fresh client."""
    async with HttpConnector.from_config(HttpConnectorConfig()) as connector:
        outcome = await connector.attempt(cert_test)

    enforce(judge(cert_test, outcome, HTTP_ALLOWED_ERRORS))


@pytest.fixture(scope="module")
def concurrent_outcomes() -> Mapping[str, Outcome]:
    """Fetch every HTTP fixture concurrently before any check runs."""
    runner = SuiteRunner(
        connector=HttpConnector(config=HttpConnectorConfig()),
        allowed_errors=HTTP_ALLOWED_ERRORS,
    )
    attempts = asyncio.run(runner.gather_attempts(HTTP_CERT_TESTS))
    return {
        test.desc: attempt.outcome
        for test, attempt in zip(HTTP_CERT_TESTS, attempts, strict=True)
    }


@pytest.mark.parametrize("cert_test", HTTP_CERT_TESTS, ids=fixture_id)
def test_httpclient_concurrent(
    cert_test: CertTest, concurrent_outcomes: Mapping[str, Outcome]
) -> None:
    """Judge the outcomes gathered by the concurrent fetch."""
    enforce(judge(cert_test, concurrent_outcomes[cert_test.desc], HTTP_ALLOWED_ERRORS))


@pytest.mark.parametrize("cert_test", SOCKET_CERT_TESTS, ids=fixture_id)
async def test_sockets(cert_test: CertTest) -> None:
    """Handshake with each socket fixture."""
    async with SocketConnector.from_config(SocketConnectorConfig()) as connector:
        outcome = await connector.attempt(cert_test)

    enforce(judge(cert_test, outcome, SOCKET_ALLOWED_ERRORS))
