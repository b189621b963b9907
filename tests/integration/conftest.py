"""Fixtures for integration tests against a local TLS server."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from cert_check.testing.tls import CertificateFiles, issue_certificates, serve_tls


@pytest.fixture
def certificates(tmp_path: Path) -> CertificateFiles:
    """Issue a CA and a currently valid server certificate."""
    return issue_certificates(tmp_path)


@pytest.fixture
def expired_certificates(tmp_path: Path) -> CertificateFiles:
    """Issue a CA and an expired server certificate."""
    return issue_certificates(tmp_path, expired=True)


@pytest.fixture
def tls_port(certificates: CertificateFiles) -> Iterator[int]:
    """Serve HTTPS with the valid certificate, yielding the port."""
    with serve_tls(certificates) as port:
        yield port


@pytest.fixture
def expired_tls_port(expired_certificates: CertificateFiles) -> Iterator[int]:
    """Serve HTTPS with the expired certificate, yielding the port."""
    with serve_tls(expired_certificates) as port:
        yield port
