"""Abstract base class for connection mechanisms."""

import ssl
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field

from cert_check.models.fixture import CertTest
from cert_check.models.result import Outcome


class ConnectorConfig(BaseModel):
    """Settings shared by every connector."""

    timeout: float = Field(default=300, gt=0, description="Seconds per attempt")
    ca_file: Path | None = Field(
        default=None, description="CA bundle to trust instead of the system store"
    )
    extra_allowed_errors: Sequence[str] = Field(
        default=(), description="Additional error substrings accepted as failures"
    )

    def create_ssl_context(self) -> ssl.SSLContext:
        """Create a verifying client context."""
        cafile = str(self.ca_file) if self.ca_file is not None else None
        return ssl.create_default_context(cafile=cafile)


@dataclass(frozen=True, kw_only=True)
class Connector(ABC):
    """Abstract base for a way of attempting a secured connection."""

    @abstractmethod
    async def attempt(self, test: CertTest) -> Outcome:
        """Attempt a connection to the fixture's target.

        Args:
            test: Fixture describing the endpoint

        Returns:
            Success, or Failure carrying the error message. Connection errors
            are never raised.

        """


def describe_error(exc: BaseException) -> str:
    """Return a non-empty message for an exception."""
    return str(exc) or type(exc).__name__
