"""Models for certificate test fixtures."""

from collections.abc import Sequence
from typing import Literal

from pydantic import Field

from cert_check.models.base import Model

type Category = Literal[
    "good",
    "bad",
    "dubious",
    "good_broken",
    "bad_broken",
    "dubious_broken",
]


class CertTest(Model):
    """A single endpoint paired with its expected trust category."""

    __test__ = False

    target: str = Field(..., description="URL (HTTP fixtures) or hostname (sockets)")
    port: int | None = Field(
        default=None, ge=1, le=65535, description="TCP port for socket fixtures"
    )
    category: Category = Field(..., description="Expected trust category")
    desc: str = Field(..., description="Short description, used as test name")


class FixtureTable(Model):
    """Complete set of fixtures, one sequence per connection mechanism."""

    version: str = Field(..., description="Fixture table schema version")
    http: Sequence[CertTest] = Field(
        default_factory=list, description="Fixtures fetched over HTTP(S)"
    )
    sockets: Sequence[CertTest] = Field(
        default_factory=list, description="Fixtures checked with a raw TLS socket"
    )
