"""Models for connection outcomes and check results."""

from dataclasses import dataclass
from typing import Literal

type CheckStatus = Literal["pass", "skip", "fail"]


@dataclass(frozen=True, kw_only=True)
class Success:
    """Connection attempt completed, with whatever content was read."""

    content: bytes = b""


@dataclass(frozen=True, kw_only=True)
class Failure:
    """Connection attempt failed; message is never empty."""

    message: str


type Outcome = Success | Failure


@dataclass(frozen=True, kw_only=True)
class Verdict:
    """Decision of the oracle for one outcome."""

    status: CheckStatus
    reason: str | None = None


@dataclass(frozen=True, kw_only=True)
class CheckResult:
    """Result of checking a single fixture.

    Contains the fixture identity so results can be reported without the table.
    """

    desc: str
    target: str
    category: str
    status: CheckStatus
    duration: float
    message: str | None = None
