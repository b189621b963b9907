"""Decide whether a connection outcome is consistent with a fixture's category."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cert_check.models.fixture import Category, CertTest
from cert_check.models.result import Failure, Outcome, Verdict

log = logging.getLogger(__name__)

# Categories where completing the connection is the currently accepted behavior.
SHOULD_NOT_RAISE: frozenset[Category] = frozenset(
    {"good", "dubious_broken", "bad_broken"}
)
KNOWN_BROKEN: frozenset[Category] = frozenset(
    {"good_broken", "dubious_broken", "bad_broken"}
)


@dataclass(frozen=True, kw_only=True)
class ErrorAllowList:
    """Error messages accepted as a legitimate validation failure."""

    exact: frozenset[str] = frozenset()
    contains: tuple[str, ...] = ()

    def matches(self, message: str) -> bool:
        """Check if message equals an exact entry or contains a substring entry."""
        return message in self.exact or any(part in message for part in self.contains)

    def extended(self, substrings: Sequence[str]) -> "ErrorAllowList":
        """Return a copy that also accepts the given substrings."""
        extra = tuple(s for s in substrings if s and s not in self.contains)
        if not extra:
            return self
        return ErrorAllowList(exact=self.exact, contains=self.contains + extra)


HTTP_ALLOWED_ERRORS = ErrorAllowList(
    exact=frozenset({"No SSL certificate found.", "SSL Certificate check failed."}),
    contains=(
        "certificate verify failed",
        "key too small",
        "shutdown while in init",
    ),
)

SOCKET_ALLOWED_ERRORS = ErrorAllowList(
    exact=frozenset({"No SSL certificate found.", "SSL Certificate check failed."}),
    contains=("certificate verify failed",),
)


def judge(test: CertTest, outcome: Outcome, allowed: ErrorAllowList) -> Verdict:
    """Classify an outcome as pass, skip or fail for the given fixture.

    The outcome is expected when exactly one of "the category tolerates a
    completed connection" and "the attempt failed" holds. Expected failures
    must still carry an allow-listed message, and known-broken categories are
    downgraded to a skip.
    """
    raised = isinstance(outcome, Failure)
    should_not_raise = test.category in SHOULD_NOT_RAISE

    if should_not_raise != raised:
        if isinstance(outcome, Failure) and not allowed.matches(outcome.message):
            reason = f"{test.desc} ({test.category}) unexpected error: {outcome.message}"
            log.warning("Unexpected outcome: %s", reason)
            return Verdict(status="fail", reason=reason)
        if test.category in KNOWN_BROKEN:
            return Verdict(status="skip", reason=f"{test.desc} is a known issue")
        return Verdict(status="pass")

    if isinstance(outcome, Failure):
        reason = f"{test.desc} ({test.category}) raised: {outcome.message}"
    else:
        reason = f"{test.desc} ({test.category}) did not raise"
    log.warning("Unexpected outcome: %s", reason)
    return Verdict(status="fail", reason=reason)
