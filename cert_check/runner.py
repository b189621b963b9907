"""Suite runner driving a connector over a fixture table."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cert_check.connectors.base import Connector, describe_error
from cert_check.models.fixture import CertTest
from cert_check.models.result import CheckResult, Failure, Outcome
from cert_check.oracle import ErrorAllowList, judge

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SuiteResult:
    """Result container for one suite's checks."""

    suite: str
    results: Sequence[CheckResult]


@dataclass(frozen=True, kw_only=True)
class Attempt:
    """Outcome of one connection attempt and how long it took."""

    outcome: Outcome
    duration: float


@dataclass(frozen=True, kw_only=True)
class SuiteRunner:
    """Runs fixtures through a connector and judges each outcome."""

    connector: Connector
    allowed_errors: ErrorAllowList

    async def run(
        self, tests: Sequence[CertTest], *, concurrent: bool = False
    ) -> Sequence[CheckResult]:
        """Run all fixtures, concurrently or one at a time.

        Args:
            tests: Fixtures to check, in reporting order
            concurrent: Launch every attempt before awaiting any of them

        Returns:
            One check result per fixture, in fixture order

        """
        if not tests:
            log.info("No fixtures provided")
            return []

        if concurrent:
            return await self.run_concurrent(tests)
        return await self.run_sequential(tests)

    async def run_sequential(self, tests: Sequence[CertTest]) -> Sequence[CheckResult]:
        """Attempt each fixture in turn, judging as results arrive."""
        log.info("Checking %d fixture(s) sequentially...", len(tests))
        results: list[CheckResult] = []
        for test in tests:
            try:
                attempt = await self._attempt(test)
            except Exception as e:
                attempt = self._unhandled(test, e)
            results.append(self._check(test, attempt))
        return results

    async def run_concurrent(self, tests: Sequence[CertTest]) -> Sequence[CheckResult]:
        """Dispatch every attempt up front, then judge them in fixture order."""
        attempts = await self.gather_attempts(tests)
        return [
            self._check(test, attempt)
            for test, attempt in zip(tests, attempts, strict=True)
        ]

    async def gather_attempts(self, tests: Sequence[CertTest]) -> Sequence[Attempt]:
        """Launch every attempt before awaiting any, keeping fixture order.

        An attempt that crashes becomes a failed outcome; the others are kept.
        """
        log.info("Dispatching %d fixture(s) concurrently...", len(tests))
        tasks = [asyncio.create_task(self._attempt(test)) for test in tests]

        results = await asyncio.gather(*tasks, return_exceptions=True)
        log.info("All attempts completed")

        attempts: list[Attempt] = []
        for test, result in zip(tests, results, strict=True):
            if isinstance(result, BaseException):
                result = self._unhandled(test, result)
            attempts.append(result)
        return attempts

    async def _attempt(self, test: CertTest) -> Attempt:
        loop = asyncio.get_running_loop()
        started = loop.time()
        outcome = await self.connector.attempt(test)
        return Attempt(outcome=outcome, duration=loop.time() - started)

    def _unhandled(self, test: CertTest, error: BaseException) -> Attempt:
        log.error("Attempt for %s crashed: %s", test.desc, error, exc_info=error)
        return Attempt(outcome=Failure(message=describe_error(error)), duration=0.0)

    def _check(self, test: CertTest, attempt: Attempt) -> CheckResult:
        verdict = judge(test, attempt.outcome, self.allowed_errors)
        if isinstance(attempt.outcome, Failure) and verdict.status != "fail":
            message: str | None = attempt.outcome.message
        else:
            message = verdict.reason
        log.info(
            "Check completed: desc=%s category=%s status=%s duration=%.2fs",
            test.desc,
            test.category,
            verdict.status,
            attempt.duration,
        )
        return CheckResult(
            desc=test.desc,
            target=test.target,
            category=test.category,
            status=verdict.status,
            duration=attempt.duration,
            message=message,
        )
