"""CLI entry point for the certificate check suites."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from cert_check.catalog import BUILTIN_FIXTURES
from cert_check.connectors.loading import load_suite_manifest
from cert_check.fixture_loader import load_fixture_table
from cert_check.models.fixture import FixtureTable
from cert_check.runner import SuiteResult, SuiteRunner

DEFAULT_SUITES = ("http", "http-concurrent", "socket")

STATUS_SYMBOLS = {
    "pass": "✅",
    "skip": "⏭️",
    "fail": "❌",
}


def log_results_summary(
    log: logging.Logger, suite_results: Sequence[SuiteResult]
) -> None:
    """Log a formatted summary of check results."""
    log.info("=" * 80)
    log.info("Certificate Check Summary:")
    log.info("=" * 80)

    for suite_result in suite_results:
        for check in suite_result.results:
            symbol = STATUS_SYMBOLS.get(check.status, "?")
            log.info(
                "%s [%s] %s (%s): %s (%.2fs)",
                symbol,
                suite_result.suite,
                check.desc,
                check.category,
                check.status,
                check.duration,
            )
            if check.message and check.status != "pass":
                log.info("  Message: %s", check.message)


async def run_suite(
    suite_key: str, suite_config_json: str, fixtures: FixtureTable
) -> SuiteResult:
    """Run a single suite against its share of the fixture table."""
    log = logging.getLogger("cert_check")

    log.info("Loading suite: %s", suite_key)
    manifest = load_suite_manifest(suite_key)
    config = manifest.config_cls(**json.loads(suite_config_json))
    tests = manifest.select_fixtures(fixtures)
    allowed_errors = manifest.allowed_errors.extended(config.extra_allowed_errors)

    async with manifest.connector_factory(config) as connector:
        runner = SuiteRunner(connector=connector, allowed_errors=allowed_errors)
        results = await runner.run(tests, concurrent=manifest.concurrent)

    return SuiteResult(suite=suite_key, results=results)


async def run(
    suite_keys: Sequence[str],
    suite_config_json: str = "{}",
    fixtures_path: Path | None = None,
) -> int:
    """Run the requested suites and return exit code."""
    log = logging.getLogger("cert_check")

    if fixtures_path is not None:
        fixtures = await load_fixture_table(fixtures_path)
    else:
        fixtures = BUILTIN_FIXTURES

    log.warning("Running %s against live endpoints", ", ".join(suite_keys))
    suite_results = [
        await run_suite(key, suite_config_json, fixtures) for key in suite_keys
    ]

    log_results_summary(log, suite_results)

    output = format_output(suite_results)
    print(json.dumps(output, indent=2))

    has_failures = any(
        check.status == "fail"
        for suite_result in suite_results
        for check in suite_result.results
    )

    return 1 if has_failures else 0


def format_output(suite_results: Sequence[SuiteResult]) -> dict[str, Any]:
    """Format suite results for JSON output."""
    all_results: list[dict[str, Any]] = []
    for suite_result in suite_results:
        for check in suite_result.results:
            all_results.append(
                {
                    "suite": suite_result.suite,
                    "desc": check.desc,
                    "target": check.target,
                    "category": check.category,
                    "status": check.status,
                    "duration": check.duration,
                    "message": check.message,
                }
            )

    return {
        "total": len(all_results),
        "passed": sum(1 for r in all_results if r["status"] == "pass"),
        "skipped": sum(1 for r in all_results if r["status"] == "skip"),
        "failed": sum(1 for r in all_results if r["status"] == "fail"),
        "results": all_results,
    }


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Check TLS certificate validation against live test endpoints"
    )
    parser.add_argument(
        "--suite",
        action="append",
        dest="suites",
        help="Suite key to run, repeatable (http, http-concurrent, socket)",
    )
    parser.add_argument(
        "--suite-config",
        default="{}",
        help="JSON configuration applied to every suite",
    )
    parser.add_argument(
        "--fixtures",
        type=Path,
        default=None,
        help="YAML fixture table to use instead of the built-in one",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            suite_keys=args.suites or DEFAULT_SUITES,
            suite_config_json=args.suite_config,
            fixtures_path=args.fixtures,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
