"""Shared fixtures and command line options."""

from collections.abc import Iterator

import pytest
from aioresponses import aioresponses as aioresponses_cls


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register the opt-in flag for tests that reach the internet."""
    parser.addoption(
        "--run-network",
        action="store_true",
        default=False,
        help="Run tests that perform real external networking",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip network tests unless explicitly enabled."""
    if config.getoption("--run-network"):
        return
    skip_network = pytest.mark.skip(reason="needs --run-network")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip_network)


@pytest.fixture
def aioresponses() -> Iterator[aioresponses_cls]:
    """Mock every aiohttp request made during the test."""
    with aioresponses_cls() as mocked:
        yield mocked
