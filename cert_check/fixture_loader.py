"""Load fixture tables from YAML files."""

import asyncio
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from cert_check.models.fixture import FixtureTable

log = logging.getLogger(__name__)


async def load_fixture_table(path: Path) -> FixtureTable:
    """Load and validate a fixture table.

    Args:
        path: Path to a YAML file with ``version``, ``http`` and ``sockets`` keys

    Returns:
        The parsed fixture table

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, malformed or fails schema validation

    """
    if not path.is_file():
        raise FileNotFoundError(f"Fixture file not found: {path}")

    content = await asyncio.to_thread(path.read_text)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty fixture file: {path}")

    try:
        table = FixtureTable.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid fixture table schema in {path}: {e}") from e

    log.info(
        "Loaded fixture table from %s (%d http, %d socket)",
        path,
        len(table.http),
        len(table.sockets),
    )
    return table
