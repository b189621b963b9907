"""Lookup of certificate check suites registered as entry points.

Each suite (``http``, ``http-concurrent``, ``socket``) is a SuiteManifest
exposed under the ``cert_check.suites`` group, so a third-party package can
ship another connection mechanism without touching this one.
"""

from importlib.metadata import entry_points
from typing import Any

from cert_check.connectors.manifest import SuiteManifest

ENTRY_POINT_GROUP = "cert_check.suites"


class SuiteNotFoundError(Exception):
    """Raised when no usable suite is registered under a key."""


def available_suites() -> list[str]:
    """Names of every registered suite, sorted."""
    return sorted({e.name for e in entry_points(group=ENTRY_POINT_GROUP)})


def load_suite_manifest(key: str) -> SuiteManifest[Any]:
    """Resolve a suite key to the manifest that drives its checks.

    Raises SuiteNotFoundError, listing the registered keys, when the key is
    unknown or its entry point does not point at a SuiteManifest.
    """
    for entry in entry_points(group=ENTRY_POINT_GROUP, name=key):
        manifest = entry.load()
        if not isinstance(manifest, SuiteManifest):
            raise SuiteNotFoundError(
                f"Suite '{key}' points at {entry.value}, which is not a suite manifest"
            )
        return manifest

    raise SuiteNotFoundError(
        f"Suite '{key}' not found. Available suites: {available_suites()}"
    )
