"""Manifest location."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "package.json"


def locate_manifest(path: str | Path | None = None) -> Path:
    """Resolve which manifest file to read.

    Args:
        path: Explicit path from the command line, if any

    Returns:
        The given path, or ./package.json when none was supplied
    """
    manifest_path = Path(path) if path else Path(DEFAULT_MANIFEST)
    logger.debug("Using manifest %s", manifest_path)
    return manifest_path
