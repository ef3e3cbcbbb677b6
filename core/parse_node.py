"""Node.js package.json parsing."""

import json
import logging
from pathlib import Path

from .errors import InvalidManifestError, ManifestNotFoundError
from .models import Manifest

logger = logging.getLogger(__name__)


def _optional_string(data: dict, key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _parse_scripts(raw_scripts, path: Path | None) -> dict[str, str]:
    """Extract the string-valued entries of a "scripts" object."""
    if raw_scripts is None:
        return {}

    if not isinstance(raw_scripts, dict):
        raise InvalidManifestError(
            f'"scripts" in {path or "manifest"} must be an object, '
            f"got {type(raw_scripts).__name__}",
            path,
        )

    scripts: dict[str, str] = {}
    for name, command in raw_scripts.items():
        if not isinstance(command, str):
            # Only string commands are listed
            logger.warning(
                "Skipping script %r: expected a string command, got %s",
                name,
                type(command).__name__,
            )
            continue
        scripts[name] = command

    return scripts


def parse_package_json(content: str, path: Path | None = None) -> Manifest:
    """Parse package.json content into Manifest.

    Args:
        content: The package.json file content
        path: Where the content came from, used in error messages

    Returns:
        Parsed Manifest object

    Raises:
        InvalidManifestError: If the content is not a JSON object or
            "scripts" is not an object
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidManifestError(
            f"Failed to parse {path or 'manifest'} as JSON: {e}", path
        ) from e

    if not isinstance(data, dict):
        raise InvalidManifestError(
            f"{path or 'manifest'} must contain a JSON object", path
        )

    scripts = _parse_scripts(data.get("scripts"), path)
    logger.debug("Parsed %d script(s) from %s", len(scripts), path or "<content>")

    return Manifest(
        path=path,
        name=_optional_string(data, "name"),
        description=_optional_string(data, "description"),
        scripts=scripts,
    )


def read_manifest(path: Path) -> Manifest:
    """Read and parse a package.json file from disk.

    Raises:
        ManifestNotFoundError: If the file is missing or unreadable
        InvalidManifestError: If the file is not a valid manifest
    """
    if not path.is_file():
        raise ManifestNotFoundError(f"No package.json file found: {path}", path)

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidManifestError(f"{path} is not valid UTF-8: {e}", path) from e
    except OSError as e:
        raise ManifestNotFoundError(f"Failed to read {path}: {e}", path) from e

    return parse_package_json(content, path)
