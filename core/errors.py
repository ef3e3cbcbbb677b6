"""Errors raised while reading a manifest."""

from pathlib import Path


class ManifestError(Exception):
    """Base class for manifest problems reported to the user."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ManifestNotFoundError(ManifestError):
    """The manifest does not exist or cannot be read."""


class InvalidManifestError(ManifestError):
    """The manifest is not well-formed JSON or has the wrong shape."""
