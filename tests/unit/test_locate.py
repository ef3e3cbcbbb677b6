"""Tests for manifest location."""

from pathlib import Path

from core.locate import DEFAULT_MANIFEST, locate_manifest


class TestLocateManifest:
    """Test manifest path resolution."""

    def test_default_path(self):
        """Should fall back to ./package.json."""
        assert locate_manifest() == Path(DEFAULT_MANIFEST)
        assert locate_manifest(None) == Path("package.json")

    def test_explicit_path(self, tmp_path):
        """Should return the supplied path unchanged."""
        target = tmp_path / "sub" / "package.json"
        assert locate_manifest(target) == target
        assert locate_manifest(str(target)) == target

    def test_no_existence_check(self, tmp_path):
        """Should not fail for a path that does not exist."""
        missing = tmp_path / "missing.json"
        assert locate_manifest(missing) == missing
        assert not missing.exists()
