"""
Tests for package metadata.
"""

import composer_quiz


class TestPackageMetadata:
    """Top-level version and license strings."""

    def test_version_when_imported_then_matches_pyproject(self):
        assert composer_quiz.__version__ == "0.1.0"

    def test_copyright_when_imported_then_names_license(self):
        assert "Licensed under the MIT License" in composer_quiz.__copyright__
