"""Unit tests for cc_minimal_statusline/atomic_io.py.

Tests atomic file writes and cleanup on failure.
"""

from __future__ import annotations

from unittest import mock

import pytest

from cc_minimal_statusline.atomic_io import atomic_write


class TestAtomicWrite:
    """Tests for atomic_write()."""

    def test_creates_file_with_content(self, tmp_path):
        target = tmp_path / "settings.json"
        atomic_write(target, "hello world")
        assert target.read_text() == "hello world"

    def test_file_has_0600_permissions(self, tmp_path):
        """Created file should have 0o600 permissions (from mkstemp)."""
        target = tmp_path / "settings.json"
        atomic_write(target, "content")
        assert target.stat().st_mode & 0o777 == 0o600

    def test_creates_parent_dirs(self, tmp_path):
        target = tmp_path / "a" / "b" / "settings.json"
        atomic_write(target, "deep")
        assert target.read_text() == "deep"

    def test_overwrites_existing(self, tmp_path):
        target = tmp_path / "settings.json"
        target.write_text("old")
        atomic_write(target, "new")
        assert target.read_text() == "new"

    def test_writes_utf8(self, tmp_path):
        target = tmp_path / "settings.json"
        atomic_write(target, '{"name": "café"}')
        assert target.read_bytes() == '{"name": "café"}'.encode("utf-8")

    def test_preserves_original_on_error(self, tmp_path):
        target = tmp_path / "settings.json"
        target.write_text("original")

        with mock.patch("cc_minimal_statusline.atomic_io.os.replace", side_effect=OSError("boom")):
            with pytest.raises(OSError, match="boom"):
                atomic_write(target, "new content")

        assert target.read_text() == "original"

    def test_cleans_up_temp_on_failure(self, tmp_path):
        target = tmp_path / "settings.json"

        with mock.patch("cc_minimal_statusline.atomic_io.os.replace", side_effect=OSError("boom")):
            with pytest.raises(OSError):
                atomic_write(target, "content")

        assert list(tmp_path.iterdir()) == []

    def test_cleans_up_temp_on_encode_error(self, tmp_path):
        """Non-OSError failures while writing still remove the temp file."""
        target = tmp_path / "settings.json"
        target.write_text("original")

        with pytest.raises(UnicodeEncodeError):
            atomic_write(target, '{"note": "\ud83d"}')

        assert target.read_text() == "original"
        assert [p.name for p in tmp_path.iterdir()] == ["settings.json"]

    def test_keeps_existing_permissions(self, tmp_path):
        target = tmp_path / "settings.json"
        target.write_text("old")
        target.chmod(0o644)
        atomic_write(target, "new")
        assert target.stat().st_mode & 0o777 == 0o644

    def test_writes_through_symlink(self, tmp_path):
        real = tmp_path / "real.json"
        real.write_text("old")
        link = tmp_path / "settings.json"
        link.symlink_to(real)

        atomic_write(link, "new")

        assert link.is_symlink()
        assert real.read_text() == "new"

    def test_dangling_symlink_creates_target(self, tmp_path):
        real = tmp_path / "dotfiles" / "settings.json"
        link = tmp_path / "settings.json"
        link.symlink_to(real)

        atomic_write(link, "fresh")

        assert link.is_symlink()
        assert real.read_text() == "fresh"
