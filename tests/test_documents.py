"""Tests for bcs.documents."""

from __future__ import annotations

import io
import os

import pytest

from bcs.documents import (
    DocumentNotFoundError,
    DocumentReader,
    default_link,
    detect_default_tier,
    find_data_dir,
    set_default_tier,
)
from bcs.documents import locator
from bcs.tiers import Tier


@pytest.fixture
def no_system_dirs(monkeypatch):
    monkeypatch.setattr(locator, "SYSTEM_DATA_DIRS", ())


class TestFindDataDir:
    def test_explicit_data_dir(self, data_dir, no_system_dirs):
        assert find_data_dir(data_dir) == data_dir

    def test_explicit_install_root(self, data_dir, no_system_dirs):
        assert find_data_dir(data_dir.parent) == data_dir

    def test_cwd_data_dir(self, data_dir, no_system_dirs, monkeypatch):
        monkeypatch.chdir(data_dir.parent)
        assert find_data_dir() == data_dir

    def test_system_dir_fallback(self, data_dir, tmp_path, monkeypatch):
        monkeypatch.setattr(locator, "SYSTEM_DATA_DIRS", (tmp_path / "nowhere", data_dir))
        assert find_data_dir(tmp_path / "empty") == data_dir

    def test_not_found_lists_searched_dirs(self, tmp_path, monkeypatch, no_system_dirs):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(DocumentNotFoundError) as exc:
            find_data_dir(tmp_path / "missing")
        assert "missing" in str(exc.value)

    def test_directory_without_documents_is_skipped(self, tmp_path, no_system_dirs, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "BASH-CODING-STANDARD.md").write_text("x")
        with pytest.raises(DocumentNotFoundError):
            find_data_dir()


class TestDocumentReader:
    def test_read(self, data_dir):
        reader = DocumentReader(data_dir)
        text = reader.read("BASH-CODING-STANDARD.summary.md")
        assert text.startswith("# Bash Coding Standard (summary)")

    def test_stream_writes_bytes(self, data_dir):
        reader = DocumentReader(data_dir)
        out = io.BytesIO()
        size = reader.stream("BASH-CODING-STANDARD.complete.md", out)
        expected = (data_dir / "BASH-CODING-STANDARD.complete.md").read_bytes()
        assert out.getvalue() == expected
        assert size == len(expected)

    def test_missing_document(self, data_dir):
        reader = DocumentReader(data_dir)
        assert not reader.exists("BASH-CODING-STANDARD.rulet.md")
        with pytest.raises(DocumentNotFoundError):
            reader.read("BASH-CODING-STANDARD.rulet.md")
        with pytest.raises(DocumentNotFoundError):
            reader.stream("BASH-CODING-STANDARD.rulet.md", io.BytesIO())


class TestDefaultTierLink:
    def test_detect(self, data_dir):
        assert detect_default_tier(data_dir) is Tier.ABSTRACT

    def test_detect_without_link(self, tmp_path):
        assert detect_default_tier(tmp_path) is None
        assert detect_default_tier(None) is None

    def test_detect_unrecognised_target(self, tmp_path):
        (tmp_path / "BASH-CODING-STANDARD.md").symlink_to("elsewhere.md")
        assert detect_default_tier(tmp_path) is None

    def test_set_returns_previous(self, data_dir):
        previous = set_default_tier(data_dir, Tier.COMPLETE)
        assert previous is Tier.ABSTRACT
        assert detect_default_tier(data_dir) is Tier.COMPLETE
        # Relative target keeps the tree relocatable
        assert os.readlink(default_link(data_dir)) == "BASH-CODING-STANDARD.complete.md"

    def test_set_same_tier_is_noop(self, data_dir):
        assert set_default_tier(data_dir, Tier.ABSTRACT) is Tier.ABSTRACT
        assert detect_default_tier(data_dir) is Tier.ABSTRACT

    def test_set_replaces_regular_file(self, data_dir):
        link = default_link(data_dir)
        link.unlink()
        link.write_text("stale copy")
        assert set_default_tier(data_dir, Tier.SUMMARY) is None
        assert link.is_symlink()

    def test_set_requires_target(self, data_dir):
        (data_dir / "BASH-CODING-STANDARD.summary.md").unlink()
        with pytest.raises(DocumentNotFoundError):
            set_default_tier(data_dir, Tier.SUMMARY)
