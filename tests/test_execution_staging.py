"""Tests for extension staging and required-file verification."""

from __future__ import annotations

from pathlib import Path

import pytest

from extprobe.errors import SetupError
from extprobe.execution.staging import missing_files, stage_extension, verify_required_files
from extprobe.models.config import DEFAULT_REQUIRED_FILES


def _write_source(root: Path, names: list[str]) -> None:
    root.mkdir(parents=True, exist_ok=True)
    for name in names:
        (root / name).write_text(f"// {name}\n", encoding="utf-8")


class TestVerifyRequiredFiles:
    def test_all_present(self, tmp_path: Path):
        _write_source(tmp_path, DEFAULT_REQUIRED_FILES)
        verify_required_files(tmp_path, DEFAULT_REQUIRED_FILES)

    def test_missing_names_file(self, tmp_path: Path):
        _write_source(tmp_path, [n for n in DEFAULT_REQUIRED_FILES if n != "tracking-blocker.js"])
        with pytest.raises(SetupError, match="Extension file missing: tracking-blocker.js"):
            verify_required_files(tmp_path, DEFAULT_REQUIRED_FILES)

    def test_first_missing_reported(self, tmp_path: Path):
        with pytest.raises(SetupError, match="manifest.json"):
            verify_required_files(tmp_path, DEFAULT_REQUIRED_FILES)

    def test_directory_does_not_count(self, tmp_path: Path):
        (tmp_path / "manifest.json").mkdir()
        assert missing_files(tmp_path, ["manifest.json"]) == ["manifest.json"]


class TestStageExtension:
    def test_copies_required_files_only(self, tmp_path: Path):
        source = tmp_path / "source"
        _write_source(source, DEFAULT_REQUIRED_FILES + ["eslint.config.js", "package.json"])
        dest = tmp_path / "extension"

        staged = stage_extension(source, dest, DEFAULT_REQUIRED_FILES)

        assert [p.name for p in staged] == DEFAULT_REQUIRED_FILES
        assert sorted(p.name for p in dest.iterdir()) == sorted(DEFAULT_REQUIRED_FILES)
        assert (dest / "background.js").read_text(encoding="utf-8") == "// background.js\n"

    def test_nested_required_file(self, tmp_path: Path):
        source = tmp_path / "source"
        (source / "icons").mkdir(parents=True)
        (source / "icons" / "icon.png").write_bytes(b"png")
        dest = tmp_path / "extension"

        stage_extension(source, dest, ["icons/icon.png"])
        assert (dest / "icons" / "icon.png").read_bytes() == b"png"

    def test_missing_source_file_copies_nothing(self, tmp_path: Path):
        source = tmp_path / "source"
        _write_source(source, ["manifest.json"])
        dest = tmp_path / "extension"

        with pytest.raises(SetupError, match="background.js"):
            stage_extension(source, dest, ["manifest.json", "background.js"])
        assert not dest.exists()
