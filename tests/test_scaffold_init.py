"""Tests for extprobe.scaffold.init - default config scaffolding."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from extprobe.models.config import ProbeConfig, load_probe_config
from extprobe.scaffold.init import ConfigExistsError, render_default_config, scaffold_config


class TestRenderDefaultConfig:
    def test_parses_back_to_defaults(self):
        data = yaml.safe_load(render_default_config())
        assert ProbeConfig.model_validate(data) == ProbeConfig()

    def test_keeps_field_order(self):
        text = render_default_config()
        assert text.index("extension_dir") < text.index("output:")


class TestScaffoldConfig:
    def test_writes_loadable_config(self, tmp_path: Path):
        path = scaffold_config(tmp_path)
        assert path == (tmp_path / "extprobe.yaml").resolve()
        assert load_probe_config(tmp_path) == ProbeConfig()

    def test_creates_directory(self, tmp_path: Path):
        target = tmp_path / "new" / "project"
        scaffold_config(target)
        assert (target / "extprobe.yaml").exists()

    def test_existing_config_raises(self, tmp_path: Path):
        (tmp_path / "extprobe.yaml").write_text("ci_mode: true\n", encoding="utf-8")
        with pytest.raises(ConfigExistsError):
            scaffold_config(tmp_path)

    def test_force_overwrites(self, tmp_path: Path):
        (tmp_path / "extprobe.yaml").write_text("ci_mode: true\n", encoding="utf-8")
        scaffold_config(tmp_path, force=True)
        assert load_probe_config(tmp_path).ci_mode is False
