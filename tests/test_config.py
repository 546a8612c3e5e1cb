"""Unit tests for OutlineConfig (outline.config).

Tests cover:
- OutlineConfig defaults and validation
- save/load round trip
- from_env
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from outline.config import OutlineConfig, OutputFormat


# ---------------------------------------------------------------------------
# Defaults and validation
# ---------------------------------------------------------------------------


class TestOutlineConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = OutlineConfig()
        assert config.tab_width == 4
        assert config.sort is True
        assert config.template is None
        assert config.context_dir is None
        assert config.output_format is OutputFormat.MARKDOWN
        assert config.output is None
        assert config.strict is False

    @pytest.mark.unit
    def test_tab_width_zero_rejected(self):
        with pytest.raises(ValidationError):
            OutlineConfig(tab_width=0)

    @pytest.mark.unit
    def test_format_from_string(self):
        config = OutlineConfig(output_format="json")
        assert config.output_format is OutputFormat.JSON

    @pytest.mark.unit
    def test_unknown_format_rejected(self):
        with pytest.raises(ValidationError):
            OutlineConfig(output_format="html")


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


class TestOutlineConfigPersistence:
    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = OutlineConfig(
            tab_width=2,
            sort=False,
            template=tmp_path / "api.md.j2",
            output_format=OutputFormat.JSON,
        )
        path = config.save(tmp_path / "nested" / "outline.json")
        assert path.exists()
        assert OutlineConfig.load(path) == config

    @pytest.mark.unit
    def test_saved_file_is_json(self, tmp_path: Path):
        path = OutlineConfig(strict=True).save(tmp_path / "outline.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["strict"] is True
        assert data["output_format"] == "markdown"


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


class TestOutlineConfigFromEnv:
    @pytest.mark.unit
    def test_empty_env_gives_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = OutlineConfig.from_env()
        assert config == OutlineConfig()

    @pytest.mark.unit
    def test_all_variables(self, tmp_path: Path):
        env = {
            "OUTLINE_TAB_WIDTH": "8",
            "OUTLINE_NO_SORT": "yes",
            "OUTLINE_TEMPLATE": str(tmp_path / "t.j2"),
            "OUTLINE_CONTEXT_DIR": str(tmp_path),
            "OUTLINE_FORMAT": "JSON",
            "OUTLINE_STRICT": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            config = OutlineConfig.from_env()
        assert config.tab_width == 8
        assert config.sort is False
        assert config.template == tmp_path / "t.j2"
        assert config.context_dir == tmp_path
        assert config.output_format is OutputFormat.JSON
        assert config.strict is True

    @pytest.mark.unit
    def test_falsy_no_sort_keeps_sorting(self):
        with patch.dict(os.environ, {"OUTLINE_NO_SORT": "false"}, clear=True):
            config = OutlineConfig.from_env()
        assert config.sort is True

    @pytest.mark.unit
    def test_invalid_tab_width_rejected(self):
        with patch.dict(os.environ, {"OUTLINE_TAB_WIDTH": "0"}, clear=True):
            with pytest.raises(ValidationError):
                OutlineConfig.from_env()
