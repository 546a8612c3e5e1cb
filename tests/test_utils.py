"""Unit tests for utility functions (outline.utils).

Tests cover:
- sanitize_anchor (various inputs)
- write_text / dump_json
- Rich output helpers
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from outline.utils import (
    dump_json,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    sanitize_anchor,
    write_text,
)


# ---------------------------------------------------------------------------
# sanitize_anchor
# ---------------------------------------------------------------------------


class TestSanitizeAnchor:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("sum(a,b int) int", "sumab-int-int"),
            ("Time Zone", "time-zone"),
            ("snake_case", "snake_case"),
            ("a-b", "a-b"),
            ("duration == duration = boolean", "duration--duration--boolean"),
            ("", ""),
        ],
    )
    def test_conversion(self, value: str, expected: str):
        assert sanitize_anchor(value) == expected

    @pytest.mark.unit
    def test_punctuation_only(self):
        assert sanitize_anchor("(),.=*") == ""


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------


class TestWriteText:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_creates_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "out.md"
        result = await write_text("# hi\n", target)
        assert result == target
        assert target.read_text(encoding="utf-8") == "# hi\n"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_accepts_str_path(self, tmp_path: Path):
        result = await write_text("x", str(tmp_path / "out.txt"))
        assert isinstance(result, Path)
        assert result.read_text(encoding="utf-8") == "x"


class TestDumpJson:
    @pytest.mark.unit
    def test_pretty_printed(self):
        text = dump_json({"name": "time", "functions": []})
        assert json.loads(text) == {"name": "time", "functions": []}
        assert "\n  " in text

    @pytest.mark.unit
    def test_keeps_unicode(self):
        assert "é" in dump_json({"d": "é"})

    @pytest.mark.unit
    def test_falls_back_to_str(self, tmp_path: Path):
        assert json.loads(dump_json({"p": tmp_path})) == {"p": str(tmp_path)}


# ---------------------------------------------------------------------------
# Rich output helpers (smoke tests - verify they don't raise)
# ---------------------------------------------------------------------------


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_summary_table(self):
        print_summary_table({"time": "4 function(s), 2 type(s)"}, title="Documents")

    @pytest.mark.unit
    def test_print_success(self):
        print_success("Wrote API.md")

    @pytest.mark.unit
    def test_print_error(self):
        print_error("Template not found")

    @pytest.mark.unit
    def test_print_warning(self):
        print_warning("outline header has no name")
