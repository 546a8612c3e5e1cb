"""Outline configuration.

Typed settings for the parse, merge and render run. All settings use Pydantic
v2 models so they are validated at construction time and can be serialised
to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from outline.parser.indent import DEFAULT_TAB_WIDTH


class OutputFormat(str, Enum):
    """How the merged documents are written out."""
    MARKDOWN = "markdown"
    JSON = "json"


_TRUTHY = {"1", "true", "yes", "on"}


class OutlineConfig(BaseModel):
    """Global outline configuration.

    Instances are typically created once by the CLI entry point and handed to
    ``Pipeline``.
    """

    tab_width: int = Field(
        default=DEFAULT_TAB_WIDTH, ge=1, description="Columns a leading tab counts for"
    )
    sort: bool = Field(default=True, description="Alpha-sort documents and their entities")
    template: Optional[Path] = Field(
        default=None, description="Template file overriding the built-in index"
    )
    context_dir: Optional[Path] = Field(
        default=None, description="Extra directory searched for template includes"
    )
    output_format: OutputFormat = Field(default=OutputFormat.MARKDOWN)
    output: Optional[Path] = Field(
        default=None, description="Destination file; stdout when unset"
    )
    strict: bool = Field(
        default=False, description="Fail the run on any malformed outline header"
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "OutlineConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "OutlineConfig":
        """Build an ``OutlineConfig`` from environment variables.

        Recognised variables (all optional):
            OUTLINE_TAB_WIDTH, OUTLINE_NO_SORT, OUTLINE_TEMPLATE,
            OUTLINE_CONTEXT_DIR, OUTLINE_FORMAT, OUTLINE_STRICT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("OUTLINE_TAB_WIDTH"):
            kwargs["tab_width"] = int(os.environ["OUTLINE_TAB_WIDTH"])
        if os.environ.get("OUTLINE_NO_SORT"):
            kwargs["sort"] = os.environ["OUTLINE_NO_SORT"].lower() not in _TRUTHY
        if os.environ.get("OUTLINE_TEMPLATE"):
            kwargs["template"] = Path(os.environ["OUTLINE_TEMPLATE"])
        if os.environ.get("OUTLINE_CONTEXT_DIR"):
            kwargs["context_dir"] = Path(os.environ["OUTLINE_CONTEXT_DIR"])
        if os.environ.get("OUTLINE_FORMAT"):
            kwargs["output_format"] = OutputFormat(os.environ["OUTLINE_FORMAT"].lower())
        if os.environ.get("OUTLINE_STRICT"):
            kwargs["strict"] = os.environ["OUTLINE_STRICT"].lower() in _TRUTHY
        return cls(**kwargs)
