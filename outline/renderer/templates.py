"""Jinja2 template rendering for outline documents.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``outline/renderer/templates/`` directory (or a caller-supplied template file)
and renders them with the merged document list as context.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from outline.parser.models import Document
from outline.utils import sanitize_anchor, write_text


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "index.md.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates over a list of outline documents.

    Templates see the documents as ``docs``. Besides the built-in filters
    they get the ``sanitize_anchor`` filter and the ``split``, ``trim`` and
    ``replace_all`` helpers. Includes are resolved against *context_dir*
    first, then the template directory.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        context_dir: str | Path | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        search_path = [str(self.template_dir)]
        if context_dir is not None:
            search_path.insert(0, str(context_dir))
        self.env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=select_autoescape([], default_for_string=False),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["sanitize_anchor"] = sanitize_anchor
        self.env.globals["split"] = _split
        self.env.globals["trim"] = _trim
        self.env.globals["replace_all"] = _replace_all

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a template from the search path with the provided context."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def render_documents(
        self,
        documents: Sequence[Document],
        template_file: str | Path | None = None,
    ) -> str:
        """Render *documents* with *template_file*, or the built-in index.

        Raises:
            FileNotFoundError: If *template_file* does not exist.
        """
        context = {"docs": list(documents)}
        if template_file is None:
            return self.render(DEFAULT_TEMPLATE, context)
        path = Path(template_file)
        if not path.exists():
            raise FileNotFoundError(f"Template not found: {template_file}")
        return self.render_string(path.read_text(encoding="utf-8"), context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        documents: Sequence[Document],
        output_path: str | Path,
        template_file: str | Path | None = None,
    ) -> Path:
        """Render *documents* and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render_documents(documents, template_file)
        return await write_text(content, output_path)


# ---------------------------------------------------------------------------
# Jinja2 helpers
# ---------------------------------------------------------------------------

def _split(value: str, sep: str) -> list[str]:
    return value.split(sep)


def _trim(value: str) -> str:
    return value.strip()


def _replace_all(value: str, old: str, new: str) -> str:
    return value.replace(old, new)
