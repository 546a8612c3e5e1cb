"""Outline Pipeline Orchestrator.

Runs the three stages that turn extracted comment text into documentation:

Stage PARSE  -- Parse every input independently (concurrently) into documents.
Stage MERGE  -- Fold documents sharing a name together, then alpha-sort them.
Stage RENDER -- Render the document list through a Jinja2 template, or as JSON.

Each input file holds comment text that has already been pulled out of the
source tree; the parser never sees comment delimiters.

Usage::

    outline render docs/time.txt docs/duration.txt
    outline render comments/*.txt -t api.md.j2 --no-sort -o API.md
    python -m outline.pipeline render - --format json < comment.txt
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from jinja2 import TemplateError
from pydantic import ValidationError
from rich.markup import escape

from outline.config import OutlineConfig, OutputFormat
from outline.parser import (
    Document,
    IssueKind,
    ParseResult,
    merge_all,
    parse_file,
    parse_report,
    sort_documents,
)
from outline.renderer import TemplateRenderer
from outline.utils import (
    console,
    dump_json,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    write_text,
)

STDIN = "-"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PipelineError(Exception):
    """Raised when a pipeline stage fails irrecoverably."""

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        super().__init__(f"{stage}: {message}")


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Drives the parse, merge and render stages.

    Attributes:
        config: Run configuration.
        renderer: Template renderer used by the render stage.
    """

    def __init__(self, config: OutlineConfig) -> None:
        self.config = config
        self.renderer = TemplateRenderer(context_dir=config.context_dir)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    async def parse(self, sources: Sequence[str]) -> list[ParseResult]:
        """Parse every source concurrently; results keep the input order.

        Malformed headers are reported as warnings, or raise in strict mode.
        """
        results = await asyncio.gather(*(self._parse_source(s) for s in sources))

        for source, result in zip(sources, results):
            for issue in result.issues:
                label = f"{source}:{issue.line}" if issue.line else source
                if issue.kind is IssueKind.MALFORMED_HEADER:
                    if self.config.strict:
                        raise PipelineError("parse", f"{label}: {issue.message}")
                    print_warning(escape(f"{label}: {issue.message}"))
                else:
                    console.print(escape(f"{label}: {issue.message}"), style="dim")
        return list(results)

    def merge(self, results: Sequence[ParseResult]) -> list[Document]:
        """Merge documents by name in input order, sorting unless disabled."""
        documents = merge_all(doc for result in results for doc in result.documents)
        if self.config.sort:
            documents = sort_documents(documents)
        return documents

    def render(self, documents: Sequence[Document]) -> str:
        """Render *documents* in the configured output format."""
        if self.config.output_format is OutputFormat.JSON:
            return dump_json([doc.model_dump(mode="json") for doc in documents]) + "\n"
        try:
            return self.renderer.render_documents(documents, self.config.template)
        except (FileNotFoundError, TemplateError) as exc:
            raise PipelineError("render", str(exc)) from exc

    async def run(self, sources: Sequence[str]) -> str:
        """Execute every stage and deliver the rendered output.

        The output is written to ``config.output`` when set and returned
        either way.
        """
        results = await self.parse(sources)
        documents = self.merge(results)
        output = self.render(documents)

        print_summary_table(
            {
                doc.name: f"{len(doc.functions)} function(s), {len(doc.types)} type(s)"
                for doc in documents
            },
            title=f"{len(documents)} outline document(s)",
        )

        if self.config.output is not None:
            path = await write_text(output, self.config.output)
            print_success(f"Wrote {path}")
        return output

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _parse_source(self, source: str) -> ParseResult:
        """Parse one input; unreadable or undecodable input raises PipelineError."""
        try:
            if source == STDIN:
                text = await asyncio.to_thread(sys.stdin.read)
                return parse_report(text, self.config.tab_width)
            return await parse_file(source, self.config.tab_width)
        except UnicodeDecodeError as exc:
            raise PipelineError("parse", f"{source}: not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise PipelineError("parse", str(exc)) from exc


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``outline`` and ``python -m outline.pipeline``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="outline",
        description="Outline -- extract and render outline documentation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  outline render comment.txt\n"
            "  outline render a.txt b.txt -t api.md.j2 -o API.md\n"
            "  outline render - --format json < comment.txt\n"
        ),
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    render = subcommands.add_parser(
        "render",
        aliases=["pkg"],
        help="parse outline documents from extracted comment text and render them",
    )
    render.add_argument(
        "sources",
        nargs="+",
        help="Files holding extracted comment text ('-' reads stdin)",
    )
    render.add_argument(
        "--template", "-t",
        default=None,
        help="Template file to load; overrides the built-in index",
    )
    render.add_argument(
        "--no-sort",
        action="store_true",
        help="Don't alpha-sort documents and their entities",
    )
    render.add_argument(
        "--context-dir", "-d",
        default=None,
        help="Directory searched first for template includes",
    )
    render.add_argument(
        "--format", "-f",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Output format (default: markdown)",
    )
    render.add_argument(
        "--output", "-o",
        default=None,
        help="Write output to this file instead of stdout",
    )
    render.add_argument(
        "--tab-width",
        type=int,
        default=None,
        help="Columns a leading tab counts for (default: 4)",
    )
    render.add_argument(
        "--strict",
        action="store_true",
        help="Fail on any malformed outline header",
    )

    args = parser.parse_args(argv)

    try:
        config = OutlineConfig.from_env()
    except (ValueError, ValidationError) as exc:
        print_error(escape(f"Error: Invalid OUTLINE_* environment setting: {exc}"))
        sys.exit(1)
    overrides: dict[str, object] = {}
    if args.template:
        overrides["template"] = Path(args.template)
    if args.no_sort:
        overrides["sort"] = False
    if args.context_dir:
        overrides["context_dir"] = Path(args.context_dir)
    if args.format:
        overrides["output_format"] = OutputFormat(args.format)
    if args.output:
        overrides["output"] = Path(args.output)
    if args.tab_width is not None:
        if args.tab_width < 1:
            print_error(f"Error: Invalid tab width: {args.tab_width} (must be >= 1)")
            sys.exit(1)
        overrides["tab_width"] = args.tab_width
    if args.strict:
        overrides["strict"] = True
    config = config.model_copy(update=overrides)

    pipeline = Pipeline(config)
    try:
        output = asyncio.run(pipeline.run(args.sources))
    except PipelineError as exc:
        print_error(escape(f"Error: {exc}"))
        sys.exit(1)

    if config.output is None:
        sys.stdout.write(output)


if __name__ == "__main__":
    main()
