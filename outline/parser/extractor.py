"""Document assembly for outline text.

Scans arbitrary text (usually a comment already stripped of its comment
syntax) for ``outline: <name>`` headers and builds one :class:`Document` per
header from the indented block that follows it. Text before the first header
is ignored.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from pathlib import Path

from .blocks import BlockParser, build_tree
from .indent import DEFAULT_TAB_WIDTH
from .lexer import LineKind, SourceLine, split_lines
from .models import Document, IssueKind, ParseIssue, ParseResult


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class OutlineError(Exception):
    """Base class for outline parsing failures."""


class MalformedHeaderError(OutlineError):
    """Raised when an ``outline:`` header is missing or has an empty name."""

    def __init__(self, message: str, line: int = 0, header: str = "") -> None:
        self.line = line
        self.header = header
        super().__init__(message)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _header_indices(lines: list[SourceLine]) -> list[int]:
    return [i for i, line in enumerate(lines) if line.kind is LineKind.HEADER]


def _document_span(lines: list[SourceLine], start: int) -> tuple[list[SourceLine], int]:
    """Return the lines belonging to the header at *start*, and where it ends.

    The span runs until the first non-blank line that is shallower than the
    header, or a header no deeper than it. Lines at the header's own depth
    belong to it. A deeper header opens a nested document whose lines are
    skipped; the enclosing document resumes after it.
    """
    header = lines[start]
    span: list[SourceLine] = []
    index = start + 1
    while index < len(lines):
        line = lines[index]
        if not line.blank and line.indent < header.indent:
            break
        if line.kind is LineKind.HEADER:
            if line.indent <= header.indent:
                break
            _, index = _document_span(lines, index)
            continue
        span.append(line)
        index += 1
    return span, index


def _assemble(lines: list[SourceLine], start: int, parser: BlockParser) -> Document:
    """Build the document whose header sits at ``lines[start]``."""
    header = lines[start]
    if not header.value:
        raise MalformedHeaderError(
            f"line {header.number}: outline header has no name: {header.text!r}",
            line=header.number,
            header=header.text,
        )
    span, _ = _document_span(lines, start)
    root = build_tree(span, base=header.indent - 1)
    return parser.parse_document(header.value, root)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_report(
    source: str | Iterable[str],
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> ParseResult:
    """Parse every outline document in *source* and collect diagnostics.

    A malformed header skips only its own document; scanning continues with
    the next header and the failure is recorded as an issue.

    Args:
        source: Outline text, or an iterable of its lines.
        tab_width: Columns a leading tab counts for when measuring indentation.

    Returns:
        A ParseResult holding the documents in order of appearance and any
        irregularities found along the way.
    """
    lines = split_lines(source, tab_width)
    parser = BlockParser()
    documents: list[Document] = []
    issues: list[ParseIssue] = []

    for start in _header_indices(lines):
        try:
            documents.append(_assemble(lines, start, parser))
        except MalformedHeaderError as exc:
            issues.append(ParseIssue(
                kind=IssueKind.MALFORMED_HEADER, line=exc.line, message=str(exc),
            ))

    issues.extend(parser.issues)
    issues.sort(key=lambda issue: issue.line)
    return ParseResult(documents=documents, issues=issues)


def parse(
    source: str | Iterable[str],
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> list[Document]:
    """Parse every outline document in *source*, in order of appearance.

    Returns an empty list when *source* holds no well-formed header.
    """
    return parse_report(source, tab_width).documents


def parse_first(
    source: str | Iterable[str],
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> Document:
    """Parse only the first outline document in *source*.

    Raises:
        MalformedHeaderError: If *source* has no ``outline:`` header, or the
            first one has an empty name.
    """
    lines = split_lines(source, tab_width)
    starts = _header_indices(lines)
    if not starts:
        raise MalformedHeaderError("no 'outline:' header found")
    return _assemble(lines, starts[0], BlockParser())


async def parse_file(
    path: str | Path,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> ParseResult:
    """Read a text file in a worker thread and parse it with :func:`parse_report`.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Outline source not found: {path}")
    text = await asyncio.to_thread(file_path.read_text, "utf-8")
    return parse_report(text, tab_width)
