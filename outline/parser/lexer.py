"""Line classification for outline text.

Every raw input line is turned into a :class:`SourceLine` that records its
measured indentation and what kind of line it is: a document header, a
``path:`` directive, one of the fixed section keywords, prose, or blank.
Classification never fails; anything unrecognised is prose.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .indent import DEFAULT_TAB_WIDTH, measure_indent


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_HEADER_PATTERN = re.compile(r"^outline:\s*(.*)$")
_PATH_PATTERN = re.compile(r"^path:\s*(.*)$")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class LineKind(str, Enum):
    """What a single line is, judged from its content alone."""
    HEADER = "header"
    PATH = "path"
    SECTION = "section"
    TEXT = "text"
    BLANK = "blank"


class SectionKind(str, Enum):
    """The closed vocabulary of section keywords."""
    FUNCTIONS = "functions"
    TYPES = "types"
    METHODS = "methods"
    FIELDS = "fields"
    OPERATORS = "operators"
    EXAMPLES = "examples"
    PARAMS = "params"


_SECTIONS: dict[str, SectionKind] = {kind.value: kind for kind in SectionKind}


# ---------------------------------------------------------------------------
# Source lines
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SourceLine:
    """A classified input line.

    ``text`` is the content with surrounding whitespace removed. ``value``
    holds the header name or path for HEADER and PATH lines, and ``section``
    the keyword for SECTION lines.
    """

    number: int
    indent: int
    text: str
    kind: LineKind
    value: str = ""
    section: SectionKind | None = None

    @property
    def blank(self) -> bool:
        return self.kind is LineKind.BLANK


def classify_line(text: str) -> tuple[LineKind, str, SectionKind | None]:
    """Classify whitespace-trimmed line content.

    Returns a ``(kind, value, section)`` triple. Section keywords match
    exactly and case-sensitively, with or without a trailing colon.

    Examples::

        classify_line("outline: time") -> (HEADER, "time", None)
        classify_line("path: lib/time") -> (PATH, "lib/time", None)
        classify_line("fields:") -> (SECTION, "", SectionKind.FIELDS)
        classify_line("Fields:") -> (TEXT, "", None)
    """
    if not text:
        return LineKind.BLANK, "", None

    header_match = _HEADER_PATTERN.match(text)
    if header_match:
        return LineKind.HEADER, header_match.group(1).strip(), None

    path_match = _PATH_PATTERN.match(text)
    if path_match:
        return LineKind.PATH, path_match.group(1).strip(), None

    keyword = text[:-1] if text.endswith(":") else text
    section = _SECTIONS.get(keyword)
    if section is not None:
        return LineKind.SECTION, "", section

    return LineKind.TEXT, "", None


def split_lines(
    source: str | Iterable[str],
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> list[SourceLine]:
    """Split *source* into classified lines.

    *source* may be a whole string or any iterable of lines (an open text
    file, a list); trailing newlines on individual lines are ignored. A string
    is split on ``"\\n"`` only.
    """
    if isinstance(source, str):
        # Only "\n" ends a line; form feeds and other separators are content.
        raw_lines = source.split("\n")
        if raw_lines[-1] == "":
            raw_lines.pop()
    else:
        raw_lines = list(source)
    lines: list[SourceLine] = []
    for number, raw in enumerate(raw_lines, start=1):
        raw = raw.rstrip("\r\n")
        text = raw.strip()
        kind, value, section = classify_line(text)
        indent = measure_indent(raw, tab_width) if text else 0
        lines.append(SourceLine(
            number=number,
            indent=indent,
            text=text,
            kind=kind,
            value=value,
            section=section,
        ))
    return lines
