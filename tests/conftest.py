"""Shared pytest fixtures for the outline test suite.

Provides reusable outline sources for:
- Tab- and space-indented renderings of the same document
- A large document exercising every section keyword
- Multi-line descriptions and example sections
- Temporary source files on disk
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Outline sources
# ---------------------------------------------------------------------------

TWO_FUNCS_TABS = (
    "outline: twoFuncs\n"
    "\tpath: twoFuncs\n"
    "\tfunctions:\n"
    "\t\tdifference(a,b int) int\n"
    "\t\tsum(a,b int) int\n"
    "\t\t\tadd two things together"
)

# Mixes a tab-indented path line with space-indented sections, and indents
# the description with tabs that are shorter in characters than its parent.
TWO_FUNCS_MIXED = (
    "outline: twoFuncs\n"
    "\tpath: twoFuncs\n"
    "  functions:\n"
    "    difference(a,b int) int\n"
    "    sum(a,b int) int\n"
    "\t\t\tadd two things together"
)

TIME_SPACES = """\
here's some leading gak that shouldn't get read into the doc

outline: time
  functions:
    duration(string) duration
      parse a duration
    time(string, format=..., location=...) time
      parse a time
    now() time
      new time instance set to current time
      implementations are able to make this a constant
    zero() time
      a constant

  types:
    duration
      a period of time
      methods:
        add(d duration) int
          params:
             d duration
      fields:
        hours float
          number of hours starting at zero
        minutes float
        nanoseconds int
        seconds float
      operators:
        duration - time = duration
        duration + time = time
        duration == duration = boolean
        duration < duration = booleans
    time
      fields:
      operators:
        time == time = boolean
        time < time = boolean"""


@pytest.fixture
def two_funcs_tabs() -> str:
    """Two functions, indented with tabs only."""
    return TWO_FUNCS_TABS


@pytest.fixture
def two_funcs_mixed() -> str:
    """The two-function document with mixed tab/space indentation."""
    return TWO_FUNCS_MIXED


@pytest.fixture
def two_funcs_spaces() -> str:
    """The two-function document, indented with spaces only."""
    return TWO_FUNCS_TABS.replace("\t", "  ")


@pytest.fixture
def time_spaces() -> str:
    """A document using every section keyword, preceded by unrelated text."""
    return TIME_SPACES


@pytest.fixture
def doc_with_description_tabs() -> str:
    """A two-line document description followed by a section."""
    return (
        "outline: doc\n"
        "\tthis is a document description.\n"
        "\tIt's written across two lines\n"
        "\tfunctions:\n"
        "\t\tsum(a int, b int) int"
    )


@pytest.fixture
def huh_spaces() -> str:
    """A header indented as deep as its own content."""
    return (
        "  outline: huh\n"
        "  huh is a package that has no meaning or purpose\n"
        "  functions:\n"
        "    foo(bar string) int\n"
        "      foo a bar, which is to to a bar and remove 'd' from 'food'\n"
        "      params:\n"
        "        bar string\n"
        "          the name of a bar\n"
        "    date() date\n"
        "      make a date"
    )


@pytest.fixture
def func_examples() -> str:
    """A function with both an examples and a params section."""
    return (
        "outline: examples\n"
        "  huh is a package that has no meaning or purpose\n"
        "  functions:\n"
        "    foo(bar string) int\n"
        "      foo a bar, which is to to a bar and remove 'd' from 'food'\n"
        "      examples:\n"
        "        foo.star Foo Example\n"
        "        bar.star \n"
        "          Description of the bar example\n"
        "      params:\n"
        "        bar string\n"
        "          the name of a bar"
    )


@pytest.fixture
def type_examples() -> str:
    """Type content at the same depth as the header."""
    return textwrap.dedent("""\
        outline: examples
        types:
          duration
            a period of time
            examples:
              foo.star Foo Example
            methods:
              add(d duration) int
                params:
                  d duration""")


@pytest.fixture
def type_description_multiline() -> str:
    """A type description with an interior blank line."""
    return textwrap.dedent("""\
        outline: examples
        types:
          duration
            line 1.
            line 2.

            line 3.
            examples:
              foo.star Foo Example""")


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

@pytest.fixture
def write_source(tmp_path: Path):
    """Factory writing outline text to a file under ``tmp_path``."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
