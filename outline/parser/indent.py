"""Indentation tracking for outline blocks.

Nesting is inferred from relative indentation only. The tracker keeps a stack
of the indentation extents of the currently open lines (the chain of
ancestors of the next line). Observing a new line closes every open line that
is not strictly shallower than it, and the new line becomes a child of
whatever remains on top.

Leading tabs are expanded to ``tab_width`` columns before measuring, so a file
indented with tabs and one indented with spaces produce the same structure,
and a line that mixes both is compared by column rather than character count.
"""

from __future__ import annotations

from typing import NamedTuple


DEFAULT_TAB_WIDTH = 4


def measure_indent(raw: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Return the column width of the leading whitespace of *raw*.

    Examples::

        measure_indent("    foo") -> 4
        measure_indent("\\t\\tfoo", 4) -> 8
        measure_indent("  \\tfoo", 4) -> 4
    """
    stripped = raw.lstrip()
    leading = raw[: len(raw) - len(stripped)]
    return len(leading.expandtabs(tab_width))


class IndentEvent(NamedTuple):
    """Structural effect of observing one line.

    ``closed`` counts the open lines that were closed; ``depth`` is the new
    line's nesting level, 1 being a direct child of the tracker's base.
    A line with ``closed == 0`` opens a block under the previous line; a
    line with ``closed == 1`` is a sibling of the previous line.
    """

    closed: int
    depth: int


class IndentTracker:
    """Stack of indentation extents for the lines currently open.

    *base* is the extent of the block owner; every observed line is treated
    as deeper than it.
    """

    def __init__(self, base: int = -1) -> None:
        self.base = base
        self._stack: list[int] = []

    @property
    def depth(self) -> int:
        """Number of currently open lines."""
        return len(self._stack)

    @property
    def extent(self) -> int:
        """Extent of the innermost open line, or the base when none is open."""
        return self._stack[-1] if self._stack else self.base

    def observe(self, width: int) -> IndentEvent:
        """Record a line of indentation *width* and report what it closed.

        A width that falls between an ancestor's extent and the innermost
        extent closes the inner line and lands beside it as a sibling.
        """
        width = max(width, self.base + 1)
        closed = 0
        while self._stack and self._stack[-1] >= width:
            self._stack.pop()
            closed += 1
        self._stack.append(width)
        return IndentEvent(closed=closed, depth=len(self._stack))

    def reset(self) -> None:
        self._stack.clear()
