"""Block parsing and entity building for outline documents.

Parsing happens in two steps. :func:`build_tree` drives the
:class:`~outline.parser.indent.IndentTracker` over a run of classified lines
and nests each line under its nearest shallower predecessor. A
:class:`BlockParser` then walks that tree recursively: section keywords open
typed sub-blocks, each child of a section declares one entity, and every other
line is folded into the free-text description of the entity that owns it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from .indent import IndentTracker
from .lexer import LineKind, SectionKind, SourceLine
from .models import (
    Document,
    Example,
    FieldModel,
    Function,
    IssueKind,
    Operator,
    Param,
    ParseIssue,
    Type,
)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Sections permitted per entity
# ---------------------------------------------------------------------------

_DOCUMENT_SECTIONS = frozenset({SectionKind.FUNCTIONS, SectionKind.TYPES})
_FUNCTION_SECTIONS = frozenset({SectionKind.PARAMS, SectionKind.EXAMPLES})
_TYPE_SECTIONS = frozenset({
    SectionKind.FIELDS,
    SectionKind.METHODS,
    SectionKind.OPERATORS,
    SectionKind.EXAMPLES,
})
_LEAF_SECTIONS: frozenset[SectionKind] = frozenset()


# ---------------------------------------------------------------------------
# Line tree
# ---------------------------------------------------------------------------

class _Node:
    """A non-blank line and the lines nested beneath it.

    ``blank_before`` counts the blank lines that directly preceded the line.
    """

    __slots__ = ("line", "blank_before", "children")

    def __init__(self, line: SourceLine | None, blank_before: int = 0) -> None:
        self.line = line
        self.blank_before = blank_before
        self.children: list[_Node] = []

    @property
    def text(self) -> str:
        return self.line.text if self.line is not None else ""

    @property
    def number(self) -> int:
        return self.line.number if self.line is not None else 0

    def __repr__(self) -> str:
        return f"_Node(text={self.text!r}, children={len(self.children)})"


def build_tree(lines: Sequence[SourceLine], base: int = -1) -> _Node:
    """Nest *lines* by indentation under an anonymous root node.

    Every line is treated as deeper than *base*. Blank lines produce no
    nodes; they are counted onto the next non-blank line.
    """
    tracker = IndentTracker(base)
    root = _Node(None)
    path: list[_Node] = [root]
    pending_blanks = 0

    for line in lines:
        if line.blank:
            pending_blanks += 1
            continue
        event = tracker.observe(line.indent)
        del path[event.depth:]
        node = _Node(line, blank_before=pending_blanks)
        path[-1].children.append(node)
        path.append(node)
        pending_blanks = 0

    return root


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------

def _flatten(node: _Node, out: list[tuple[int, str]]) -> None:
    """Append *node* and all of its descendants as prose."""
    out.append((node.blank_before, node.text))
    for child in node.children:
        _flatten(child, out)


def join_description(items: Sequence[tuple[int, str]]) -> str:
    """Join ``(blank_before, text)`` items into a description string.

    Interior blank lines survive as empty lines; blank lines before the
    first item are dropped.
    """
    lines: list[str] = []
    for blanks, text in items:
        if lines:
            lines.extend([""] * blanks)
        lines.append(text)
    return "\n".join(lines)


class _Body:
    """The children of one entity, split into prose and section blocks."""

    __slots__ = ("prose", "sections", "path")

    def __init__(self) -> None:
        self.prose: list[tuple[int, str]] = []
        self.sections: dict[SectionKind, list[_Node]] = {}
        self.path: str | None = None

    @property
    def description(self) -> str:
        return join_description(self.prose)

    def entries(self, kind: SectionKind) -> list[_Node]:
        return self.sections.get(kind, [])


# ---------------------------------------------------------------------------
# Block Parser
# ---------------------------------------------------------------------------

class BlockParser:
    """Builds typed entities from a line tree.

    Irregular input is never rejected: misplaced keywords become prose and
    empty sections become empty lists. Both are recorded in :attr:`issues`.
    """

    def __init__(self) -> None:
        self.issues: list[ParseIssue] = []

    # -- Documents -----------------------------------------------------------

    def parse_document(self, name: str, root: _Node) -> Document:
        """Build a :class:`Document` named *name* from the children of *root*."""
        body = self._parse_body(root, _DOCUMENT_SECTIONS, owner=f"outline '{name}'",
                                directives=True)
        return Document(
            name=name,
            path=body.path or "",
            description=body.description,
            functions=self._entities(body.entries(SectionKind.FUNCTIONS), self.parse_function),
            types=self._entities(body.entries(SectionKind.TYPES), self.parse_type),
        )

    # -- Entities ------------------------------------------------------------

    def parse_function(self, node: _Node) -> Function:
        """Function or method: the line is the signature."""
        body = self._parse_body(node, _FUNCTION_SECTIONS, owner=f"function '{node.text}'")
        return Function(
            signature=node.text,
            description=body.description,
            params=self._entities(body.entries(SectionKind.PARAMS), self.parse_param),
            examples=self._entities(body.entries(SectionKind.EXAMPLES), self.parse_example),
        )

    def parse_type(self, node: _Node) -> Type:
        body = self._parse_body(node, _TYPE_SECTIONS, owner=f"type '{node.text}'")
        return Type(
            name=node.text,
            description=body.description,
            fields=self._entities(body.entries(SectionKind.FIELDS), self.parse_field),
            methods=self._entities(body.entries(SectionKind.METHODS), self.parse_function),
            operators=self._entities(body.entries(SectionKind.OPERATORS), self.parse_operator),
            examples=self._entities(body.entries(SectionKind.EXAMPLES), self.parse_example),
        )

    def parse_field(self, node: _Node) -> FieldModel:
        body = self._parse_body(node, _LEAF_SECTIONS, owner=f"field '{node.text}'")
        return FieldModel(name=node.text, description=body.description)

    def parse_param(self, node: _Node) -> Param:
        """Param: first token is the name, the rest of the line is the type."""
        name, type_text = _split_first(node.text)
        body = self._parse_body(node, _LEAF_SECTIONS, owner=f"param '{node.text}'")
        return Param(name=name, type=type_text, description=body.description)

    def parse_operator(self, node: _Node) -> Operator:
        body = self._parse_body(node, _LEAF_SECTIONS, owner=f"operator '{node.text}'")
        return Operator(expression=node.text, description=body.description)

    def parse_example(self, node: _Node) -> Example:
        """Example: first token is the filename, the rest of the line the label."""
        filename, label = _split_first(node.text)
        body = self._parse_body(node, _LEAF_SECTIONS, owner=f"example '{node.text}'")
        return Example(filename=filename, name=label, description=body.description)

    # -- Helpers -------------------------------------------------------------

    def _entities(self, nodes: list[_Node], build: Callable[[_Node], T]) -> list[T]:
        return [build(node) for node in nodes]

    def _parse_body(
        self,
        node: _Node,
        allowed: frozenset[SectionKind],
        owner: str,
        directives: bool = False,
    ) -> _Body:
        """Split the children of *node* into prose and permitted sections.

        A section may appear more than once; its entries accumulate in order.
        """
        body = _Body()
        for child in node.children:
            line = child.line
            assert line is not None  # only the root has no line

            if line.kind is LineKind.SECTION and line.section in allowed:
                entries = body.sections.setdefault(line.section, [])
                if not child.children:
                    self._issue(
                        IssueKind.EMPTY_SECTION, child,
                        f"'{line.section.value}' section of {owner} has no entries",
                    )
                entries.extend(child.children)
                continue

            if line.kind is LineKind.PATH and directives:
                body.path = line.value
                for nested in child.children:
                    _flatten(nested, body.prose)
                continue

            if line.kind is LineKind.SECTION:
                self._issue(
                    IssueKind.MISPLACED_SECTION, child,
                    f"'{line.section.value}' is not a section of {owner}; read as text",
                )
            _flatten(child, body.prose)
        return body

    def _issue(self, kind: IssueKind, node: _Node, message: str) -> None:
        self.issues.append(ParseIssue(kind=kind, line=node.number, message=message))


def _split_first(text: str) -> tuple[str, str]:
    """Split off the first whitespace-delimited token.

    Examples::

        _split_first("foo.star Foo Example") -> ("foo.star", "Foo Example")
        _split_first("bar.star") -> ("bar.star", "")
    """
    parts = text.split(None, 1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()
