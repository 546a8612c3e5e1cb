"""Canonical indented-text serialization of documents.

The dump is written in outline notation itself with a fixed field order and
indent step, so equal documents always dump identically. The converse does
not hold: a param named "a b" and a param "a" of type "b" share one line. It
exists for comparisons in tests and debugging output; it is not an
interchange format.
"""

from __future__ import annotations

from .models import Document, Example, Function, Type


def marshal_indent(document: Document, indent: int = 0, step: str = "  ") -> str:
    """Serialize *document*, starting *indent* steps in.

    Empty fields and empty lists are omitted. Blank description lines are
    written as empty lines.
    """
    writer = _Writer(step)
    writer.line(indent, f"outline: {document.name}")
    if document.path:
        writer.line(indent + 1, f"path: {document.path}")
    writer.text(indent + 1, document.description)
    if document.functions:
        writer.line(indent + 1, "functions:")
        for fn in document.functions:
            _write_function(writer, indent + 2, fn)
    if document.types:
        writer.line(indent + 1, "types:")
        for typ in document.types:
            _write_type(writer, indent + 2, typ)
    return writer.getvalue()


class _Writer:
    __slots__ = ("step", "lines")

    def __init__(self, step: str) -> None:
        self.step = step
        self.lines: list[str] = []

    def line(self, depth: int, text: str) -> None:
        self.lines.append(f"{self.step * depth}{text}")

    def text(self, depth: int, description: str) -> None:
        if not description:
            return
        for text in description.split("\n"):
            self.lines.append(f"{self.step * depth}{text}" if text else "")

    def getvalue(self) -> str:
        return "\n".join(self.lines) + "\n"


def _write_function(writer: _Writer, depth: int, fn: Function) -> None:
    writer.line(depth, fn.signature)
    writer.text(depth + 1, fn.description)
    if fn.params:
        writer.line(depth + 1, "params:")
        for param in fn.params:
            writer.line(depth + 2, f"{param.name} {param.type}".rstrip())
            writer.text(depth + 3, param.description)
    _write_examples(writer, depth + 1, fn.examples)


def _write_type(writer: _Writer, depth: int, typ: Type) -> None:
    writer.line(depth, typ.name)
    writer.text(depth + 1, typ.description)
    if typ.fields:
        writer.line(depth + 1, "fields:")
        for field in typ.fields:
            writer.line(depth + 2, field.name)
            writer.text(depth + 3, field.description)
    if typ.methods:
        writer.line(depth + 1, "methods:")
        for method in typ.methods:
            _write_function(writer, depth + 2, method)
    if typ.operators:
        writer.line(depth + 1, "operators:")
        for operator in typ.operators:
            writer.line(depth + 2, operator.expression)
            writer.text(depth + 3, operator.description)
    _write_examples(writer, depth + 1, typ.examples)


def _write_examples(writer: _Writer, depth: int, examples: list[Example]) -> None:
    if not examples:
        return
    writer.line(depth, "examples:")
    for example in examples:
        writer.line(depth + 1, f"{example.filename} {example.name}".rstrip())
        writer.text(depth + 2, example.description)
