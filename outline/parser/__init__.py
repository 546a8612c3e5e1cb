"""Outline documentation parser.

Extracts the indentation-structured ``outline:`` notation embedded in comment
text and turns it into a typed document tree of functions, types, fields,
methods, operators, params and examples.

Usage::

    from outline.parser import parse, parse_first

    doc = parse_first(comment_text)
    print(doc.name, [fn.signature for fn in doc.functions])

    for doc in parse(comment_text):
        print(doc.name)
"""

from outline.parser.models import (
    Document,
    Example,
    FieldModel,
    Function,
    IssueKind,
    Operator,
    Param,
    ParseIssue,
    ParseResult,
    Type,
)
from outline.parser.extractor import (
    MalformedHeaderError,
    OutlineError,
    parse,
    parse_file,
    parse_first,
    parse_report,
)
from outline.parser.merge import merge_all, merge_documents, sort_documents
from outline.parser.dump import marshal_indent

__all__ = [
    "parse",
    "parse_first",
    "parse_report",
    "parse_file",
    "merge_documents",
    "merge_all",
    "sort_documents",
    "marshal_indent",
    "OutlineError",
    "MalformedHeaderError",
    "Document",
    "Function",
    "Type",
    "FieldModel",
    "Param",
    "Operator",
    "Example",
    "IssueKind",
    "ParseIssue",
    "ParseResult",
]
