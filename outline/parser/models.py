"""Pydantic v2 models for the outline documentation parser.

Defines the document tree produced by the parser (documents, functions, types,
fields, params, operators and examples) together with the diagnostics that
accompany a parse run.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class IssueKind(str, Enum):
    """Classification of non-fatal irregularities found while parsing."""
    MALFORMED_HEADER = "malformed_header"
    EMPTY_SECTION = "empty_section"
    MISPLACED_SECTION = "misplaced_section"


# ---------------------------------------------------------------------------
# Leaf Entities
# ---------------------------------------------------------------------------

class Example(BaseModel):
    """A reference to an example file, optionally labelled."""
    filename: str = Field(..., description="Example file, e.g. 'foo.star'")
    name: str = Field(default="", description="Human-readable label")
    description: str = Field(default="", description="Free-text explanation")


class Param(BaseModel):
    """A single function parameter."""
    name: str = Field(..., description="Parameter name")
    type: str = Field(default="", description="Raw type text following the name")
    description: str = Field(default="", description="What this parameter is for")


class FieldModel(BaseModel):
    """A field on a type. The name may carry a trailing type hint, e.g. 'hours float'."""
    name: str = Field(..., description="Field name with any embedded type text")
    description: str = Field(default="", description="What this field holds")


class Operator(BaseModel):
    """An operator expression captured verbatim, e.g. 'duration + time = time'."""
    expression: str = Field(..., description="Raw operator expression")
    description: str = Field(default="", description="Nested prose, if any")


# ---------------------------------------------------------------------------
# Functions & Types
# ---------------------------------------------------------------------------

class Function(BaseModel):
    """A function or method declaration."""
    signature: str = Field(..., description="Raw signature, e.g. 'sum(a,b int) int'")
    description: str = Field(default="", description="Free-text description")
    params: list[Param] = Field(default_factory=list, description="Declared parameters")
    examples: list[Example] = Field(default_factory=list, description="Linked examples")


class Type(BaseModel):
    """A documented type with its fields, methods, operators and examples."""
    name: str = Field(..., description="Type name")
    description: str = Field(default="", description="Free-text description")
    fields: list[FieldModel] = Field(default_factory=list, description="Fields on the type")
    methods: list[Function] = Field(default_factory=list, description="Methods on the type")
    operators: list[Operator] = Field(default_factory=list, description="Supported operators")
    examples: list[Example] = Field(default_factory=list, description="Linked examples")


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

class Document(BaseModel):
    """One ``outline:`` block and everything nested under it.

    ``name`` is the join key used when documents found in separate comments
    are merged.
    """
    name: str = Field(..., min_length=1, description="Document name from the header")
    path: str = Field(default="", description="Value of the 'path:' directive")
    description: str = Field(default="", description="Free-text description")
    functions: list[Function] = Field(default_factory=list, description="Top-level functions")
    types: list[Type] = Field(default_factory=list, description="Top-level types")


# ---------------------------------------------------------------------------
# Parse Diagnostics
# ---------------------------------------------------------------------------

class ParseIssue(BaseModel):
    """A lenient-parse irregularity. Issues never change the parsed output."""
    kind: IssueKind = Field(..., description="Issue classification")
    line: int = Field(..., ge=0, description="1-based line number, 0 if unknown")
    message: str = Field(..., description="Human-readable explanation")


class ParseResult(BaseModel):
    """Complete result of parsing one input text."""
    documents: list[Document] = Field(default_factory=list, description="Documents in order")
    issues: list[ParseIssue] = Field(default_factory=list, description="Diagnostics")
