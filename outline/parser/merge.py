"""Merging and ordering of parsed documents.

Documents with the same name can be discovered in several comments or files.
They are folded together before rendering and, unless disabled, sorted
alphabetically so output is stable between runs.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Document


def merge_documents(target: Document, other: Document) -> Document:
    """Merge *other* into *target* in place and return *target*.

    Empty ``description`` and ``path`` values on *target* are filled from
    *other*; types and functions of *other* are appended without
    de-duplication.
    """
    if not target.description:
        target.description = other.description
    if not target.path:
        target.path = other.path
    target.types.extend(other.types)
    target.functions.extend(other.functions)
    return target


def merge_all(documents: Iterable[Document]) -> list[Document]:
    """Fold *documents* by name, keeping the order each name first appears in.

    The first document seen for a name is copied before anything is merged
    into it, so the inputs are left untouched.
    """
    merged: dict[str, Document] = {}
    for doc in documents:
        found = merged.get(doc.name)
        if found is None:
            merged[doc.name] = doc.model_copy(deep=True)
            continue
        merge_documents(found, doc.model_copy(deep=True))
    return list(merged.values())


def sort_documents(documents: Iterable[Document]) -> list[Document]:
    """Return *documents* alpha-sorted by name, sorting their contents in place.

    Functions sort by signature and types by name; within each type, fields
    sort by name and methods by signature. Every sort is stable.
    """
    ordered = sorted(documents, key=lambda doc: doc.name)
    for doc in ordered:
        doc.functions.sort(key=lambda fn: fn.signature)
        doc.types.sort(key=lambda typ: typ.name)
        for typ in doc.types:
            typ.fields.sort(key=lambda field: field.name)
            typ.methods.sort(key=lambda method: method.signature)
    return ordered
