"""Outline: extract indentation-structured documentation from comment text.

Parses the ``outline:`` notation into typed document trees, merges documents
that share a name, and renders them through Jinja2 templates.
"""

__version__ = "0.1.0"
