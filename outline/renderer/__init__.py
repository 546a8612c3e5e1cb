"""Template rendering for parsed outline documents.

Usage::

    from outline.renderer import TemplateRenderer

    markdown = TemplateRenderer().render_documents(documents)
"""

from outline.renderer.templates import DEFAULT_TEMPLATE, TemplateRenderer

__all__ = [
    "TemplateRenderer",
    "DEFAULT_TEMPLATE",
]
