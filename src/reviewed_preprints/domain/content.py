"""
Rich text content model and HTML rendering.

Titles and similar fields arrive as a small recursive document model:

    Content = str | list[Content] | {"type": <node type>, "content": Content}

Supported node types map onto a single HTML element each. Text leaves are
emitted verbatim; the upstream service is trusted to send sanitized text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

Content = Union[str, list["Content"], Mapping[str, Any], None]

# Node type -> HTML tag
CONTENT_TAGS: Mapping[str, str] = {
    "Paragraph": "p",
    "Emphasis": "em",
    "Strong": "strong",
    "NontextualAnnotation": "u",
    "Superscript": "sup",
    "Subscript": "sub",
}


def content_to_html(content: Content) -> str:
    """
    Render a content fragment as HTML.

    Args:
        content: Text, a sequence of fragments, or a typed node

    Returns:
        HTML string. Missing content and unknown node types render as "".

    Example:
        >>> content_to_html(["E = mc", {"type": "Superscript", "content": "2"}])
        'E = mc<sup>2</sup>'
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, (list, tuple)):
        return "".join(content_to_html(part) for part in content)
    if isinstance(content, Mapping):
        node_type = content.get("type")
        tag = CONTENT_TAGS.get(node_type) if isinstance(node_type, str) else None
        if tag is None:
            return ""
        return f"<{tag}>{content_to_html(content.get('content'))}</{tag}>"
    return ""
