"""HTML serialization for pasteclean nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import VOID_ELEMENTS

if TYPE_CHECKING:
    from .node import TreeNode


def _escape_text(text: str | None) -> str:
    if not text:
        return ""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr_value(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;")


def _start_tag(node: TreeNode) -> str:
    parts = ["<", node.tag_name]
    for key, value in node.attributes.items():
        parts.append(" ")
        parts.append(key)
        if value is not None and value != "":
            parts.append(f'="{_escape_attr_value(str(value))}"')
    parts.append(">")
    return "".join(parts)


def to_html(node: TreeNode, *, pretty: bool = False, indent_size: int = 2) -> str:
    """Serialize node and its subtree.

    Compact output reproduces the tree exactly. Pretty output puts each
    element with element children on its own lines, indented, and drops
    whitespace-only text.
    """
    if pretty:
        return _node_to_pretty_html(node, 0, indent_size)
    return _node_to_html(node)


def _node_to_html(node: TreeNode) -> str:
    if not node.is_element:
        return _escape_text(node.get_text_content())

    start = _start_tag(node)
    if node.tag_name in VOID_ELEMENTS:
        return start
    inner = "".join(_node_to_html(child) for child in node.children)
    return f"{start}{inner}</{node.tag_name}>"


def _node_to_pretty_html(node: TreeNode, indent: int, indent_size: int) -> str:
    prefix = " " * (indent * indent_size)

    if not node.is_element:
        text = node.get_text_content().strip()
        return f"{prefix}{_escape_text(text)}" if text else ""

    start = _start_tag(node)
    if node.tag_name in VOID_ELEMENTS:
        return f"{prefix}{start}"

    children = node.children
    if not children:
        return f"{prefix}{start}</{node.tag_name}>"

    # Text-only elements stay on one line
    if all(not c.is_element for c in children):
        text = "".join(_escape_text(c.get_text_content()) for c in children)
        return f"{prefix}{start}{text}</{node.tag_name}>"

    parts = [f"{prefix}{start}"]
    for child in children:
        child_html = _node_to_pretty_html(child, indent + 1, indent_size)
        if child_html:
            parts.append(child_html)
    parts.append(f"{prefix}</{node.tag_name}>")
    return "\n".join(parts)
