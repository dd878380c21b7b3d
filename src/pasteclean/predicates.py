"""Node classification helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import TEXT_LEVEL_SEMANTIC_ELEMENTS, VOID_ELEMENTS

if TYPE_CHECKING:
    from .node import TreeNode


def is_element(node: TreeNode) -> bool:
    return node.is_element


def is_text(node: TreeNode) -> bool:
    return not node.is_element


def is_text_level_semantic(node: TreeNode) -> bool:
    """True for inline elements such as <b>, <a> or <span>."""
    return node.is_element and node.tag_name in TEXT_LEVEL_SEMANTIC_ELEMENTS


def is_void(node: TreeNode) -> bool:
    """True for elements that cannot have content, such as <br> or <img>."""
    return node.is_element and node.tag_name in VOID_ELEMENTS


def has_text(node: TreeNode) -> bool:
    """Check whether the text content of node has anything but whitespace."""
    return bool(node.get_text_content().strip())
