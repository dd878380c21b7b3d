"""Small tree helpers shared by paste transformations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .node import Node
from .predicates import has_text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .node import TreeNode


def copy_child_nodes(source: TreeNode, destination: TreeNode) -> None:
    """Move the children of source into destination.

    A text source has no children; a copy of the text node itself is
    appended instead.
    """
    if not source.is_element:
        destination.append_child(source.clone(deep=True))
        return

    while source.first_child is not None:
        destination.append_child(source.first_child)


def replace_node(source: TreeNode, destination: TreeNode) -> None:
    """Move source's children into destination and put destination in its place."""
    copy_child_nodes(source, destination)
    if source.parent is not None:
        source.parent.replace_child(destination, source)


def next_non_empty_element_sibling(node: TreeNode) -> TreeNode | None:
    """Next element sibling that has visible text, skipping empty ones."""
    sibling = node.next_element_sibling
    while sibling is not None and not has_text(sibling):
        sibling = sibling.next_element_sibling
    return sibling


def next_sibling_and_remove(element: TreeNode, parent: TreeNode) -> TreeNode | None:
    """Return the next non-empty element sibling, then detach element."""
    sibling = next_non_empty_element_sibling(element)
    parent.remove_child(element)
    return sibling


def remove_empty_children(node: TreeNode) -> None:
    """Detach every direct child without visible text."""
    for child in list(node.children):
        if not has_text(child):
            node.remove_child(child)


def wrap_child_nodes(child_nodes: Sequence[TreeNode], tag_name: str) -> TreeNode | None:
    """Wrap sibling nodes in a new tag_name element placed before the first.

    All nodes must share a parent. Returns the wrapper, or None for an
    empty sequence.
    """
    if not child_nodes:
        return None

    first = child_nodes[0]
    parent = first.parent
    wrapper = Node(tag_name)
    if parent is not None:
        parent.insert_before(wrapper, first)

    for child in child_nodes:
        wrapper.append_child(child)
    return wrapper


def remove_all_attributes(node: TreeNode) -> None:
    if not node.attributes:
        return
    for name in list(node.attributes):
        node.remove_attribute(name)
