"""Mutation-safe descendant traversal.

Children are visited last to first so a callback may remove, replace or
unwrap the node it is given without shifting the indexes of siblings that
have not been visited yet.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from .node import TreeNode

    Condition = Callable[[TreeNode], bool]
    Callback = Callable[[TreeNode], None]


def walk_descendants(element: TreeNode, condition: Condition, callback: Callback) -> None:
    """Call callback on every descendant of element for which condition holds.

    element itself is never tested. When the callback leaves a different node
    (or nothing) at the current index, the walk resumes right before the
    siblings it has already visited, so nodes moved into place by the
    callback are tested and recursed into as well. Otherwise the walk
    recurses into the child if it is an element.
    """
    children = element.children
    i = len(children) - 1
    while i >= 0:
        child = children[i]
        if condition(child):
            # Siblings after i have been visited already.
            visited_tail = len(children) - i - 1
            callback(child)
            if i >= len(children) or children[i] is not child:
                i = len(children) - visited_tail - 1
                continue
        if child.is_element:
            walk_descendants(child, condition, callback)
        i -= 1


def remove_shallow(node: TreeNode) -> None:
    """Replace node with its children, keeping their order and position."""
    parent = node.parent
    if parent is None:
        return
    while node.children:
        parent.insert_before(node.children[0], node)
    parent.remove_child(node)


def remove_descendants(element: TreeNode, condition: Condition) -> None:
    """Detach every descendant of element for which condition holds."""

    def remove(child: TreeNode) -> None:
        if child.parent is not None:
            child.parent.remove_child(child)

    walk_descendants(element, condition, remove)


def unwrap_descendants(element: TreeNode, condition: Condition) -> None:
    """Unwrap every descendant of element for which condition holds."""
    walk_descendants(element, condition, remove_shallow)
