"""Rebuild nested lists from flat, level-annotated list items.

Word processors export every list item as a sibling and record its depth
as metadata. `create_nested_list` turns that depth back into real nesting,
one level at a time, creating the intermediate containers it needs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .node import TreeNode

    ListFactory = Callable[[], TreeNode]


def create_nested_list(
    level: int,
    previous_level: int,
    list_node: TreeNode,
    create_list: ListFactory,
) -> TreeNode:
    """Return the list container that receives the next item at `level`.

    `list_node` is the container that received the previous item, at
    `previous_level`. Going deeper appends one new container per level;
    going up moves to the parent once per level, first wrapping a
    parentless container in a new one so there is somewhere to go.
    """
    if level < 0 or previous_level < 0:
        msg = f"List levels must be non-negative, got {level} after {previous_level}"
        raise ValueError(msg)

    while level > previous_level:
        new_list = create_list()
        list_node.append_child(new_list)
        list_node = new_list
        previous_level += 1

    while level < previous_level:
        if list_node.parent is None:
            new_list = create_list()
            new_list.append_child(list_node)
        list_node = list_node.parent
        previous_level -= 1

    return list_node


def build_nested_list(
    items: Iterable[tuple[int, TreeNode]],
    create_list: ListFactory,
    *,
    start_level: int = 0,
) -> TreeNode:
    """Nest (level, item) pairs into lists and return the outermost list."""
    list_node = create_list()
    level = start_level
    for item_level, item in items:
        list_node = create_nested_list(item_level, level, list_node, create_list)
        list_node.append_child(item)
        level = item_level

    root = list_node
    while root.parent is not None:
        root = root.parent
    return root
