from .cleaner import DEFAULT_POLICY, CleanPolicy, clean_element
from .dom import (
    copy_child_nodes,
    next_non_empty_element_sibling,
    next_sibling_and_remove,
    remove_all_attributes,
    remove_empty_children,
    replace_node,
    wrap_child_nodes,
)
from .lists import build_nested_list, create_nested_list
from .node import Node, TreeNode, create_element, create_text
from .predicates import has_text, is_text_level_semantic, is_void
from .serialize import to_html
from .walker import remove_descendants, remove_shallow, unwrap_descendants, walk_descendants

__all__ = [
    "DEFAULT_POLICY",
    "CleanPolicy",
    "Node",
    "TreeNode",
    "build_nested_list",
    "clean_element",
    "copy_child_nodes",
    "create_element",
    "create_nested_list",
    "create_text",
    "has_text",
    "is_text_level_semantic",
    "is_void",
    "next_non_empty_element_sibling",
    "next_sibling_and_remove",
    "remove_all_attributes",
    "remove_descendants",
    "remove_empty_children",
    "remove_shallow",
    "replace_node",
    "to_html",
    "unwrap_descendants",
    "walk_descendants",
    "wrap_child_nodes",
]
