"""Minimal mutable DOM used by the cleanup algorithms.

The algorithms in this package only rely on the operations named by
`TreeNode`. `Node` is the bundled implementation; a host that already has a
tree type can provide an adapter exposing the same surface instead.
"""

from __future__ import annotations

from typing import Protocol


class TreeNode(Protocol):
    tag_name: str
    attributes: dict[str, str | None]
    children: list[TreeNode]
    parent: TreeNode | None
    next_sibling: TreeNode | None

    @property
    def is_element(self) -> bool: ...

    @property
    def first_child(self) -> TreeNode | None: ...

    @property
    def next_element_sibling(self) -> TreeNode | None: ...

    def append_child(self, child: TreeNode) -> None: ...

    def insert_before(self, new_node: TreeNode, reference_node: TreeNode | None) -> None: ...

    def remove_child(self, child: TreeNode) -> None: ...

    def replace_child(self, new_node: TreeNode, old_node: TreeNode) -> None: ...

    def remove_attribute(self, name: str) -> None: ...

    def get_text_content(self) -> str: ...

    def clone(self, deep: bool = True) -> TreeNode: ...


ELEMENT_NODE = 1
TEXT_NODE = 3


class Node:
    """A DOM-like node.

    - tag_name: lowercase tag, e.g. 'p' or 'span'. Text nodes use '#text'.
    - attributes: dict of attribute name to value
    - children: list of child Nodes, only ever mutated in place
    - parent: owning Node, or None for a detached node
    - previous_sibling/next_sibling: adjacent nodes under the same parent
    """

    __slots__ = (
        "attributes",
        "children",
        "next_sibling",
        "parent",
        "previous_sibling",
        "tag_name",
        "text_content",
    )

    def __init__(
        self,
        tag_name: str,
        attributes: dict[str, str | None] | None = None,
        text_content: str | None = None,
    ) -> None:
        if tag_name is None or tag_name == "":
            msg = "Empty tag_name passed to Node constructor"
            raise ValueError(msg)

        self.tag_name = tag_name if tag_name == "#text" else tag_name.lower()
        # Lowercase attribute names deterministically; keep first occurrence
        lowered: dict[str, str | None] = {}
        if attributes:
            for k, v in attributes.items():
                lk = k.lower()
                if lk not in lowered:
                    lowered[lk] = v
        self.attributes = lowered
        self.children: list[Node] = []
        self.parent: Node | None = None
        self.text_content = text_content if text_content is not None else ""
        self.next_sibling: Node | None = None
        self.previous_sibling: Node | None = None

    @property
    def node_type(self) -> int:
        return TEXT_NODE if self.tag_name == "#text" else ELEMENT_NODE

    @property
    def is_element(self) -> bool:
        return self.tag_name != "#text"

    @property
    def is_text(self) -> bool:
        return self.tag_name == "#text"

    @property
    def first_child(self) -> Node | None:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Node | None:
        return self.children[-1] if self.children else None

    @property
    def next_element_sibling(self) -> Node | None:
        current = self.next_sibling
        while current is not None and not current.is_element:
            current = current.next_sibling
        return current

    def _detach(self, child: Node) -> None:
        """Unlink child from its current parent without clearing child.parent."""
        if child.previous_sibling:
            child.previous_sibling.next_sibling = child.next_sibling
        if child.next_sibling:
            child.next_sibling.previous_sibling = child.previous_sibling
        if child.parent is not None:
            child.parent.children.remove(child)

    def _would_create_circular_reference(self, child: Node) -> bool:
        current: Node | None = self
        while current is not None:
            if current is child:
                return True
            current = current.parent
        return False

    def append_child(self, child: Node) -> None:
        if self._would_create_circular_reference(child):
            msg = f"Adding {child.tag_name} as child of {self.tag_name} would create circular reference"
            raise ValueError(msg)

        if child.parent is not None:
            self._detach(child)

        if self.children:
            self.children[-1].next_sibling = child
            child.previous_sibling = self.children[-1]
        else:
            child.previous_sibling = None

        child.parent = self
        child.next_sibling = None
        self.children.append(child)

    def insert_child_at(self, index: int, child: Node) -> None:
        """Insert a child at index; out-of-range indexes append."""
        if index < 0 or index >= len(self.children):
            self.append_child(child)
            return
        self.insert_before(child, self.children[index])

    def insert_before(self, new_node: Node, reference_node: Node | None) -> None:
        """Insert new_node before reference_node; a None reference appends."""
        if reference_node is None:
            self.append_child(new_node)
            return
        if reference_node.parent is not self or new_node is reference_node:
            return
        if self._would_create_circular_reference(new_node):
            msg = f"Inserting {new_node.tag_name} into {self.tag_name} would create circular reference"
            raise ValueError(msg)

        if new_node.parent is not None:
            self._detach(new_node)

        idx = self.children.index(reference_node)
        new_node.parent = self
        self.children.insert(idx, new_node)

        new_node.next_sibling = reference_node
        new_node.previous_sibling = reference_node.previous_sibling
        reference_node.previous_sibling = new_node
        if new_node.previous_sibling:
            new_node.previous_sibling.next_sibling = new_node

    def remove_child(self, child: Node) -> None:
        """Remove a child node, updating all sibling links."""
        if child.parent is not self:
            return
        self._detach(child)
        child.parent = None
        child.next_sibling = None
        child.previous_sibling = None

    def replace_child(self, new_node: Node, old_node: Node) -> None:
        """Put new_node at old_node's position and detach old_node."""
        if old_node.parent is not self or new_node is old_node:
            return
        self.insert_before(new_node, old_node)
        self.remove_child(old_node)

    def has_attribute(self, name: str) -> bool:
        return name.lower() in self.attributes

    def set_attribute(self, name: str, value: str | None) -> None:
        self.attributes[name.lower()] = value

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name.lower(), None)

    def get_text_content(self) -> str:
        """Concatenated text of this node and all its descendants."""
        if self.is_text:
            return self.text_content
        return "".join(child.get_text_content() for child in self.children)

    def clone(self, deep: bool = True) -> Node:
        """Return a detached copy; deep copies include all descendants."""
        copy = Node(self.tag_name, dict(self.attributes), self.text_content)
        if deep:
            for child in self.children:
                copy.append_child(child.clone(deep=True))
        return copy

    def __repr__(self) -> str:
        if self.is_text:
            return f"Node(#text='{self.text_content[:30]}')"
        return f"Node(<{self.tag_name}>, children={len(self.children)})"


def create_element(tag_name: str, attributes: dict[str, str | None] | None = None) -> Node:
    return Node(tag_name, attributes)


def create_text(data: str) -> Node:
    return Node("#text", text_content=data)
