from __future__ import annotations

import unittest

from pasteclean.node import Node, create_element, create_text
from pasteclean.serialize import to_html
from pasteclean.walker import remove_descendants, remove_shallow, unwrap_descendants, walk_descendants


def _el(tag: str, *children: Node | str, **attrs: str) -> Node:
    node = create_element(tag, attrs)
    for child in children:
        node.append_child(create_text(child) if isinstance(child, str) else child)
    return node


class TestWalkDescendants(unittest.TestCase):
    def test_visits_descendants_but_not_root(self) -> None:
        root = _el("div", _el("p", "a"), _el("p", "b"))
        seen: list[str] = []

        def cond(node: Node) -> bool:
            seen.append(node.tag_name)
            return False

        walk_descendants(root, cond, lambda node: None)
        assert "div" not in seen
        assert sorted(seen) == ["#text", "#text", "p", "p"]

    def test_children_are_visited_last_to_first(self) -> None:
        root = _el("div", _el("a"), _el("b"), _el("i"))
        seen: list[str] = []

        def cond(node: Node) -> bool:
            seen.append(node.tag_name)
            return False

        walk_descendants(root, cond, lambda node: None)
        assert seen == ["i", "b", "a"]

    def test_removing_current_child_neither_skips_nor_revisits(self) -> None:
        x, y, z = _el("x"), _el("y"), _el("z")
        root = _el("div", x, y, z)
        calls: dict[str, int] = {}

        def cond(node: Node) -> bool:
            calls[node.tag_name] = calls.get(node.tag_name, 0) + 1
            return node is y

        walk_descendants(root, cond, lambda node: root.remove_child(node))
        assert calls == {"x": 1, "y": 1, "z": 1}
        assert root.children == [x, z]

    def test_removing_last_child(self) -> None:
        a, b = _el("a"), _el("b")
        root = _el("div", a, b)
        seen: list[Node] = []

        def cond(node: Node) -> bool:
            seen.append(node)
            return node is b

        walk_descendants(root, cond, lambda node: root.remove_child(node))
        assert seen == [b, a]
        assert root.children == [a]

    def test_replacement_node_is_reexamined_and_recursed(self) -> None:
        old = _el("old")
        root = _el("div", _el("first"), old)
        inner = _el("inner")
        replacement = _el("new", inner)
        seen: list[str] = []

        def cond(node: Node) -> bool:
            seen.append(node.tag_name)
            return node is old

        walk_descendants(root, cond, lambda node: root.replace_child(replacement, node))
        assert seen == ["old", "new", "inner", "first"]
        assert root.children[1] is replacement

    def test_recursion_uses_same_condition_and_callback(self) -> None:
        root = _el("div", _el("p", _el("b", "x")), _el("b", "y"))
        hits: list[str] = []
        walk_descendants(root, lambda n: n.tag_name == "b", lambda n: hits.append(n.get_text_content()))
        assert hits == ["y", "x"]

    def test_callback_errors_propagate(self) -> None:
        root = _el("div", _el("p"))

        def boom(node: Node) -> None:
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            walk_descendants(root, lambda n: True, boom)


class TestRemoveAndUnwrap(unittest.TestCase):
    def test_remove_descendants_removes_nested_matches(self) -> None:
        root = _el("div", _el("p", "a", _el("script", "x")), _el("script", "y"), "b")
        remove_descendants(root, lambda n: n.tag_name == "script")
        assert to_html(root) == "<div><p>a</p>b</div>"

    def test_unwrap_preserves_order_and_position(self) -> None:
        a, b, c = create_text("a"), _el("b", "bold"), create_text("c")
        wrapper = _el("span", a, b, c)
        root = _el("p", "before", wrapper, "after")
        unwrap_descendants(root, lambda n: n.tag_name == "span")
        assert root.children[1:4] == [a, b, c]
        assert to_html(root) == "<p>beforeaboldcafter</p>"
        assert b.children[0].text_content == "bold"

    def test_unwrap_nested_wrappers_with_several_children(self) -> None:
        root = _el("p", _el("span", _el("span", "a"), _el("span", "b"), "c"))
        unwrap_descendants(root, lambda n: n.tag_name == "span")
        assert [c.tag_name for c in root.children] == ["#text", "#text", "#text"]
        assert to_html(root) == "<p>abc</p>"

    def test_unwrap_empty_wrapper_disappears(self) -> None:
        root = _el("div", _el("span"), "ok")
        unwrap_descendants(root, lambda n: n.tag_name == "span")
        assert to_html(root) == "<div>ok</div>"

    def test_remove_shallow_without_parent_is_noop(self) -> None:
        node = _el("span", "x")
        remove_shallow(node)
        assert to_html(node) == "<span>x</span>"
