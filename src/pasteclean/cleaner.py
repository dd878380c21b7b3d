"""Structural cleanup of pasted word-processor markup.

`clean_element` reduces a block element (typically a paragraph) to its
semantic skeleton: styling wrappers disappear, attributes are dropped
except where they carry content, and empty inline elements directly under
the block are collapsed.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .constants import ATTRIBUTE_PRESERVING_ELEMENTS, PRESENTATION_WRAPPER_ELEMENTS
from .dom import remove_all_attributes
from .predicates import has_text, is_text_level_semantic, is_void
from .walker import remove_shallow, walk_descendants

if TYPE_CHECKING:
    from typing import Any, Protocol

    from .node import TreeNode

    class ReportCallback(Protocol):
        def __call__(self, msg: str, *, node: Any | None = None) -> None: ...


@dataclass(frozen=True, slots=True)
class CleanPolicy:
    """Which tags `clean_element` treats as noise.

    - Elements in `wrapper_tags` are unwrapped wherever they appear.
    - Elements in `keep_attributes_tags` keep their attributes; every other
      element loses all of them.

    Tag names are normalized to lowercase sets.
    """

    wrapper_tags: Collection[str] = field(default_factory=lambda: set(PRESENTATION_WRAPPER_ELEMENTS))
    keep_attributes_tags: Collection[str] = field(default_factory=lambda: set(ATTRIBUTE_PRESERVING_ELEMENTS))

    def __post_init__(self) -> None:
        object.__setattr__(self, "wrapper_tags", {str(t).lower() for t in self.wrapper_tags})
        object.__setattr__(self, "keep_attributes_tags", {str(t).lower() for t in self.keep_attributes_tags})


DEFAULT_POLICY: CleanPolicy = CleanPolicy()


def clean_element(
    element: TreeNode,
    *,
    policy: CleanPolicy = DEFAULT_POLICY,
    report: ReportCallback | None = None,
) -> None:
    """Clean element in place.

    The steps run in a fixed order, each relying on the previous one:

    1. drop the attributes of element itself
    2. unwrap styling wrappers anywhere below element
    3. drop attributes on descendants not listed in `keep_attributes_tags`
    4. unwrap direct children that are styling wrappers, or inline elements
       without visible text (void elements such as <br> are kept)
    """
    wrapper_tags = policy.wrapper_tags
    keep_attributes_tags = policy.keep_attributes_tags

    remove_all_attributes(element)

    def is_wrapper(node: TreeNode) -> bool:
        return node.is_element and node.tag_name in wrapper_tags

    def unwrap_wrapper(node: TreeNode) -> None:
        if report is not None:
            report(f"Unwrapped <{node.tag_name}>", node=node)
        remove_shallow(node)

    walk_descendants(element, is_wrapper, unwrap_wrapper)

    walk_descendants(
        element,
        lambda node: node.is_element and node.tag_name not in keep_attributes_tags,
        remove_all_attributes,
    )

    # Unwrapping can expose new candidates, so step back one sibling after each.
    prev: TreeNode | None = None
    child = element.first_child
    while child is not None:
        if is_wrapper(child):
            unwrap_wrapper(child)
        elif is_text_level_semantic(child) and not is_void(child) and not has_text(child):
            if report is not None:
                report(f"Unwrapped empty <{child.tag_name}>", node=child)
            remove_shallow(child)
        else:
            prev = child
            child = child.next_sibling
            continue
        child = prev if prev is not None else element.first_child
