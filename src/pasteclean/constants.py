"""Element categories used by the cleanup pipeline.

Sets are frozen so lookups are cheap and callers cannot mutate them by
accident. Names are lowercase tag names.

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://html.spec.whatwg.org/multipage/text-level-semantics.html
"""

# Includes legacy void elements still emitted by word processors
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

TEXT_LEVEL_SEMANTIC_ELEMENTS = frozenset(
    {
        "a",
        "abbr",
        "b",
        "bdi",
        "bdo",
        "br",
        "cite",
        "code",
        "data",
        "dfn",
        "em",
        "i",
        "kbd",
        "mark",
        "q",
        "rp",
        "rt",
        "ruby",
        "s",
        "samp",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "time",
        "u",
        "var",
        "wbr",
    }
)

# Inline containers that only ever carried styling
PRESENTATION_WRAPPER_ELEMENTS = frozenset({"span", "font"})

# Attributes on these are load-bearing (src, href, alt...)
ATTRIBUTE_PRESERVING_ELEMENTS = frozenset({"img", "a"})
