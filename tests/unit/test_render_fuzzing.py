#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_render_fuzzing.py
"""Property-based fuzzing tests for the content renderer.

Test Coverage:
- Arbitrary JSON values never make rendering raise
- Text payloads never leak raw markup characters
- Mark nesting follows the listed order for any mark sequence
- Unknown wrapper types are transparent
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from vibedoc import content_to_html, extract_text
from vibedoc.constants import KNOWN_NODE_TYPES

MARK_TAGS = {"bold": "strong", "italic": "em", "code": "code", "strike": "s"}

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.floats(allow_nan=False) | st.text(max_size=10),
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=30,
)

node_types = st.sampled_from(sorted(KNOWN_NODE_TYPES)) | st.text(max_size=8)

raw_nodes = st.recursive(
    st.fixed_dictionaries({"type": st.just("text"), "text": st.text(max_size=20)}),
    lambda children: st.fixed_dictionaries(
        {"type": node_types, "content": st.lists(children, max_size=4)},
        optional={"attrs": st.dictionaries(st.sampled_from(["level", "src", "url", "alt"]), json_values, max_size=3)},
    ),
    max_leaves=25,
)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestRenderFuzzing:
    """Property-based tests for render totality and escaping."""

    @given(json_values)
    def test_arbitrary_json_never_raises(self, value):
        assert isinstance(content_to_html(value), str)

    @given(raw_nodes)
    def test_random_trees_never_raise(self, node):
        assert isinstance(content_to_html(node), str)
        assert isinstance(extract_text(node), str)

    @given(st.text())
    def test_text_payload_escaped(self, payload):
        result = content_to_html({"type": "paragraph", "content": [{"type": "text", "text": payload}]})
        inner = result[len("<p>") : -len("</p>")]
        assert "<" not in inner
        assert ">" not in inner

    @given(st.lists(st.sampled_from(sorted(MARK_TAGS)), max_size=5))
    def test_marks_fold_left(self, marks):
        result = content_to_html({"type": "text", "text": "t", "marks": [{"type": mark} for mark in marks]})
        expected = "t"
        for mark in marks:
            tag = MARK_TAGS[mark]
            expected = f"<{tag}>{expected}</{tag}>"
        assert result == expected

    @given(st.text(min_size=1, max_size=20).filter(lambda name: name not in KNOWN_NODE_TYPES), st.text(max_size=20))
    def test_unknown_types_transparent(self, node_type, payload):
        wrapped = {"type": node_type, "content": [{"type": "text", "text": payload}]}
        assert content_to_html(wrapped) == content_to_html({"type": "text", "text": payload})
