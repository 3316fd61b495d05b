#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_renderer.py
"""Unit tests for HtmlContentRenderer.

Tests cover:
- Degenerate inputs (None, strings, non-mappings)
- Every node variant's markup
- Mark composition order
- Unknown node and mark types
- Image source resolution and the missing-src diagnostic
- Figure-style images and image-only paragraph unwrapping
- Depth and cycle guards
- Per-node error isolation
"""

import logging
from collections.abc import Mapping

import pytest
from utils import doc, image, nested, paragraph, text

from vibedoc.constants import DEFAULT_TRUNCATION_MARKER, FIGURE_CAPTION_CLASS, FIGURE_CONTAINER_CLASS
from vibedoc.exceptions import InvalidOptionsError
from vibedoc.options import BLOG_POST_OPTIONS, HtmlContentOptions
from vibedoc.renderers.html import HtmlContentRenderer, content_to_html, heading_level

LINK = '<a href="https://x.test" target="_blank" rel="noopener noreferrer" class="text-primary hover:underline">'


class ExplodingNode(Mapping):
    """Mapping whose lookups fail, standing in for a corrupted node."""

    def __getitem__(self, key):
        raise RuntimeError("boom")

    def __iter__(self):
        return iter(["type"])

    def __len__(self):
        return 1


@pytest.fixture
def events():
    return []


@pytest.fixture
def renderer(events):
    return HtmlContentRenderer(diagnostic_callback=events.append)


@pytest.mark.unit
class TestDegenerateInputs:
    """Tests for inputs that are not node objects."""

    def test_none_renders_empty(self, renderer):
        assert renderer.render(None) == ""

    def test_string_passes_through(self, renderer):
        assert renderer.render("foo") == "foo"

    def test_string_is_not_escaped(self, renderer):
        assert renderer.render("<b>pre-rendered</b>") == "<b>pre-rendered</b>"

    @pytest.mark.parametrize("value", [0, 42, 3.5, True, [], [{"type": "text", "text": "x"}]])
    def test_non_mapping_renders_empty(self, renderer, value):
        assert renderer.render(value) == ""

    def test_missing_type_renders_empty(self, renderer):
        assert renderer.render({"content": [text("hidden")]}) == ""

    def test_non_string_type_renders_empty(self, renderer):
        assert renderer.render({"type": 7, "content": [text("hidden")]}) == ""

    def test_missing_type_child_is_skipped(self, renderer):
        assert renderer.render(paragraph(text("a"), {"text": "b"}, text("c"))) == "<p>ac</p>"

    def test_no_diagnostics_for_degenerate_inputs(self, renderer, events):
        for value in (None, "foo", 1, {"content": []}):
            renderer.render(value)
        assert events == []


@pytest.mark.unit
class TestBlockVariants:
    """Tests for container node markup."""

    def test_empty_doc(self, renderer):
        assert renderer.render({"type": "doc", "content": []}) == ""

    def test_doc_without_content(self, renderer):
        assert renderer.render({"type": "doc"}) == ""

    def test_doc_concatenates_children(self, renderer):
        assert renderer.render(doc(paragraph(text("a")), paragraph(text("b")))) == "<p>a</p><p>b</p>"

    def test_paragraph(self, renderer):
        assert renderer.render({"type": "paragraph", "content": [{"type": "text", "text": "hi"}]}) == "<p>hi</p>"

    def test_empty_paragraph_gets_placeholder(self, renderer):
        assert renderer.render({"type": "paragraph", "content": []}) == "<p>&nbsp;</p>"

    def test_paragraph_without_content_gets_placeholder(self, renderer):
        assert renderer.render({"type": "paragraph"}) == "<p>&nbsp;</p>"

    def test_whitespace_paragraph_gets_placeholder(self, renderer):
        assert renderer.render(paragraph(text("   "))) == "<p>&nbsp;</p>"

    def test_custom_paragraph_placeholder(self):
        options = HtmlContentOptions(paragraph_placeholder="<br />")
        assert content_to_html(paragraph(), options) == "<p><br /></p>"

    def test_heading_with_level(self, renderer):
        node = {"type": "heading", "attrs": {"level": 3}, "content": [{"type": "text", "text": "T"}]}
        assert renderer.render(node) == "<h3>T</h3>"

    def test_heading_defaults_to_level_2(self, renderer):
        assert renderer.render({"type": "heading", "content": [text("T")]}) == "<h2>T</h2>"

    def test_heading_level_clamped(self, renderer):
        assert renderer.render({"type": "heading", "attrs": {"level": 12}, "content": [text("T")]}) == "<h6>T</h6>"
        assert renderer.render({"type": "heading", "attrs": {"level": 0}, "content": [text("T")]}) == "<h1>T</h1>"

    @pytest.mark.parametrize("level", ["\u00b2", "\u0663", "\uff14", "", "  "])
    def test_heading_level_unusable_string(self, renderer, events, level):
        node = {"type": "heading", "attrs": {"level": level}, "content": [text("T")]}
        assert renderer.render(node) == "<h2>T</h2>"
        assert events == []

    def test_heading_level_past_int_conversion_limit(self, renderer, events):
        node = {"type": "heading", "attrs": {"level": "9" * 5000}, "content": [text("T")]}
        assert renderer.render(node) in ("<h2>T</h2>", "<h6>T</h6>")
        assert events == []

    def test_bullet_list(self, renderer):
        node = {
            "type": "bulletList",
            "content": [
                {"type": "listItem", "content": [paragraph(text("one"))]},
                {"type": "listItem", "content": [paragraph(text("two"))]},
            ],
        }
        assert renderer.render(node) == "<ul><li><p>one</p></li><li><p>two</p></li></ul>"

    def test_ordered_list(self, renderer):
        node = {"type": "orderedList", "content": [{"type": "listItem", "content": [text("one")]}]}
        assert renderer.render(node) == "<ol><li>one</li></ol>"

    def test_code_block(self, renderer):
        node = {"type": "codeBlock", "attrs": {"language": "python"}, "content": [text("x = 1")]}
        assert renderer.render(node) == "<pre><code>x = 1</code></pre>"

    def test_code_block_escapes_text(self, renderer):
        node = {"type": "codeBlock", "content": [text("if a < b && c > d:")]}
        assert renderer.render(node) == "<pre><code>if a &lt; b &amp;&amp; c &gt; d:</code></pre>"

    def test_blockquote(self, renderer):
        node = {"type": "blockquote", "content": [paragraph(text("quoted"))]}
        assert renderer.render(node) == "<blockquote><p>quoted</p></blockquote>"

    def test_content_not_a_list_is_ignored(self, renderer):
        assert renderer.render({"type": "blockquote", "content": "oops"}) == "<blockquote></blockquote>"


@pytest.mark.unit
class TestLeafVariants:
    """Tests for leaf node markup."""

    def test_horizontal_rule(self, renderer):
        assert renderer.render({"type": "horizontalRule"}) == "<hr />"

    def test_hard_break(self, renderer):
        assert renderer.render(paragraph(text("a"), {"type": "hardBreak"}, text("b"))) == "<p>a<br />b</p>"

    def test_leaf_ignores_children(self, renderer):
        assert renderer.render({"type": "horizontalRule", "content": [text("x")]}) == "<hr />"

    def test_text(self, renderer):
        assert renderer.render(text("plain")) == "plain"

    def test_text_without_payload(self, renderer):
        assert renderer.render({"type": "text"}) == ""

    def test_text_non_string_payload(self, renderer):
        assert renderer.render({"type": "text", "text": 5}) == ""

    def test_text_escapes_html(self, renderer):
        assert renderer.render(text("<script>alert(1)</script> & co")) == (
            "&lt;script&gt;alert(1)&lt;/script&gt; &amp; co"
        )

    def test_text_keeps_quotes(self, renderer):
        assert renderer.render(text('say "hi"')) == 'say "hi"'


@pytest.mark.unit
class TestMarks:
    """Tests for inline mark composition."""

    @pytest.mark.parametrize(
        "mark,expected",
        [
            ("bold", "<strong>t</strong>"),
            ("italic", "<em>t</em>"),
            ("code", "<code>t</code>"),
            ("strike", "<s>t</s>"),
        ],
    )
    def test_single_mark(self, renderer, mark, expected):
        assert renderer.render(text("t", mark)) == expected

    def test_first_mark_is_innermost(self, renderer):
        assert renderer.render(text("t", "bold", "italic")) == "<em><strong>t</strong></em>"

    def test_reversed_order_reverses_nesting(self, renderer):
        assert renderer.render(text("t", "italic", "bold")) == "<strong><em>t</em></strong>"

    def test_link_mark(self, renderer):
        result = renderer.render(text("click", {"type": "link", "attrs": {"href": "https://x.test"}}))
        assert result == LINK + "click</a>"

    def test_link_inside_bold(self, renderer):
        result = renderer.render(text("t", {"type": "link", "attrs": {"href": "https://x.test"}}, "bold"))
        assert result == "<strong>" + LINK + "t</a></strong>"

    def test_unknown_mark_ignored(self, renderer, events):
        assert renderer.render(text("t", "highlight", "bold")) == "<strong>t</strong>"
        assert events == []

    def test_malformed_marks_skipped(self, renderer):
        node = {"type": "text", "text": "t", "marks": ["bold", None, {"attrs": {}}, {"type": "italic"}]}
        assert renderer.render(node) == "<em>t</em>"

    def test_marks_not_a_list(self, renderer):
        assert renderer.render({"type": "text", "text": "t", "marks": {"type": "bold"}}) == "t"

    def test_link_href_escaped(self, renderer):
        result = renderer.render(text("t", {"type": "link", "attrs": {"href": 'https://x.test/?a=1&b="2"'}}))
        assert 'href="https://x.test/?a=1&amp;b=&quot;2&quot;"' in result

    def test_link_without_href(self, renderer):
        result = renderer.render(text("t", {"type": "link"}))
        assert result.startswith('<a href=""')

    def test_dangerous_link_href_dropped(self, renderer):
        result = renderer.render(text("t", {"type": "link", "attrs": {"href": "javascript:alert(1)"}}))
        assert 'href=""' in result
        assert "javascript" not in result

    def test_dangerous_link_kept_when_sanitizing_disabled(self):
        options = HtmlContentOptions(sanitize_urls=False)
        result = content_to_html(text("t", {"type": "link", "attrs": {"href": "javascript:alert(1)"}}), options)
        assert 'href="javascript:alert(1)"' in result

    def test_empty_link_attributes_omitted(self):
        options = HtmlContentOptions(link_target="", link_rel="", link_class="")
        result = content_to_html(text("t", {"type": "link", "attrs": {"href": "/about"}}), options)
        assert result == '<a href="/about">t</a>'


@pytest.mark.unit
class TestUnknownVariants:
    """Tests for the fallback on unrecognized node types."""

    def test_unknown_renders_children(self, renderer):
        node = {"type": "bogus-plugin-node", "content": [{"type": "text", "text": "x"}]}
        assert renderer.render(node) == "x"

    def test_unknown_without_content(self, renderer):
        assert renderer.render({"type": "bogus-plugin-node"}) == ""

    def test_unknown_nested_in_paragraph(self, renderer):
        node = paragraph(text("a"), {"type": "mention", "content": [text("@b", "bold")]})
        assert renderer.render(node) == "<p>a<strong>@b</strong></p>"

    def test_unknown_emits_no_diagnostic(self, renderer, events):
        renderer.render({"type": "table", "content": [paragraph(text("cell"))]})
        assert events == []


@pytest.mark.unit
class TestImages:
    """Tests for image rendering and the missing source diagnostic."""

    def test_plain_image(self, renderer):
        result = renderer.render(image(src="/a.png", alt="A", title="T"))
        assert result == '<img src="/a.png" alt="A" title="T" />'

    def test_url_attribute_fallback(self, renderer):
        assert renderer.render(image(url="/b.png")) == '<img src="/b.png" alt="" title="" />'

    def test_src_preferred_over_url(self, renderer):
        assert 'src="/a.png"' in renderer.render(image(src="/a.png", url="/b.png"))

    def test_node_level_src(self, renderer):
        assert 'src="/c.png"' in renderer.render({"type": "image", "src": "/c.png"})

    def test_null_attr_falls_back_to_node_level_src(self, renderer):
        assert 'src="/c.png"' in renderer.render({"type": "image", "attrs": {"src": None}, "src": "/c.png"})

    def test_attributes_escaped(self, renderer):
        result = renderer.render(image(src="/a.png?x=1&y=2", alt='"quoted" <alt>'))
        assert 'src="/a.png?x=1&amp;y=2"' in result
        assert 'alt="&quot;quoted&quot; &lt;alt&gt;"' in result

    def test_missing_src_renders_empty(self, renderer):
        assert renderer.render({"type": "image", "attrs": {}}) == ""

    def test_missing_src_emits_exactly_one_diagnostic(self, renderer, events):
        renderer.render({"type": "image", "attrs": {}})
        assert len(events) == 1
        assert events[0].event_type == "missing_image_src"
        assert events[0].node_type == "image"
        assert '"type": "image"' in events[0].message

    def test_missing_src_logged_once(self, caplog):
        caplog.set_level(logging.WARNING, logger="vibedoc")
        content_to_html({"type": "image", "attrs": {}})
        warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Image node missing src" in warnings[0].getMessage()

    @pytest.mark.parametrize("src", ["", "   ", None, 7, ["/a.png"]])
    def test_unusable_src_counts_as_missing(self, renderer, events, src):
        assert renderer.render(image(src=src)) == ""
        assert [event.event_type for event in events] == ["missing_image_src"]

    def test_dangerous_src_counts_as_missing(self, renderer, events):
        assert renderer.render(image(src="javascript:alert(1)")) == ""
        assert len(events) == 1

    def test_missing_src_with_deeply_nested_attrs(self, renderer, events):
        deep = {}
        for _ in range(100000):
            deep = {"x": deep}
        assert renderer.render({"type": "image", "attrs": {"meta": deep}}) == ""
        assert [event.event_type for event in events] == ["missing_image_src"]

    def test_missing_src_does_not_blank_siblings(self, renderer):
        result = renderer.render(doc(paragraph(text("before")), image(), paragraph(text("after"))))
        assert result == "<p>before</p><p>after</p>"

    def test_figure_style(self):
        result = content_to_html(image(src="/a.png", alt="Caption"), HtmlContentOptions(image_style="figure"))
        assert result.startswith(f'<div class="{FIGURE_CONTAINER_CLASS}"><img src="/a.png" alt="Caption"')
        assert 'loading="lazy"' in result
        assert result.endswith(f'<p class="{FIGURE_CAPTION_CLASS}">Caption</p></div>')

    def test_figure_without_alt_has_no_caption(self):
        result = content_to_html(image(src="/a.png"), HtmlContentOptions(image_style="figure"))
        assert FIGURE_CAPTION_CLASS not in result

    def test_image_paragraph_kept_by_default(self, renderer):
        assert renderer.render(paragraph(image(src="/a.png"))).startswith("<p><img")

    def test_image_paragraph_unwrapped(self):
        options = HtmlContentOptions(unwrap_image_paragraphs=True)
        assert content_to_html(paragraph(image(src="/a.png")), options) == '<img src="/a.png" alt="" title="" />'

    def test_mixed_paragraph_not_unwrapped(self):
        options = HtmlContentOptions(unwrap_image_paragraphs=True)
        result = content_to_html(paragraph(text("see"), image(src="/a.png")), options)
        assert result.startswith("<p>see<img")

    def test_blog_preset(self):
        result = content_to_html(paragraph(image(src="/a.png", alt="A")), BLOG_POST_OPTIONS)
        assert result.startswith("<div")
        assert "<p>" not in result


@pytest.mark.unit
class TestGuards:
    """Tests for depth and cycle guards and per-node error isolation."""

    def test_deep_nesting_truncated(self, renderer, events):
        result = renderer.render(nested(10000))
        assert result.count("<blockquote>") == 101
        assert DEFAULT_TRUNCATION_MARKER in result
        assert [event.event_type for event in events] == ["depth_exceeded"]

    def test_custom_max_depth(self, events):
        renderer = HtmlContentRenderer(HtmlContentOptions(max_depth=5), diagnostic_callback=events.append)
        result = renderer.render(nested(10))
        assert result == "<blockquote>" * 6 + DEFAULT_TRUNCATION_MARKER + "</blockquote>" * 6

    def test_nesting_within_limit_untouched(self, renderer, events):
        result = renderer.render(nested(50))
        assert DEFAULT_TRUNCATION_MARKER not in result
        assert result.endswith("deep" + "</blockquote>" * 50)
        assert events == []

    def test_custom_truncation_marker(self):
        options = HtmlContentOptions(max_depth=1, truncation_marker="[...]")
        assert content_to_html(nested(3), options) == "<blockquote><blockquote>[...]</blockquote></blockquote>"

    def test_cycle_truncated(self, renderer, events):
        node = {"type": "blockquote", "content": []}
        node["content"].append(node)
        assert renderer.render(node) == "<blockquote>" + DEFAULT_TRUNCATION_MARKER + "</blockquote>"
        assert [event.event_type for event in events] == ["cycle_detected"]

    def test_shared_subtree_is_not_a_cycle(self, renderer, events):
        shared = text("x", "bold")
        assert renderer.render(paragraph(shared, shared)) == "<p><strong>x</strong><strong>x</strong></p>"
        assert events == []

    def test_failing_node_isolated(self, renderer, events):
        result = renderer.render(paragraph(text("a"), ExplodingNode(), text("b")))
        assert result == "<p>ab</p>"
        assert [event.event_type for event in events] == ["node_error"]
        assert "boom" in events[0].metadata["error"]

    def test_raising_callback_does_not_interrupt(self, caplog):
        def callback(event):
            raise RuntimeError("observer failed")

        caplog.set_level(logging.WARNING, logger="vibedoc")
        renderer = HtmlContentRenderer(diagnostic_callback=callback)
        assert renderer.render(doc(image(), paragraph(text("ok")))) == "<p>ok</p>"
        assert any("Diagnostic callback raised exception" in record.getMessage() for record in caplog.records)

    def test_renderer_is_reusable(self, renderer):
        node = doc(paragraph(text("a")))
        assert renderer.render(node) == renderer.render(node) == "<p>a</p>"


@pytest.mark.unit
class TestRendererSetup:
    """Tests for renderer construction and helpers."""

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            HtmlContentRenderer(options=object())

    def test_default_options(self):
        assert HtmlContentRenderer().options == HtmlContentOptions()

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1, 1),
            (6, 6),
            (3, 3),
            (None, 2),
            ("4", 4),
            (" 5 ", 5),
            ("big", 2),
            ("\u00b2", 2),
            ("\u0664", 2),
            (2.5, 2),
            (True, 2),
            (-3, 1),
            (99, 6),
        ],
    )
    def test_heading_level(self, value, expected):
        assert heading_level(value) == expected

    def test_render_to_file(self, tmp_path):
        output = tmp_path / "post.html"
        HtmlContentRenderer().render_to_file(paragraph(text("saved")), output)
        assert output.read_text(encoding="utf-8") == "<p>saved</p>"

    def test_render_to_binary_stream(self):
        from io import BytesIO

        buffer = BytesIO()
        HtmlContentRenderer().render_to_file(paragraph(text("ü")), buffer)
        assert buffer.getvalue() == "<p>ü</p>".encode("utf-8")
