#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_post_rendering.py
"""Integration tests rendering complete stored posts."""

import json

import pytest

from vibedoc import (
    BLOG_POST_OPTIONS,
    HtmlContentRenderer,
    content_to_html,
    estimate_read_time,
    load_document,
    make_excerpt,
    slugify_title,
    validate_post,
)


@pytest.mark.integration
class TestPostRendering:
    """End-to-end rendering of stored documents."""

    def test_heading_link_and_list(self):
        document = {
            "type": "doc",
            "content": [
                {"type": "heading", "attrs": {"level": 1}, "content": [{"type": "text", "text": "Hello"}]},
                {
                    "type": "paragraph",
                    "content": [
                        {
                            "type": "text",
                            "text": "click here",
                            "marks": [{"type": "link", "attrs": {"href": "https://x.test"}}],
                        }
                    ],
                },
                {
                    "type": "bulletList",
                    "content": [
                        {
                            "type": "listItem",
                            "content": [{"type": "paragraph", "content": [{"type": "text", "text": "one"}]}],
                        },
                        {
                            "type": "listItem",
                            "content": [{"type": "paragraph", "content": [{"type": "text", "text": "two"}]}],
                        },
                    ],
                },
            ],
        }

        assert content_to_html(document) == (
            "<h1>Hello</h1>"
            '<p><a href="https://x.test" target="_blank" rel="noopener noreferrer" '
            'class="text-primary hover:underline">click here</a></p>'
            "<ul><li><p>one</p></li><li><p>two</p></li></ul>"
        )

    def test_sample_post(self, sample_post):
        events = []
        result = HtmlContentRenderer(diagnostic_callback=events.append).render(sample_post)

        assert result.startswith("<h1>Belajar Python</h1><p>Halo <strong>dunia</strong>!</p>")
        assert "<ul><li><p>satu</p></li><li><p>dua</p></li></ul>" in result
        assert "<pre><code>print(1 &lt; 2)</code></pre>" in result
        assert "<blockquote><p>kutipan</p></blockquote>" in result
        assert '<p><img src="/img/a.png" alt="Diagram" title="" /></p>' in result
        assert result.endswith("<hr /><p>baris<br />baru</p>")
        assert events == []

    def test_sample_post_blog_markup(self, sample_post):
        result = HtmlContentRenderer(BLOG_POST_OPTIONS).render(sample_post)
        assert "<p><img" not in result
        assert ">Diagram</p></div>" in result

    def test_publish_flow(self, sample_post, tmp_path):
        path = tmp_path / "post.json"
        path.write_text(json.dumps(sample_post), encoding="utf-8")
        document = load_document(path)

        title = "Belajar Python dari Nol"
        assert validate_post(title, document) == []
        assert slugify_title(title) == "belajar-python-dari-nol"
        assert estimate_read_time(document) == 1
        assert make_excerpt(document, 40) == "Belajar Python Halo dunia! satu dua…"

    def test_broken_image_reported_once(self, sample_post):
        sample_post["content"].append({"type": "image", "attrs": {"alt": "lost"}})
        events = []
        result = content_to_html(sample_post, diagnostic_callback=events.append)
        assert [event.event_type for event in events] == ["missing_image_src"]
        assert "lost" not in result
