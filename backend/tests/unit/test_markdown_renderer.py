"""Unit tests for Markdown rendering of article bodies."""

from blog.infrastructure.rendering.markdown_renderer import render_markdown


def test_renders_headings_emphasis_and_links():
    html = render_markdown("## Intro\n\nSome **bold** and a [link](https://example.com).")
    assert '<h2 id="intro">Intro</h2>' in html
    assert "<strong>bold</strong>" in html
    assert '<a href="https://example.com">link</a>' in html


def test_renders_fenced_code_and_tables():
    html = render_markdown("```\nprint('hi')\n```\n\n| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<pre><code>" in html
    assert "<table>" in html
    assert "<td>1</td>" in html


def test_empty_content_renders_empty():
    assert render_markdown("") == ""
    assert render_markdown(None) == ""
