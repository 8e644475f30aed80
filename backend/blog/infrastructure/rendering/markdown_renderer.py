"""Markdown → HTML for the public article page.

Content is authored by the single admin, so raw HTML in the source is kept.
"""

import markdown

MD_EXTENSIONS = [
    "fenced_code",
    "tables",
    "sane_lists",
    "nl2br",
    "toc",
]


def render_markdown(text: str | None) -> str:
    # Markdown instances carry per-document state (toc, footnotes), so one per call
    md = markdown.Markdown(extensions=MD_EXTENSIONS, output_format="html")
    return md.convert(text or "")
