"""Pure text helpers for articles — slugs and plaintext excerpts.

The excerpt stripper is a regex pass, not a Markdown parser: it only needs
card-sized plaintext, so unusual constructs may leave a stray character.
"""

import re

_FENCED_CODE = re.compile(r"^(```|~~~).*?^\1[ \t]*$", re.MULTILINE | re.DOTALL)
_INLINE_CODE = re.compile(r"`([^`]*)`")
_IMAGE = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
_LINK = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_REF_LINK = re.compile(r"\[([^\]]*)\]\[[^\]]*\]")
_LINK_DEF = re.compile(r"^\s*\[[^\]]+\]:\s*\S+.*$", re.MULTILINE)
_HTML_TAG = re.compile(r"<[^>]+>")
_HEADING = re.compile(r"^\s{0,3}#{1,6}\s*", re.MULTILINE)
_BLOCKQUOTE = re.compile(r"^\s{0,3}>\s?", re.MULTILINE)
_LIST_MARKER = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+", re.MULTILINE)
_HRULE = re.compile(r"^\s*(?:[-*_]\s*){3,}$", re.MULTILINE)
_TABLE_RULE = re.compile(r"^\s*\|?(?:\s*:?-+:?\s*\|)+\s*:?-*:?\s*$", re.MULTILINE)
_EMPHASIS = re.compile(r"(\*\*|\*|~~)(\S(?:.*?\S)?)\1")
_UNDERSCORE_EMPHASIS = re.compile(r"(?<!\w)(__|_)(\S(?:.*?\S)?)\1(?!\w)")
_WHITESPACE = re.compile(r"\s+")

_SLUG_DROP = re.compile(r"[^\w\s-]")
_SLUG_SEP = re.compile(r"[\s_-]+")


def slugify(text: str) -> str:
    """Turn a title into a URL slug.

    Unicode-aware: letters outside ASCII (e.g. Japanese titles) are kept.
    Returns an empty string when nothing usable remains.
    """
    text = _SLUG_DROP.sub("", text.strip().lower())
    return _SLUG_SEP.sub("-", text).strip("-")


def markdown_to_plaintext(markdown_text: str) -> str:
    """Strip Markdown syntax and collapse whitespace."""
    if not markdown_text:
        return ""
    text = _FENCED_CODE.sub(" ", markdown_text)
    text = _INLINE_CODE.sub(r"\1", text)
    text = _IMAGE.sub(" ", text)
    text = _LINK.sub(r"\1", text)
    text = _REF_LINK.sub(r"\1", text)
    text = _LINK_DEF.sub(" ", text)
    text = _HTML_TAG.sub(" ", text)
    text = _TABLE_RULE.sub(" ", text)
    text = _HRULE.sub(" ", text)
    text = _HEADING.sub("", text)
    text = _BLOCKQUOTE.sub("", text)
    text = _LIST_MARKER.sub("", text)
    # nested emphasis (***bold italic***) needs a second pass
    for _ in range(2):
        text = _EMPHASIS.sub(r"\2", text)
        text = _UNDERSCORE_EMPHASIS.sub(r"\2", text)
    text = text.replace("|", " ")
    return _WHITESPACE.sub(" ", text).strip()


def make_excerpt(markdown_text: str, length: int = 160) -> str:
    """Plaintext excerpt of at most ``length`` characters, ``...`` when cut."""
    plain = markdown_to_plaintext(markdown_text)
    if len(plain) <= length:
        return plain
    return plain[:length].rstrip() + "..."
