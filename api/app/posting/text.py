"""
Plain-text helpers for WordPress content.

Post fields arrive as rendered HTML. Everything that ends up in a Discord
message goes through ``html_to_text`` first; post bodies additionally lose
their shortcodes and block delimiters and are cut down to a word-limited
excerpt by ``make_excerpt``.
"""

import re
import warnings
from typing import Callable, Iterable

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

# Titles such as "example.com" look like URLs to bs4; they are still markup here.
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

ContentFilter = Callable[[str], str]

# [tag attr="x"]inner[/tag] — enclosing shortcodes are dropped with their content
_ENCLOSING_SHORTCODE = re.compile(
    r"(?<!\[)\[([A-Za-z][\w-]*)(?:\s[^\]]*)?\].*?\[/\1\](?!\])",
    re.DOTALL,
)
# [tag], [tag attr="x"], [tag /] and stray closers
_SELF_CLOSING_SHORTCODE = re.compile(r"(?<!\[)\[/?[A-Za-z][\w-]*(?:\s[^\]]*?)?/?\](?!\])")
# [[tag]] is the escaped form and renders as [tag]
_ESCAPED_SHORTCODE = re.compile(r"\[(\[/?[A-Za-z][\w-]*[^\[\]]*\])\]")

_BLOCK_DELIMITER = re.compile(r"<!--\s*/?wp:[^>]*?-->")
_WORD_SEPARATOR = re.compile(r"[\n\r\t ]+")


def html_to_text(html: str) -> str:
    """Strip tags, decode entities and trim surrounding whitespace."""
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text().strip()


def strip_shortcodes(content: str) -> str:
    content = _ENCLOSING_SHORTCODE.sub("", content)
    content = _SELF_CLOSING_SHORTCODE.sub("", content)
    return _ESCAPED_SHORTCODE.sub(r"\1", content)


def strip_block_delimiters(content: str) -> str:
    """Remove Gutenberg ``<!-- wp:... -->`` comments, keeping the block markup."""
    return _BLOCK_DELIMITER.sub("", content)


def trim_words(text: str, num_words: int, more: str) -> str:
    """
    Keep the first *num_words* whitespace-separated words.

    *more* is appended only when words were actually dropped.
    """
    words = [w for w in _WORD_SEPARATOR.split(text) if w]
    if len(words) > num_words:
        return " ".join(words[:num_words]) + more
    return " ".join(words)


DEFAULT_CONTENT_FILTERS: tuple[ContentFilter, ...] = (strip_block_delimiters,)


def make_excerpt(
    content: str,
    length: int,
    more: str,
    filters: Iterable[ContentFilter] = DEFAULT_CONTENT_FILTERS,
) -> str:
    text = strip_shortcodes(content)
    for content_filter in filters:
        text = content_filter(text)
    text = html_to_text(text)
    text = trim_words(text, length, more)
    # Entities decoded above may have produced new tags
    text = html_to_text(text)
    return text.replace("]]>", "]]&gt;")
