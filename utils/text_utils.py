from __future__ import annotations

from typing import Iterable, List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag  # type: ignore
from bs4.builder import ParserRejectedMarkup  # type: ignore
from bs4.dammit import EncodingDetector  # type: ignore
from bs4.element import PreformattedString  # type: ignore

from core.errors import ParseError

NOISE_TAGS = ("script", "style", "nav", "footer", "aside")
TRUNCATION_MARKER = "..."

# Elements that start a new line of text when rendered; inline markup
# (b, a, span, sub, ...) joins its text to the neighbouring words.
BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "br", "caption", "dd", "details",
    "dialog", "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer",
    "form", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr", "li", "main",
    "nav", "ol", "option", "p", "pre", "section", "summary", "table", "tbody",
    "td", "tfoot", "th", "thead", "tr", "ul",
})


def parse_html(markup: Union[str, bytes], url: Optional[str] = None, encoding: Optional[str] = None) -> BeautifulSoup:
    """
    Build a document tree from raw HTML.

    - Uses lxml.
    - Bytes are decoded with `encoding` when given, otherwise with the
      encoding from sniff_encoding().
    - Multi-valued attributes (class, rel, ...) stay plain strings, so the
      attribute reads back exactly as authored.
    """
    kwargs = {"multi_valued_attributes": None}
    if isinstance(markup, bytes):
        kwargs["from_encoding"] = encoding or sniff_encoding(markup)
    try:
        return BeautifulSoup(markup, "lxml", **kwargs)
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Could not parse HTML: {exc}", url=url) from exc


def sniff_encoding(markup: bytes) -> Optional[str]:
    """
    Encoding for a body served without a charset.

    A <meta charset> (or http-equiv) declaration wins; otherwise UTF-8 when
    the bytes decode as UTF-8. None leaves detection to BeautifulSoup.
    """
    declared = EncodingDetector.find_declared_encoding(markup, is_html=True)
    if declared:
        return declared
    try:
        markup.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return "utf-8"


def visible_text(tag: Tag) -> str:
    """
    Text of a subtree with a space around block-level elements only.

    Comments, CDATA and doctype nodes are skipped.
    """
    parts: List[str] = []
    stack = [(iter(tag.children), False)]
    while stack:
        children, is_block = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            if is_block:
                parts.append(" ")
            continue
        if isinstance(child, Tag):
            block = child.name in BLOCK_TAGS
            if block:
                parts.append(" ")
            stack.append((iter(child.children), block))
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            parts.append(str(child))
    return "".join(parts)


def remove_noise(soup: BeautifulSoup, tags: Iterable[str] = NOISE_TAGS) -> BeautifulSoup:
    """Drop script/style/nav/footer/aside subtrees in place."""
    for tag in soup(list(tags)):
        tag.decompose()
    return soup


def normalize_whitespace(text: Optional[str]) -> str:
    """Collapse every whitespace run (newlines included) to one space and trim."""
    if not text:
        return ""
    return " ".join(text.split())


def truncate_text(text: Optional[str], max_length: int, marker: str = TRUNCATION_MARKER) -> Optional[str]:
    """
    Length-only truncation.

    Behavior:
    - If text is None: return None.
    - If len(text) <= max_length: return text unchanged.
    - Else: the first max_length characters followed by the marker.
    """
    if text is None:
        return None

    if max_length < 0:
        max_length = 0

    if len(text) <= max_length:
        return text

    return text[:max_length] + marker


def count_words(text: Optional[str]) -> int:
    if not text:
        return 0
    return len(text.split())
