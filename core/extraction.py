"""
Extraction over a parsed HTML document.

All helpers are read-only over the tree they receive, except where noted;
nothing here touches the network.
"""

from typing import Callable, Iterable, List, Optional, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag  # type: ignore
from loguru import logger
from requests.utils import requote_uri
from soupsieve import SelectorSyntaxError

from core.data_models import ExtractedImage, PageMetadata
from core.errors import ParseError
from utils.text_utils import visible_text


# Checked in order; the first selector whose matches carry text wins.
CONTENT_SELECTORS = ("main", "article", ".content", ".post-content", ".entry-content", "body")

# Attributes whose values are URLs and get resolved against the page.
URL_ATTRIBUTES = ("href", "src")


def resolve_url(base_url: str, value: str) -> str:
    """Absolute, percent-encoded form of a (possibly relative) URL."""
    try:
        return requote_uri(urljoin(base_url, value.strip()))
    except ValueError as exc:
        raise ParseError(f"Invalid URL {value!r}: {exc}", url=base_url) from exc


def page_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    return title_tag.get_text() if title_tag else ""


def _text_of(tags: Iterable[Tag]) -> str:
    return " ".join(visible_text(tag) for tag in tags).strip()


def select_main_content(soup: BeautifulSoup) -> str:
    """
    Return the raw text of the main content container.

    Expects noise (script/style/nav/...) to be removed already. Falls back to
    the text of the whole document when no candidate yields any text.
    """
    for selector in CONTENT_SELECTORS:
        matches = soup.select(selector)
        if not matches:
            continue
        text = _text_of(matches)
        if text:
            logger.debug("main content selected via {!r} ({} match(es))", selector, len(matches))
            return text

    logger.debug("no content container matched; using whole document text")
    return visible_text(soup).strip()


def extract_images(soup: BeautifulSoup, base_url: str) -> List[ExtractedImage]:
    """Every <img> with a src, resolved to an absolute URL, in document order."""
    images: List[ExtractedImage] = []
    for img in soup.find_all("img"):
        src = img.get("src")
        if not src:
            continue
        images.append(ExtractedImage(src=resolve_url(base_url, src), alt=img.get("alt") or ""))
    return images


def select_elements(soup: BeautifulSoup, selector: str) -> List[Tag]:
    """
    Run a caller-supplied CSS selector.

    A selector soupsieve cannot compile matches nothing rather than failing
    the call.
    """
    try:
        return soup.select(selector)
    except SelectorSyntaxError as exc:
        logger.warning("invalid selector {!r}: {}", selector, exc)
        return []


def extract_element_values(
    soup: BeautifulSoup,
    selector: str,
    base_url: str,
    attribute: Optional[str] = None,
) -> List[str]:
    """
    Text (or one attribute) of each element matching the selector.

    - Document order, no deduplication.
    - Elements missing the attribute (or holding an empty value) are skipped.
    - href/src values are resolved against base_url; others stay literal.
    """
    values: List[str] = []
    for element in select_elements(soup, selector):
        if attribute:
            value = element.get(attribute)
            if not value:
                continue
            if attribute in URL_ATTRIBUTES:
                value = resolve_url(base_url, value)
            values.append(value)
        else:
            values.append(element.get_text().strip())
    return values


# ------------------------------------------------------------
# Metadata
# ------------------------------------------------------------
def _attr_of_first(soup: BeautifulSoup, selector: str, attribute: str) -> str:
    tag = soup.select_one(selector)
    if tag is None:
        return ""
    return tag.get(attribute) or ""


def _meta(selector: str) -> Callable[[BeautifulSoup], str]:
    return lambda soup: _attr_of_first(soup, selector, "content")


def _html_lang(soup: BeautifulSoup) -> str:
    return _attr_of_first(soup, "html", "lang")


# field name -> fallback chain; the first non-empty source wins.
METADATA_SOURCES: Tuple[Tuple[str, Tuple[Callable[[BeautifulSoup], str], ...]], ...] = (
    ("title", (page_title,)),
    ("description", (_meta('meta[name="description"]'), _meta('meta[property="og:description"]'))),
    ("keywords", (_meta('meta[name="keywords"]'),)),
    ("author", (_meta('meta[name="author"]'),)),
    ("published_time", (_meta('meta[property="article:published_time"]'), _meta('meta[name="date"]'))),
    ("modified_time", (_meta('meta[property="article:modified_time"]'),)),
    ("og_title", (_meta('meta[property="og:title"]'),)),
    ("og_image", (_meta('meta[property="og:image"]'),)),
    ("og_url", (_meta('meta[property="og:url"]'),)),
    ("twitter_card", (_meta('meta[name="twitter:card"]'),)),
    ("canonical", (lambda soup: _attr_of_first(soup, 'link[rel="canonical"]', "href"),)),
    ("language", (_html_lang, _meta('meta[http-equiv="content-language"]'))),
    ("robots", (_meta('meta[name="robots"]'),)),
)


def extract_metadata(soup: BeautifulSoup) -> PageMetadata:
    """Read the fixed metadata field set. Values are kept as authored."""
    values = {}
    for field, sources in METADATA_SOURCES:
        value = ""
        for source in sources:
            value = source(soup)
            if value:
                break
        values[field] = value
    return PageMetadata(**values)
