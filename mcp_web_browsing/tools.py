"""
The three web browsing tools as plain functions: typed request in,
ToolResult out, WebToolError on failure.
"""

from loguru import logger

from core.data_models import ExtractRequest, FetchRequest, MetadataRequest, PageContent, ToolResult
from core.extraction import extract_element_values, extract_images, extract_metadata, page_title, select_main_content
from core.formatting import elements_to_markdown, metadata_to_markdown, page_content_to_markdown
from utils.http_utils import fetch_document
from utils.text_utils import count_words, normalize_whitespace, parse_html, remove_noise, truncate_text


def _load(url: str):
    body, charset = fetch_document(url)
    return parse_html(body, url=url, encoding=charset)


def read_page(request: FetchRequest) -> PageContent:
    """Fetch a page and reduce it to its normalized main content."""
    soup = remove_noise(_load(request.url))

    content = normalize_whitespace(select_main_content(soup))
    content = truncate_text(content, request.max_length) or ""

    images = extract_images(soup, request.url) if request.include_images else None

    return PageContent(
        title=page_title(soup),
        url=request.url,
        content=content,
        # Counted after truncation.
        word_count=count_words(content),
        images=images,
    )


def fetch_webpage(request: FetchRequest) -> ToolResult:
    logger.info("fetch_webpage: received request for url={}", request.url)
    page = read_page(request)
    return ToolResult.from_text(page_content_to_markdown(page))


def extract_elements(request: ExtractRequest) -> ToolResult:
    logger.info(
        "extract_elements: received request for url={} selector={!r} attribute={!r}",
        request.url,
        request.selector,
        request.attribute,
    )
    soup = _load(request.url)
    values = extract_element_values(soup, request.selector, request.url, request.attribute)
    logger.debug("extract_elements: {} value(s) for {!r}", len(values), request.selector)
    return ToolResult.from_text(elements_to_markdown(request.url, request.selector, values, request.attribute))


def get_metadata(request: MetadataRequest) -> ToolResult:
    logger.info("get_metadata: received request for url={}", request.url)
    soup = _load(request.url)
    metadata = extract_metadata(soup)
    return ToolResult.from_text(metadata_to_markdown(request.url, metadata))
