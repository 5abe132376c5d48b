from fastmcp import FastMCP

from core.data_models import ExtractRequest, FetchRequest, MetadataRequest
from utils.error_utils import tool_boundary
from utils.logging_utils import configure_logging

from . import tools
from .schemas import AnalyzedUrl, Attribute, IncludeImages, MaxLength, PageUrl, Selector

SERVER_NAME = "mcp-web-browsing-server"
SERVER_VERSION = "1.0.0"

mcp = FastMCP(name=SERVER_NAME, version=SERVER_VERSION)


@tool_boundary("fetch webpage")
def fetch_webpage(url: PageUrl, include_images: IncludeImages = False, max_length: MaxLength = 5000) -> str:
    """Fetch and extract the main content from a webpage with optional image extraction."""
    request = FetchRequest(url=url, include_images=include_images, max_length=max_length)
    return tools.fetch_webpage(request).text


@tool_boundary("extract elements")
def extract_elements(url: PageUrl, selector: Selector, attribute: Attribute = None) -> str:
    """Extract specific HTML elements from a webpage using CSS selectors."""
    request = ExtractRequest(url=url, selector=selector, attribute=attribute)
    return tools.extract_elements(request).text


@tool_boundary("get metadata")
def get_metadata(url: AnalyzedUrl) -> str:
    """Extract metadata (title, description, Open Graph tags, etc.) from a webpage."""
    return tools.get_metadata(MetadataRequest(url=url)).text


mcp.tool(name="fetch_webpage", title="Fetch Webpage Content", output_schema=None)(fetch_webpage)
mcp.tool(name="extract_elements", title="Extract Specific Elements", output_schema=None)(extract_elements)
mcp.tool(name="get_metadata", title="Get Page Metadata", output_schema=None)(get_metadata)


def main() -> None:
    configure_logging()
    mcp.run()


if __name__ == "__main__":
    main()
