"""
HTTP surface for the web browsing tools.

Same operations and output as the MCP server, but failures come back as a
structured error body so callers can tell a network failure from a bad
status or an unparseable page.
"""

import uvicorn
from fastapi import FastAPI, HTTPException
from loguru import logger

from core.data_models import ExtractRequest, FetchRequest, MetadataRequest, ToolResult
from core.errors import ParseError, WebToolError
from utils import config
from utils.logging_utils import configure_logging

from . import tools
from .schemas import ErrorResponse

app = FastAPI(title="MCP Web Browsing", version="1.0.0")

ERROR_RESPONSES = {
    422: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


def _http_error(exc: WebToolError) -> HTTPException:
    status = 422 if isinstance(exc, ParseError) else 502
    logger.warning("http_app: {} failure for url={}: {}", exc.kind, exc.url, exc)
    return HTTPException(status_code=status, detail=exc.to_dict())


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/fetch_webpage", response_model=ToolResult, responses=ERROR_RESPONSES)
def run_fetch_webpage(payload: FetchRequest) -> ToolResult:
    """Fetch and extract the main content from a webpage."""
    try:
        return tools.fetch_webpage(payload)
    except WebToolError as exc:
        raise _http_error(exc) from exc


@app.post("/extract_elements", response_model=ToolResult, responses=ERROR_RESPONSES)
def run_extract_elements(payload: ExtractRequest) -> ToolResult:
    """Extract specific HTML elements from a webpage using CSS selectors."""
    try:
        return tools.extract_elements(payload)
    except WebToolError as exc:
        raise _http_error(exc) from exc


@app.post("/get_metadata", response_model=ToolResult, responses=ERROR_RESPONSES)
def run_get_metadata(payload: MetadataRequest) -> ToolResult:
    """Extract metadata (title, description, Open Graph tags, etc.) from a webpage."""
    try:
        return tools.get_metadata(payload)
    except WebToolError as exc:
        raise _http_error(exc) from exc


def main() -> None:
    configure_logging()
    uvicorn.run(app, host=config.HTTP_HOST, port=config.HTTP_PORT)


if __name__ == "__main__":
    main()
