from typing import Annotated, Optional

from pydantic import BaseModel, Field

# ------------------------------------------------------------
# Tool argument types, described for the calling agent
# ------------------------------------------------------------
PageUrl = Annotated[str, Field(description="The URL of the webpage to fetch")]
AnalyzedUrl = Annotated[str, Field(description="The URL of the webpage to analyze")]
IncludeImages = Annotated[bool, Field(description="Whether to include image URLs in the response")]
MaxLength = Annotated[
    int,
    Field(gt=0, description="Maximum length of text content to return (default: 5000)"),
]
Selector = Annotated[
    str,
    Field(
        min_length=1,
        description="CSS selector to target specific elements (e.g., 'h1', '.article-content', '#main')",
    ),
]
Attribute = Annotated[
    Optional[str],
    Field(description="Specific attribute to extract (e.g., 'href', 'src', 'alt')"),
]


# ------------------------------------------------------------
# HTTP error body
# ------------------------------------------------------------
class ErrorDetail(BaseModel):
    """Structured failure reported by the HTTP surface."""
    kind: str
    message: str
    url: Optional[str] = None
    status_code: Optional[int] = None


class ErrorResponse(BaseModel):
    detail: ErrorDetail
