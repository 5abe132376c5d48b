from typing import Iterator, List, Literal, Optional, Tuple
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _check_absolute_url(value: str) -> str:
    value = value.strip()
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("url must be an absolute http(s) URL")
    return value


# ------------------------------------------------------------
# Requests (one per tool call, never mutated)
# ------------------------------------------------------------
class _ToolRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class FetchRequest(_ToolRequest):
    url: str
    include_images: bool = False
    max_length: int = Field(default=5000, gt=0)

    check_url = field_validator("url")(_check_absolute_url)


class ExtractRequest(_ToolRequest):
    url: str
    selector: str = Field(min_length=1)
    attribute: Optional[str] = None

    check_url = field_validator("url")(_check_absolute_url)

    @field_validator("attribute")
    @classmethod
    def blank_attribute_is_none(cls, value: Optional[str]) -> Optional[str]:
        # An empty attribute name means "use the element text".
        return value or None


class MetadataRequest(_ToolRequest):
    url: str

    check_url = field_validator("url")(_check_absolute_url)


class WeatherRequest(_ToolRequest):
    city: str = Field(min_length=1)


# ------------------------------------------------------------
# Extracted page data
# ------------------------------------------------------------
class ExtractedImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    src: str
    alt: str = ""


class PageContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    url: str
    content: str = ""
    word_count: int = 0
    # None when images were not requested.
    images: Optional[List[ExtractedImage]] = None


class PageMetadata(BaseModel):
    """Fixed metadata field set; declaration order is the output order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    title: str = ""
    description: str = ""
    keywords: str = ""
    author: str = ""
    published_time: str = ""
    modified_time: str = ""
    og_title: str = ""
    og_image: str = ""
    og_url: str = ""
    twitter_card: str = ""
    canonical: str = ""
    language: str = ""
    robots: str = ""

    def present_fields(self) -> Iterator[Tuple[str, str]]:
        """Yield (label, value) pairs in field order, skipping blank values."""
        for label, value in self.model_dump(by_alias=True).items():
            if value and value.strip():
                yield label, value


# ------------------------------------------------------------
# Tool result: always exactly one text block
# ------------------------------------------------------------
class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    content: List[TextContent]

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        return self.content[0].text
