"""
Error variants raised by the web tools.

Each variant carries structured fields (kind, url, status code, ...) so that
callers can branch on them; the human-readable message is rendered at the
tool boundary.
"""

from typing import Any, Dict, Optional


class WebToolError(Exception):
    """Base class for every failure a tool can report."""

    kind = "error"

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "url": self.url,
            "status_code": None,
        }

    def __str__(self) -> str:
        return self.message


class FetchError(WebToolError):
    """The request never produced a response (DNS, TLS, connection reset...)."""

    kind = "network"


class HTTPStatusError(FetchError):
    """The server answered with a non-2xx status."""

    kind = "status"

    def __init__(self, status_code: int, reason: Optional[str] = None, *, url: Optional[str] = None) -> None:
        self.status_code = status_code
        self.reason = reason or ""
        super().__init__(f"HTTP {status_code}: {self.reason}", url=url)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["status_code"] = self.status_code
        return data


class ParseError(WebToolError):
    """The response body could not be turned into a document."""

    kind = "parse"


class UpstreamError(WebToolError):
    """A third-party API (weather) was unreachable or returned an error."""

    kind = "upstream"

    def __init__(
        self,
        message: str,
        *,
        city: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message, url=url)
        self.city = city
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["status_code"] = self.status_code
        data["city"] = self.city
        return data
