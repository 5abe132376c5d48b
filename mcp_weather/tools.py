import json
from typing import Optional
from urllib.parse import quote

from loguru import logger

from core.data_models import ToolResult, WeatherRequest
from core.errors import FetchError, HTTPStatusError, ParseError, UpstreamError
from utils import config
from utils.http_utils import http_get


def weather_url(city: str, template: Optional[str] = None) -> str:
    """Endpoint URL for a (lowercased, path-quoted) city."""
    template = template or config.WEATHER_URL_TEMPLATE
    return template.format(city=quote(city.lower(), safe=""))


def get_weather(request: WeatherRequest) -> ToolResult:
    """
    Pass the upstream JSON weather report through as indented text.

    The payload is opaque: no field is read or validated.
    """
    city = request.city.lower()
    url = weather_url(city)
    logger.info("weather: received request for city={}", city)

    try:
        resp = http_get(url)
    except HTTPStatusError as exc:
        raise UpstreamError(
            f"Failed to fetch weather for {city}: {exc}",
            city=city,
            status_code=exc.status_code,
            url=url,
        ) from exc
    except FetchError as exc:
        raise UpstreamError(f"Failed to fetch weather for {city}: {exc}", city=city, url=url) from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise ParseError(f"Weather response for {city} is not JSON", url=url) from exc

    return ToolResult.from_text(json.dumps(payload, indent=2, ensure_ascii=False))
