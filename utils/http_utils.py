from typing import Optional, Tuple

import requests
from loguru import logger
from requests.utils import get_encoding_from_headers

from core.errors import FetchError, HTTPStatusError
from utils import config


def http_get(url: str) -> requests.Response:
    """
    Issue a single GET with the browser User-Agent.

    Raises FetchError when no response arrives and HTTPStatusError on a
    non-2xx status. No retries.
    """
    logger.debug("HTTP GET {}", url)
    try:
        resp = requests.get(
            url,
            headers={"User-Agent": config.USER_AGENT},
            timeout=config.HTTP_TIMEOUT,
        )
    except requests.RequestException as exc:
        logger.warning("HTTP fetch error for {}: {}", url, exc)
        raise FetchError(str(exc), url=url) from exc

    if not 200 <= resp.status_code < 300:
        logger.warning("HTTP {} for {}", resp.status_code, url)
        raise HTTPStatusError(resp.status_code, resp.reason, url=url)
    return resp


def declared_charset(resp: requests.Response) -> Optional[str]:
    """
    Charset named in the Content-Type header, or None.

    requests assumes ISO-8859-1 for any text/* type without a charset; that
    guess is ignored here so the parser can sniff the body instead.
    """
    content_type = resp.headers.get("content-type", "")
    if "charset" not in content_type.lower():
        return None
    return get_encoding_from_headers(resp.headers)


def fetch_document(url: str) -> Tuple[bytes, Optional[str]]:
    """Fetch a URL; return the raw body and the header charset (if any)."""
    resp = http_get(url)
    return resp.content, declared_charset(resp)
