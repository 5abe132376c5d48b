"""Fixtures — canned HTML pages and a fake requests.get (no network)."""

import os
import sys

import pytest
import requests
from requests.utils import get_encoding_from_headers

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


# ---------------------------------------------------------------------------
# Sample Data
# ---------------------------------------------------------------------------

PAGE_URL = "https://example.com/"

ARTICLE_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <title>Example Article</title>
    <meta name="description" content="An example page.">
    <meta property="og:image" content="/img/cover.png">
    <link rel="canonical" href="/articles/example">
    <style>body { color: red; }</style>
    <script>var tracking = true;</script>
</head>
<body>
    <nav><a href="/home">Home</a></nav>
    <main>
        <h1>Hello   World</h1>
        <p>First paragraph
           spans lines.</p>
        <img src="/images/a.png" alt="Diagram">
        <img src="https://cdn.example.com/b.jpg">
        <img alt="no source">
        <a href="/about" class="nav-link primary">About us</a>
        <a href="https://other.example.org/x">Elsewhere</a>
        <a>No link</a>
    </main>
    <aside><img src="/ads/banner.png" alt="Ad"></aside>
    <footer>Copyright</footer>
</body>
</html>
"""

ARTICLE_TEXT = "Hello World First paragraph spans lines. About us Elsewhere No link"


HTML_UTF8 = "text/html; charset=utf-8"


def make_response(body, status_code=200, reason="OK", url=PAGE_URL, content_type=HTML_UTF8):
    """
    A requests.Response built the way the HTTP adapter builds one.

    str bodies are sent as UTF-8 bytes; pass bytes to control the wire
    encoding. `encoding` comes from the Content-Type header only, so a
    text/* type without a charset gets requests' ISO-8859-1 default.
    """
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    if content_type:
        resp.headers["Content-Type"] = content_type
    resp.encoding = get_encoding_from_headers(resp.headers)
    resp.url = url
    return resp


@pytest.fixture
def serve(monkeypatch):
    """
    Answer every requests.get with the given body/status.

    Returns the list of recorded calls.
    """
    calls = []

    def _serve(body, status_code=200, reason="OK", content_type=HTML_UTF8):
        def fake_get(url, headers=None, timeout=None, **kwargs):
            calls.append({"url": url, "headers": headers, "timeout": timeout})
            return make_response(body, status_code=status_code, reason=reason, url=url, content_type=content_type)

        monkeypatch.setattr("utils.http_utils.requests.get", fake_get)
        return calls

    return _serve


@pytest.fixture
def network_down(monkeypatch):
    def fake_get(url, **kwargs):
        raise requests.ConnectionError(f"Failed to resolve host for {url}")

    monkeypatch.setattr("utils.http_utils.requests.get", fake_get)
