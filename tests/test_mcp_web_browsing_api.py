from fastapi.testclient import TestClient

from conftest import ARTICLE_HTML, PAGE_URL
import mcp_web_browsing.http_app as http_app


client = TestClient(http_app.app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_fetch_webpage_route_accepts_wire_names(serve):
    serve(ARTICLE_HTML)
    resp = client.post("/fetch_webpage", json={"url": PAGE_URL, "includeImages": True, "maxLength": 11})
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["content"]) == 1
    assert body["content"][0]["type"] == "text"
    text = body["content"][0]["text"]
    assert "Hello World..." in text
    assert "**Word Count:** 2" in text
    assert "## Images Found" in text


def test_extract_elements_route(serve):
    serve(ARTICLE_HTML)
    resp = client.post("/extract_elements", json={"url": PAGE_URL, "selector": "h1"})
    assert resp.status_code == 200
    assert resp.json()["content"][0]["text"].endswith("1. Hello   World")


def test_get_metadata_route(serve):
    serve(ARTICLE_HTML)
    resp = client.post("/get_metadata", json={"url": PAGE_URL})
    assert resp.status_code == 200
    assert "**canonical:** /articles/example" in resp.json()["content"][0]["text"]


def test_status_failure_is_structured(serve):
    serve("gone", status_code=404, reason="Not Found")
    resp = client.post("/get_metadata", json={"url": PAGE_URL})
    assert resp.status_code == 502
    assert resp.json()["detail"] == {
        "kind": "status",
        "message": "HTTP 404: Not Found",
        "url": PAGE_URL,
        "status_code": 404,
    }


def test_network_failure_is_structured(network_down):
    resp = client.post("/fetch_webpage", json={"url": "http://no-such-domain-12345.test"})
    assert resp.status_code == 502
    detail = resp.json()["detail"]
    assert detail["kind"] == "network"
    assert detail["status_code"] is None
    assert "Traceback (most recent call last)" not in detail["message"]


def test_invalid_payloads_rejected():
    assert client.post("/fetch_webpage", json={"url": "ftp://example.com/"}).status_code == 422
    assert client.post("/fetch_webpage", json={"url": PAGE_URL, "maxLength": 0}).status_code == 422
    assert client.post("/extract_elements", json={"url": PAGE_URL, "selector": ""}).status_code == 422


def test_unparseable_link_is_structured_parse_error(serve):
    serve('<html><body><a href="http://[::1">broken</a></body></html>')
    resp = client.post("/extract_elements", json={"url": PAGE_URL, "selector": "a", "attribute": "href"})
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["kind"] == "parse"
    assert detail["url"] == PAGE_URL
    assert detail["status_code"] is None
    assert detail["message"].startswith("Invalid URL 'http://[::1'")
