import unittest

from pydantic import ValidationError

from core.data_models import ExtractRequest, FetchRequest, PageMetadata, ToolResult


class TestRequestModels(unittest.TestCase):
    def test_fetch_request_defaults(self):
        req = FetchRequest(url="https://example.com")
        self.assertEqual(req.url, "https://example.com")
        self.assertFalse(req.include_images)
        self.assertEqual(req.max_length, 5000)

    def test_fetch_request_wire_aliases(self):
        req = FetchRequest(**{"url": "https://example.com/", "includeImages": True, "maxLength": 10})
        self.assertTrue(req.include_images)
        self.assertEqual(req.max_length, 10)

    def test_fetch_request_rejects_bad_input(self):
        with self.assertRaises(ValidationError):
            FetchRequest(url="/relative/path")
        with self.assertRaises(ValidationError):
            FetchRequest(url="https://example.com/", max_length=-1)

    def test_requests_are_immutable(self):
        req = FetchRequest(url="https://example.com/")
        with self.assertRaises(ValidationError):
            req.max_length = 1

    def test_extract_request_selector_required(self):
        with self.assertRaises(ValidationError):
            ExtractRequest(url="https://example.com/", selector="")
        self.assertIsNone(ExtractRequest(url="https://example.com/", selector="a", attribute="").attribute)


class TestResultModels(unittest.TestCase):
    def test_tool_result_shape(self):
        result = ToolResult.from_text("hello")
        self.assertEqual(result.model_dump(), {"content": [{"type": "text", "text": "hello"}]})
        self.assertEqual(result.text, "hello")

    def test_metadata_aliases(self):
        metadata = PageMetadata(og_title="A", twitter_card="summary")
        dumped = metadata.model_dump(by_alias=True)
        self.assertEqual(list(dumped)[:5], ["title", "description", "keywords", "author", "publishedTime"])
        self.assertEqual(dict(metadata.present_fields()), {"ogTitle": "A", "twitterCard": "summary"})


if __name__ == "__main__":
    unittest.main()
