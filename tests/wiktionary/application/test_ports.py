import unittest

from src.wiktionary.application.ports import (
    ArchivePageFetcherPort,
    PageFetched,
    PageFetchFailed,
    fetch_page,
)
from src.wiktionary.domain.errors import ServerError


class FetchPortTests(unittest.TestCase):
    def test_fetcher_protocol_documents_call(self):
        self.assertIn("WikiFetchError", ArchivePageFetcherPort.__call__.__doc__)

    def test_plain_callable_satisfies_protocol(self):
        self.assertIsInstance(lambda title: "", ArchivePageFetcherPort)

    def test_fetch_page_success(self):
        result = fetch_page(lambda title: f"content of {title}", "Foo")
        self.assertEqual(result, PageFetched(title="Foo", content="content of Foo"))

    def test_fetch_page_failure(self):
        error = ServerError("maxlag", title="Foo")

        def fetch(title: str) -> str:
            raise error

        result = fetch_page(fetch, "Foo")
        self.assertIsInstance(result, PageFetchFailed)
        self.assertIs(result.error, error)
        self.assertEqual(result.error.title, "Foo")
