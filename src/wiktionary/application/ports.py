from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from src.wiktionary.domain.errors import WikiFetchError


@runtime_checkable
class ArchivePageFetcherPort(Protocol):
    def __call__(self, title: str) -> str:
        """Return the raw wikitext of ``title``; raise ``WikiFetchError`` on failure."""
        ...


@dataclass(frozen=True)
class PageFetched:
    title: str
    content: str


@dataclass(frozen=True)
class PageFetchFailed:
    title: str
    error: WikiFetchError


FetchResult = PageFetched | PageFetchFailed


def fetch_page(fetch: ArchivePageFetcherPort, title: str) -> FetchResult:
    try:
        return PageFetched(title=title, content=fetch(title))
    except WikiFetchError as exc:
        return PageFetchFailed(title=title, error=exc)
