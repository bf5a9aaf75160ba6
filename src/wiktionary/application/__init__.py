"""Collaborator contracts consumed by the random word picker."""

from src.wiktionary.application.ports import (
    ArchivePageFetcherPort,
    FetchResult,
    PageFetched,
    PageFetchFailed,
    fetch_page,
)

__all__ = [
    "ArchivePageFetcherPort",
    "fetch_page",
    "FetchResult",
    "PageFetched",
    "PageFetchFailed",
]
