from collections.abc import Iterator
from re import Pattern

from src.config.logger_config import logger
from src.wiktionary.domain.models import Section
from src.wiktionary.domain.rules import SECTION_SPLIT, STUB_SECTION, VALID_SECTIONS


def split_sections(document: str, stub_marker: str = STUB_SECTION) -> Iterator[Section]:
    """Yield every header-delimited section of ``document`` in order.

    ``stub_marker`` is appended first so the final section is terminated by a
    header line; the stub itself is never yielded.
    """
    for match in SECTION_SPLIT.finditer(document + stub_marker):
        yield Section(title=match.group(1), text=match.group(0))


def filter_sections(
    document: str | None,
    allowed_titles: Pattern[str] = VALID_SECTIONS,
    stub_marker: str = STUB_SECTION,
) -> str | None:
    """Keep only the first section for each allowed title, in document order."""
    if not document:
        return None

    seen: set[str] = set()
    kept: list[str] = []
    for section in split_sections(document, stub_marker):
        if section.title in seen or not allowed_titles.fullmatch(section.title):
            continue
        seen.add(section.title)
        kept.append(section.text)

    logger.debug("Kept {} of the document's sections: {}", len(kept), sorted(seen))
    return "".join(kept)
