import random
import re
from collections.abc import Sequence
from datetime import date, timedelta
from itertools import islice
from re import Pattern

from src.config.logger_config import logger
from src.config.settings import PickerSettings
from src.wiktionary.application.ports import ArchivePageFetcherPort, PageFetchFailed, fetch_page
from src.wiktionary.domain.models import ArchiveTarget
from src.wiktionary.domain.rules import (
    DEFAULT_ARCHIVE_TITLE_TEMPLATE,
    DEFAULT_ENTRY_PATTERN,
    RANDOM_TRIES,
    build_archive_title,
    is_valid_word,
)

_RANDOM = random.Random()


def sample_day_of_year(rng: random.Random) -> int:
    # 365 is never drawn; the last day of the year (two in leap years) is unreachable.
    return rng.randint(1, 364)


def sample_archive_target(
    month_names: Sequence[str],
    rng: random.Random,
    today: date | None = None,
) -> ArchiveTarget:
    """Draw a random (year, month, day) within the last four years."""
    reference_year = (today or date.today()).year
    day_of_year = sample_day_of_year(rng)
    picked = date(reference_year, 1, 1) + timedelta(days=day_of_year - 1)
    return ArchiveTarget(
        year=reference_year - rng.randrange(4),
        month=picked.month,
        month_name=month_names[picked.month - 1],
        day=picked.day,
        day_of_year=day_of_year,
    )


def find_entry_word(page_content: str, day: int, pattern: Pattern[str]) -> str | None:
    """Return the word of the ``day``-th (1-indexed) dated entry on an archive page."""
    if day < 1:
        return None
    match = next(islice(pattern.finditer(page_content), day - 1, None), None)
    if match is None:
        return None
    return match.group(1)


class RandomEntryPicker:
    def __init__(
        self,
        fetch: ArchivePageFetcherPort,
        month_names: Sequence[str],
        max_tries: int = RANDOM_TRIES,
        archive_title_template: str = DEFAULT_ARCHIVE_TITLE_TEMPLATE,
        entry_pattern: str | Pattern[str] = DEFAULT_ENTRY_PATTERN,
        rng: random.Random | None = None,
    ) -> None:
        if len(month_names) != 12:
            raise ValueError(f"Expected 12 month names, got {len(month_names)}")
        self.fetch = fetch
        self.month_names = tuple(month_names)
        self.max_tries = max_tries
        self.archive_title_template = archive_title_template
        self.entry_pattern = re.compile(entry_pattern) if isinstance(entry_pattern, str) else entry_pattern
        self.rng = rng or _RANDOM

    @classmethod
    def from_settings(
        cls,
        fetch: ArchivePageFetcherPort,
        settings: PickerSettings,
        rng: random.Random | None = None,
    ) -> "RandomEntryPicker":
        return cls(
            fetch=fetch,
            month_names=settings.month_names,
            max_tries=settings.random_tries,
            archive_title_template=settings.archive_title_template,
            entry_pattern=settings.entry_pattern,
            rng=rng,
        )

    def pick(self, today: date | None = None) -> str | None:
        for attempt in range(1, self.max_tries + 1):
            target = sample_archive_target(self.month_names, self.rng, today)
            title = build_archive_title(target.year, target.month_name, self.archive_title_template)

            result = fetch_page(self.fetch, title)
            if isinstance(result, PageFetchFailed):
                logger.error(
                    "Couldn't fetch archive page '{}' (attempt {}/{}): {}: {}",
                    title,
                    attempt,
                    self.max_tries,
                    type(result.error).__name__,
                    result.error,
                )
                continue

            word = find_entry_word(result.content, target.day, self.entry_pattern)
            if is_valid_word(word):
                return word
            logger.debug(
                "No usable word for day {} on '{}' (attempt {}/{}): {!r}",
                target.day,
                title,
                attempt,
                self.max_tries,
                word,
            )

        logger.warning("No valid word found after {} attempts", self.max_tries)
        return None


def pick_random_entry(
    fetch: ArchivePageFetcherPort,
    month_names: Sequence[str],
    max_tries: int = RANDOM_TRIES,
    *,
    archive_title_template: str = DEFAULT_ARCHIVE_TITLE_TEMPLATE,
    entry_pattern: str | Pattern[str] = DEFAULT_ENTRY_PATTERN,
    rng: random.Random | None = None,
    today: date | None = None,
) -> str | None:
    picker = RandomEntryPicker(
        fetch=fetch,
        month_names=month_names,
        max_tries=max_tries,
        archive_title_template=archive_title_template,
        entry_pattern=entry_pattern,
        rng=rng,
    )
    return picker.pick(today=today)
