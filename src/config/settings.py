# Runtime settings for the random word picker, read from the environment / .env

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from src.config.logger_config import logger
from src.wiktionary.domain.rules import (
    DEFAULT_ARCHIVE_TITLE_TEMPLATE,
    DEFAULT_ENTRY_PATTERN,
    RANDOM_TRIES,
)


@dataclass(frozen=True)
class PickerSettings:
    month_names: tuple[str, ...]
    archive_title_template: str = DEFAULT_ARCHIVE_TITLE_TEMPLATE
    entry_pattern: str = DEFAULT_ENTRY_PATTERN
    random_tries: int = RANDOM_TRIES


def load_picker_settings(env_file: str | Path | None = None) -> PickerSettings:
    load_dotenv(env_file)

    raw_months = os.getenv("WIKTIONARY_MONTH_NAMES", "")
    month_names = tuple(name.strip() for name in raw_months.split(",") if name.strip())

    raw_tries = os.getenv("WIKTIONARY_RANDOM_TRIES")
    random_tries = RANDOM_TRIES
    if raw_tries:
        try:
            random_tries = int(raw_tries)
        except ValueError:
            logger.warning("Ignoring non-integer WIKTIONARY_RANDOM_TRIES={!r}, using {}", raw_tries, RANDOM_TRIES)

    return PickerSettings(
        month_names=month_names,
        archive_title_template=os.getenv("WIKTIONARY_ARCHIVE_TITLE_TEMPLATE") or DEFAULT_ARCHIVE_TITLE_TEMPLATE,
        entry_pattern=os.getenv("WIKTIONARY_ENTRY_PATTERN") or DEFAULT_ENTRY_PATTERN,
        random_tries=random_tries,
    )
