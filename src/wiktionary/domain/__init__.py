"""Value records, constants and the ordered rewrite rule table."""

from src.wiktionary.domain.errors import ConnectivityError, ParseError, ServerError, WikiFetchError
from src.wiktionary.domain.models import ArchiveTarget, FormatRule, Section
from src.wiktionary.domain.rules import (
    FORMAT_RULES,
    LOOKUP_URI_PREFIX,
    MIME_TYPE,
    STYLE_SHEET,
    WIKI_AUTHORITY,
    WIKI_LOOKUP_HOST,
    build_archive_title,
    build_format_rules,
    build_lookup_uri,
    is_valid_word,
    parse_lookup_uri,
)

__all__ = [
    "ArchiveTarget",
    "build_archive_title",
    "build_format_rules",
    "build_lookup_uri",
    "ConnectivityError",
    "FORMAT_RULES",
    "FormatRule",
    "is_valid_word",
    "LOOKUP_URI_PREFIX",
    "MIME_TYPE",
    "parse_lookup_uri",
    "ParseError",
    "Section",
    "ServerError",
    "STYLE_SHEET",
    "WIKI_AUTHORITY",
    "WIKI_LOOKUP_HOST",
    "WikiFetchError",
]
