import re
from re import Pattern

from src.wiktionary.domain.models import FormatRule

# Lookup URIs look like wiktionary://lookup/<term>; resolvers must match both parts.
WIKI_AUTHORITY = "wiktionary"
WIKI_LOOKUP_HOST = "lookup"
LOOKUP_URI_PREFIX = f"{WIKI_AUTHORITY}://{WIKI_LOOKUP_HOST}/"

MIME_TYPE = "text/html"

STYLE_SHEET = (
    "<style>h2 {font-size:1.2em;font-weight:normal;} "
    "a {color:#6688cc;} ol {padding-left:1.5em;} blockquote {margin-left:0em;} "
    ".interProject, .noprint {display:none;} "
    "li, blockquote {margin-top:0.5em;margin-bottom:0.5em;}</style>"
)

# Appended before splitting so the last real section is closed by a header.
STUB_SECTION = "\n=Stub section="

RANDOM_TRIES = 5

DEFAULT_ARCHIVE_TITLE_TEMPLATE = "Wiktionary:Word of the day/Archive/{year}/{month}"

# {{wotd|word|part of speech|definition...}}, one per day of the archive month.
DEFAULT_ENTRY_PATTERN = r"(?s)\{\{wotd\|(.+?)\|(.+?)\|([^#\|]+).*?\}\}"

VALID_SECTIONS: Pattern[str] = re.compile(
    r"(verb|noun|adjective|pronoun|interjection|adverb)",
    re.IGNORECASE,
)

SECTION_SPLIT: Pattern[str] = re.compile(r"^=+(.+?)=+.+?(?=^=)", re.MULTILINE | re.DOTALL)

INVALID_WORD: Pattern[str] = re.compile(r"[^A-Za-z0-9 ]")


def build_format_rules() -> tuple[FormatRule, ...]:
    # Order matters: headers and lists first, then links, then bold before
    # italic, then stripping whatever markup is left.
    link = f'<a href="{LOOKUP_URI_PREFIX}\\1">'
    return (
        # Header blocks close the running ordered list and open a new one
        FormatRule(r"^=+(.+?)=+", r"</ol><h2>\1</h2><ol>", re.MULTILINE),
        FormatRule(r"^#+\*?:(.+?)$", r"<blockquote>\1</blockquote>", re.MULTILINE),
        FormatRule(r"^#+:?\*(.+?)$", r"<ul><li>\1</li></ul>", re.MULTILINE),
        FormatRule(r"^#+(.+?)$", r"<li>\1</li>", re.MULTILINE),
        FormatRule(r"\[\[([^:\|\]]+)\]\]", link + r"\1</a>"),
        FormatRule(r"\[\[([^:\|\]]+)\|([^\]]+)\]\]", link + r"\2</a>"),
        FormatRule(r"'''(.+?)'''", r"<b>\1</b>"),
        FormatRule(r"([^'])''([^'].*?[^'])''([^'])", r"\1<i>\2</i>\3"),
        # Templates, namespaced links, external links and categories
        FormatRule(
            r"(\{+.+?\}+|\[\[[^:]+:[^\\|\]]+\]\]|\[http.+?\]|\[\[Category:.+?\]\])",
            "",
            re.MULTILINE | re.DOTALL,
        ),
        FormatRule(r"\[\[([^\|\]]+\|)?(.+?)\]\]", r"\2", re.MULTILINE),
    )


FORMAT_RULES: tuple[FormatRule, ...] = build_format_rules()


def build_lookup_uri(term: str) -> str:
    """Build the same href the link rules write: the target text follows the prefix as is."""
    return LOOKUP_URI_PREFIX + term


def parse_lookup_uri(uri: str | None) -> str | None:
    if not uri or not uri.startswith(LOOKUP_URI_PREFIX):
        return None
    return uri[len(LOOKUP_URI_PREFIX):] or None


def build_archive_title(
    year: int,
    month_name: str,
    template: str = DEFAULT_ARCHIVE_TITLE_TEMPLATE,
) -> str:
    return template.format(year=year, month=month_name)


def is_valid_word(word: str | None) -> bool:
    return bool(word) and not INVALID_WORD.search(word)
