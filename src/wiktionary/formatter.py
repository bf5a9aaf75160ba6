from collections.abc import Sequence

from src.config.logger_config import logger
from src.wiktionary.domain.models import FormatRule
from src.wiktionary.domain.rules import FORMAT_RULES, STYLE_SHEET
from src.wiktionary.sections import filter_sections


def apply_format_rules(text: str, rules: Sequence[FormatRule] = FORMAT_RULES) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


def format_wiki_text(
    wiki_text: str | None,
    rules: Sequence[FormatRule] = FORMAT_RULES,
) -> str | None:
    """Turn wiki markup into an HTML fragment prefixed with ``STYLE_SHEET``.

    Returns ``None`` when there is no input or nothing but whitespace is left
    after the rules ran.
    """
    if wiki_text is None:
        return None

    html = apply_format_rules(wiki_text, rules)
    if not html.strip():
        logger.debug("Formatting left no content ({} chars of input)", len(wiki_text))
        return None
    return STYLE_SHEET + html


def render_definition(page_text: str | None) -> str | None:
    """Render the part-of-speech sections of a raw dictionary page as HTML."""
    return format_wiki_text(filter_sections(page_text))
