"""Wiktionary page rendering: section filtering and wiki-to-HTML formatting."""

from src.wiktionary.formatter import apply_format_rules, format_wiki_text, render_definition
from src.wiktionary.sections import filter_sections, split_sections

__all__ = [
    "apply_format_rules",
    "filter_sections",
    "format_wiki_text",
    "render_definition",
    "split_sections",
]
