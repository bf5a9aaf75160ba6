import re
from dataclasses import dataclass, field
from re import Pattern


@dataclass(frozen=True)
class FormatRule:
    """One wiki-to-HTML rewrite: every match of ``pattern`` is replaced by ``replace_with``.

    ``replace_with`` may contain back-references (``\\1``) into ``pattern``.
    """

    pattern: str
    replace_with: str
    flags: int = 0
    compiled: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", re.compile(self.pattern, self.flags))

    def apply(self, text: str) -> str:
        return self.compiled.sub(self.replace_with, text)


@dataclass(frozen=True)
class Section:
    title: str
    text: str


@dataclass(frozen=True)
class ArchiveTarget:
    year: int
    month: int
    month_name: str
    day: int
    day_of_year: int
