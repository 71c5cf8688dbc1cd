"""Data structures for stopmark."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Mapping

# Property keys understood by StopwordFilterConfig.from_properties
STOPWORDS_LIST = "stopword-list"
IGNORE_STOPWORD_CASE = "ignore-stopword-case"
CHECK_LEMMA = "check-lemma"


def parse_bool(value: str | None) -> bool:
    """Properties-style boolean: only "true" (any case) is true."""
    return value is not None and value.strip().lower() == "true"


class StopwordResult(NamedTuple):
    word: bool   # surface form is a stopword
    lemma: bool  # lemma is a stopword; always False unless check_lemma


NOT_STOPWORD = StopwordResult(False, False)


@dataclass(slots=True)
class Token:
    word: str
    begin: int = 0
    end: int = 0
    index: int = 0
    lemma: str | None = None
    pos: str | None = None
    stopword: StopwordResult | None = None


@dataclass(slots=True, frozen=True)
class Sentence:
    index: int
    begin: int
    end: int
    tokens: list[Token]

    @property
    def joined_words(self) -> str:
        """Token words joined by single spaces; not the original text."""
        return " ".join(t.word for t in self.tokens)


@dataclass(slots=True)
class Document:
    text: str
    tokens: list[Token] = field(default_factory=list)
    sentences: list[Sentence] = field(default_factory=list)
    satisfied: set[str] = field(default_factory=set)


@dataclass(slots=True, frozen=True)
class StopwordFilterConfig:
    stopword_list: str | None = None  # comma delimited; None = default set
    ignore_case: bool = False
    check_lemma: bool = False

    @classmethod
    def from_properties(
        cls, props: Mapping[str, str] | None
    ) -> StopwordFilterConfig:
        """Build a config from pipeline properties.

        Recognized keys are ``stopword-list``, ``ignore-stopword-case`` and
        ``check-lemma``. A present but empty ``stopword-list`` selects an
        empty custom list, not the default one.
        """
        if not props:
            return cls()
        return cls(
            stopword_list=props.get(STOPWORDS_LIST),
            ignore_case=parse_bool(props.get(IGNORE_STOPWORD_CASE)),
            check_lemma=parse_bool(props.get(CHECK_LEMMA)),
        )

    def to_properties(self) -> dict[str, str]:
        props = {
            IGNORE_STOPWORD_CASE: str(self.ignore_case).lower(),
            CHECK_LEMMA: str(self.check_lemma).lower(),
        }
        if self.stopword_list is not None:
            props[STOPWORDS_LIST] = self.stopword_list
        return props
