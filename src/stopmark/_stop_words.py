"""Default English stop words and the immutable StopwordSet."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

DEFAULT_STOP_WORDS: frozenset[str] = frozenset({
    # Articles
    "a", "an", "the",
    # Conjunctions
    "and", "but", "or", "if", "then",
    # Prepositions
    "as", "at", "by", "for", "in", "into", "of", "on", "to", "with",
    # Common verbs
    "are", "be", "is", "was", "will",
    # Pronouns and determiners
    "it", "that", "their", "there", "these", "they", "this", "such",
    # Negation
    "no", "not",
})


def parse_stopword_list(text: str) -> list[str]:
    """Split a comma delimited list of stop words.

    Terms are taken verbatim, whitespace included. Empty fields are
    dropped, so "", ",,," and "the,,a" never yield an empty-string term.
    """
    return [term for term in text.split(",") if term]


class StopwordSet:
    """Read-only set of stop words with a fixed case-folding policy."""

    __slots__ = ("_words", "_ignore_case")

    def __init__(self, words: Iterable[str], ignore_case: bool = False) -> None:
        self._ignore_case = ignore_case
        if ignore_case:
            self._words = frozenset(w.lower() for w in words if w)
        else:
            self._words = frozenset(w for w in words if w)

    @classmethod
    def default(cls, ignore_case: bool = False) -> StopwordSet:
        return cls(DEFAULT_STOP_WORDS, ignore_case)

    @classmethod
    def from_list(cls, text: str, ignore_case: bool = False) -> StopwordSet:
        return cls(parse_stopword_list(text), ignore_case)

    @property
    def ignore_case(self) -> bool:
        return self._ignore_case

    @property
    def words(self) -> frozenset[str]:
        return self._words

    def normalize(self, word: str) -> str:
        """Apply the set's folding policy to a query word."""
        return word.lower() if self._ignore_case else word

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return self.normalize(word) in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __bool__(self) -> bool:
        return bool(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StopwordSet):
            return NotImplemented
        return (
            self._ignore_case == other._ignore_case
            and self._words == other._words
        )

    def __hash__(self) -> int:
        return hash((self._words, self._ignore_case))

    def __repr__(self) -> str:
        return (
            f"StopwordSet({len(self._words)} words, "
            f"ignore_case={self._ignore_case})"
        )
