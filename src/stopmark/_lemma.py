"""Snowball-stem lemma stage."""

from __future__ import annotations

from typing import TYPE_CHECKING

import Stemmer

from ._requirements import LEMMA, TOKENIZE_SSPLIT_POS
from ._stage import Stage

if TYPE_CHECKING:
    from ._types import Document

_SATISFIED: frozenset[str] = frozenset({LEMMA})


class StemLemmatizerStage(Stage):
    """Sets token.lemma to the Snowball stem of the lowercased word.

    Tokens without any alphanumeric character keep their surface form.
    Stemmer instances are not thread-safe; use one stage per thread.
    """

    __slots__ = ("_stemmer", "_language")

    name = LEMMA

    def __init__(self, language: str = "english") -> None:
        self._language = language
        self._stemmer = Stemmer.Stemmer(language)

    @property
    def language(self) -> str:
        return self._language

    def lemmatize(self, word: str) -> str:
        if not any(c.isalnum() for c in word):
            return word
        return self._stemmer.stemWord(word.lower())

    def annotate(self, document: Document) -> None:
        for token in document.tokens:
            token.lemma = self.lemmatize(token.word)

    def requires(self) -> frozenset[str]:
        return TOKENIZE_SSPLIT_POS

    def requirements_satisfied(self) -> frozenset[str]:
        return _SATISFIED
