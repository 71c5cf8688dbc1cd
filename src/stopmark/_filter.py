"""StopwordFilter: marks each token whose word or lemma is a stop word."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._errors import StopmarkPreconditionError
from ._requirements import (
    STOPWORD,
    TOKENIZE_AND_SSPLIT,
    TOKENIZE_SSPLIT_POS_LEMMA,
)
from ._stage import Stage
from ._stop_words import StopwordSet
from ._types import NOT_STOPWORD, StopwordFilterConfig, StopwordResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ._types import Document, Token

logger = logging.getLogger(__name__)

_SATISFIED: frozenset[str] = frozenset({STOPWORD})


class StopwordFilter(Stage):
    """Pipeline stage attaching a StopwordResult to every token.

    The stop word set and the lemma flag are fixed at construction, so a
    single instance can be shared across threads and documents.
    """

    __slots__ = ("_stopwords", "_check_lemma", "_config")

    name = STOPWORD

    def __init__(self, config: StopwordFilterConfig | None = None) -> None:
        if config is None:
            config = StopwordFilterConfig()
        self._config = config
        self._check_lemma = config.check_lemma
        if config.stopword_list is not None:
            self._stopwords = StopwordSet.from_list(
                config.stopword_list, config.ignore_case
            )
        else:
            self._stopwords = StopwordSet.default(config.ignore_case)
        logger.debug(
            "stopword filter: %d words, ignore_case=%s, check_lemma=%s, custom=%s",
            len(self._stopwords), config.ignore_case, self._check_lemma,
            config.stopword_list is not None,
        )

    @classmethod
    def from_properties(
        cls, props: Mapping[str, str] | None
    ) -> StopwordFilter:
        return cls(StopwordFilterConfig.from_properties(props))

    @property
    def config(self) -> StopwordFilterConfig:
        return self._config

    @property
    def stopwords(self) -> StopwordSet:
        return self._stopwords

    @property
    def check_lemma(self) -> bool:
        return self._check_lemma

    # -- Annotation --

    def is_stopword(self, token: Token) -> StopwordResult:
        """Compute the result for one token without modifying it."""
        if not self._stopwords:
            return NOT_STOPWORD
        word_match = token.word in self._stopwords
        lemma_match = False
        if self._check_lemma:
            if token.lemma is None:
                raise StopmarkPreconditionError(
                    f"token {token.index} ({token.word!r}) has no lemma; "
                    "check_lemma needs a lemma stage to run first"
                )
            lemma_match = token.lemma in self._stopwords
        return StopwordResult(word_match, lemma_match)

    def annotate_tokens(self, tokens: Iterable[Token]) -> None:
        """Attach a fresh StopwordResult to each token, replacing any old one."""
        if not self._stopwords:
            for token in tokens:
                token.stopword = NOT_STOPWORD
            return
        for token in tokens:
            token.stopword = self.is_stopword(token)

    def annotate(self, document: Document) -> None:
        self.annotate_tokens(document.tokens)

    # -- Stage contract --

    def requires(self) -> frozenset[str]:
        if self._check_lemma:
            return TOKENIZE_SSPLIT_POS_LEMMA
        return TOKENIZE_AND_SSPLIT

    def requirements_satisfied(self) -> frozenset[str]:
        return _SATISFIED
