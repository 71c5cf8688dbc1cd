"""Stopmark: stopword annotation stage for token-level NLP pipelines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._errors import (
    StopmarkConfigError,
    StopmarkError,
    StopmarkPreconditionError,
    StopmarkRequirementError,
)
from ._filter import StopwordFilter
from ._lemma import StemLemmatizerStage
from ._options import NlpOptions
from ._pipeline import Pipeline
from ._sentence import SentenceSplitterStage, split_sentences
from ._stage import Stage
from ._stop_words import DEFAULT_STOP_WORDS, StopwordSet, parse_stopword_list
from ._tokenizer import TokenizerStage, tokenize
from ._types import (
    CHECK_LEMMA,
    IGNORE_STOPWORD_CASE,
    STOPWORDS_LIST,
    Document,
    Sentence,
    StopwordFilterConfig,
    StopwordResult,
    Token,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "CHECK_LEMMA",
    "DEFAULT_STOP_WORDS",
    "Document",
    "IGNORE_STOPWORD_CASE",
    "NlpOptions",
    "Pipeline",
    "STOPWORDS_LIST",
    "Sentence",
    "SentenceSplitterStage",
    "Stage",
    "StemLemmatizerStage",
    "StopmarkConfigError",
    "StopmarkError",
    "StopmarkPreconditionError",
    "StopmarkRequirementError",
    "StopwordFilter",
    "StopwordFilterConfig",
    "StopwordResult",
    "StopwordSet",
    "Token",
    "TokenizerStage",
    "parse_stopword_list",
    "split_sentences",
    "tokenize",
]


def load(properties: Mapping[str, str] | None = None) -> Pipeline:
    """Return a tokenize, ssplit, stopword pipeline.

    Args:
        properties: Stopword options (``stopword-list``,
            ``ignore-stopword-case``, ``check-lemma``). If they include an
            ``annotators`` key, that stage list is used instead.
    """
    props = dict(properties or {})
    props.setdefault("annotators", "tokenize, ssplit, stopword")
    return Pipeline.from_properties(props)
