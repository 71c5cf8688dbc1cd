"""NlpOptions: translates a few analysis flags into an ordered stage list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._pipeline import ANNOTATORS, Pipeline
from ._requirements import (
    DCOREF,
    LEMMA,
    NER,
    PARSE,
    POS,
    REGEXNER,
    SSPLIT,
    STOPWORD,
    TOKENIZE,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ._stage import Stage
    from ._types import StopwordFilterConfig

COREF_MAX_DIST = "dcoref.maxdist"
COREF_POST_PROCESSING = "dcoref.postprocessing"
TOKENIZE_OPTIONS = "tokenize.options"

# Keep forward slashes and brackets as written
_TOKENIZE_OPTIONS_VALUE = (
    "invertible,ptb3Escaping=true,escapeForwardSlashAsterisk=false,"
    "normalizeParentheses=false,normalizeOtherBrackets=false"
)


@dataclass(slots=True, frozen=True)
class NlpOptions:
    """Which analysis stages an NLP engine should run.

    Use the factory classmethods for the supported combinations.
    """

    lemmatisation: bool = False
    named_entity_recognition: bool = False
    named_entity_recognition_regex: bool = False
    sentence_parser: bool = False
    coreference_analysis: bool = False
    coref_max_sentence_dist: int = -1  # -1 = no limit
    coref_post_processing: bool = False

    @classmethod
    def tokenization_only(cls, lemmatisation: bool) -> NlpOptions:
        return cls(lemmatisation=lemmatisation)

    @classmethod
    def named_entity_recognition_only(
        cls, regex_ner: bool, sentence_parser: bool
    ) -> NlpOptions:
        """Named entities without coreference analysis."""
        return cls(
            lemmatisation=True,
            named_entity_recognition=True,
            named_entity_recognition_regex=regex_ner,
            sentence_parser=sentence_parser,
        )

    @classmethod
    def named_entities_with_coreference_analysis(
        cls,
        regex_ner: bool,
        coref_max_sentence_dist: int,
        coref_post_processing: bool,
    ) -> NlpOptions:
        """Named entities plus coreference.

        Args:
            coref_max_sentence_dist: Max sentence distance between mentions.
            coref_post_processing: Trim singleton clusters afterwards.
        """
        return cls(
            lemmatisation=True,
            named_entity_recognition=True,
            named_entity_recognition_regex=regex_ner,
            sentence_parser=True,
            coreference_analysis=True,
            coref_max_sentence_dist=coref_max_sentence_dist,
            coref_post_processing=coref_post_processing,
        )

    @classmethod
    def sentence_parsing(cls, lemmatisation: bool) -> NlpOptions:
        return cls(lemmatisation=lemmatisation, sentence_parser=True)

    def annotators(self) -> list[str]:
        """Stage names in the order the engine must run them."""
        names = [TOKENIZE, SSPLIT, POS]
        if self.lemmatisation:
            names.append(LEMMA)
        if self.named_entity_recognition:
            names.append(NER)
        if self.named_entity_recognition_regex:
            names.append(REGEXNER)
        if self.sentence_parser:
            names.append(PARSE)
        if self.coreference_analysis:
            if PARSE not in names:
                names.append(PARSE)
            names.append(DCOREF)
        return names

    def properties(self) -> dict[str, str]:
        props = {
            ANNOTATORS: ", ".join(self.annotators()),
            TOKENIZE_OPTIONS: _TOKENIZE_OPTIONS_VALUE,
        }
        if self.coreference_analysis:
            props[COREF_MAX_DIST] = str(self.coref_max_sentence_dist)
            props[COREF_POST_PROCESSING] = str(self.coref_post_processing).lower()
        return props

    def with_stopwords(self, config: StopwordFilterConfig) -> dict[str, str]:
        """Properties with a trailing stopword stage configured from config."""
        props = self.properties()
        props[ANNOTATORS] = ", ".join([*self.annotators(), STOPWORD])
        props.update(config.to_properties())
        return props

    def build_pipeline(
        self,
        stopwords: StopwordFilterConfig | None = None,
        stages: Mapping[str, Stage] | None = None,
    ) -> Pipeline:
        """Assemble a Pipeline running these stages.

        Args:
            stopwords: If given, a stopword stage configured from it runs last.
            stages: Instances for stages stopmark does not provide itself
                (``pos``, ``ner``, ``regexner``, ``parse``, ``dcoref``).
        """
        if stopwords is None:
            props = self.properties()
        else:
            props = self.with_stopwords(stopwords)
        return Pipeline.from_properties(props, stages)
