"""Pipeline: runs stages in order after checking their declared requirements."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from ._errors import StopmarkConfigError, StopmarkRequirementError
from ._filter import StopwordFilter
from ._lemma import StemLemmatizerStage
from ._requirements import LEMMA, SSPLIT, STOPWORD, TOKENIZE
from ._sentence import SentenceSplitterStage
from ._tokenizer import TokenizerStage
from ._types import Document

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ._stage import Stage

logger = logging.getLogger(__name__)

ANNOTATORS = "annotators"

_BUILTIN_STAGES: dict[str, Callable[[Mapping[str, str]], Stage]] = {
    TOKENIZE: lambda props: TokenizerStage(),
    SSPLIT: lambda props: SentenceSplitterStage(),
    LEMMA: lambda props: StemLemmatizerStage(),
    STOPWORD: StopwordFilter.from_properties,
}


def parse_annotators(value: str) -> list[str]:
    """Split an annotators property such as "tokenize, ssplit, stopword"."""
    return [name.strip() for name in value.split(",") if name.strip()]


class Pipeline:
    """Ordered list of stages whose requirements are verified up front."""

    __slots__ = ("_stages",)

    def __init__(self, stages: Iterable[Stage]) -> None:
        self._stages: tuple[Stage, ...] = tuple(stages)
        satisfied: set[str] = set()
        for stage in self._stages:
            missing = stage.requires() - satisfied
            if missing:
                raise StopmarkRequirementError(
                    f"stage {stage.name!r} requires {sorted(missing)} "
                    f"but only {sorted(satisfied)} run before it"
                )
            satisfied |= stage.requirements_satisfied()
        logger.debug(
            "pipeline stages: %s", ", ".join(s.name for s in self._stages)
        )

    @classmethod
    def from_annotators(
        cls,
        annotators: str | Iterable[str],
        properties: Mapping[str, str] | None = None,
        stages: Mapping[str, Stage] | None = None,
    ) -> Pipeline:
        """Build a pipeline from stage names.

        Args:
            annotators: Stage names in run order, as a list or a comma
                separated string.
            properties: Stage options, passed to each built-in stage factory.
            stages: Extra or overriding stage instances keyed by name.
        """
        if isinstance(annotators, str):
            annotators = parse_annotators(annotators)
        props = properties or {}
        extra = stages or {}
        built: list[Stage] = []
        for name in annotators:
            if name in extra:
                built.append(extra[name])
            elif name in _BUILTIN_STAGES:
                built.append(_BUILTIN_STAGES[name](props))
            else:
                raise StopmarkConfigError(f"Unknown stage: {name!r}")
        return cls(built)

    @classmethod
    def from_properties(
        cls,
        properties: Mapping[str, str],
        stages: Mapping[str, Stage] | None = None,
    ) -> Pipeline:
        """Build a pipeline from the ``annotators`` key of a properties map."""
        if ANNOTATORS not in properties:
            raise StopmarkConfigError(f"Missing {ANNOTATORS!r} property")
        return cls.from_annotators(properties[ANNOTATORS], properties, stages)

    @property
    def stages(self) -> tuple[Stage, ...]:
        return self._stages

    def annotate(self, text: str | Document) -> Document:
        """Run every stage over one document."""
        doc = Document(text) if isinstance(text, str) else text
        for stage in self._stages:
            stage.annotate(doc)
            doc.satisfied |= stage.requirements_satisfied()
        return doc

    def annotate_batch(self, texts: Iterable[str | Document]) -> list[Document]:
        return [self.annotate(t) for t in texts]
