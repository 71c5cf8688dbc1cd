"""Regex tokenizer stage producing Token records with character offsets."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ._requirements import TOKENIZE
from ._stage import Stage
from ._types import Token

if TYPE_CHECKING:
    from ._types import Document

# Words keep internal apostrophes, hyphens and decimal points ("don't",
# "state-of-the-art", "3.14"); any other non-space character stands alone.
_TOKEN_RE = re.compile(r"\w+(?:['’.\-]\w+)*|[^\w\s]")

_NOTHING: frozenset[str] = frozenset()
_SATISFIED: frozenset[str] = frozenset({TOKENIZE})


def tokenize(text: str) -> list[Token]:
    """Split text into tokens, numbering them from 0."""
    return [
        Token(word=m.group(), begin=m.start(), end=m.end(), index=i)
        for i, m in enumerate(_TOKEN_RE.finditer(text))
    ]


class TokenizerStage(Stage):
    name = TOKENIZE

    def annotate(self, document: Document) -> None:
        document.tokens = tokenize(document.text)

    def requires(self) -> frozenset[str]:
        return _NOTHING

    def requirements_satisfied(self) -> frozenset[str]:
        return _SATISFIED
