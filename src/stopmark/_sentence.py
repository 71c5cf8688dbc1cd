"""Lightweight regex-based sentence splitter."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ._requirements import SSPLIT, TOKENIZE
from ._stage import Stage
from ._types import Sentence

if TYPE_CHECKING:
    from ._types import Document

# Sentence-ending punctuation followed by whitespace and a capital letter.
# Negative lookbehinds for common abbreviations and decimal numbers.
_SENTENCE_END_RE = re.compile(
    r"(?<!\bMr)(?<!\bMrs)(?<!\bDr)(?<!\bMs)(?<!\bSt)(?<!\bJr)(?<!\bSr)"
    r"(?<!\bProf)(?<!\bGen)(?<!\bSgt)(?<!\bCpl)(?<!\bPvt)(?<!\bRev)"
    r"(?<!\bInc)(?<!\bLtd)(?<!\bCorp)(?<!\bvs)(?<!\betc)(?<!\bno)"
    r"(?<!\d)"
    r"[.!?]"
    r"(?=\s+[A-Z])"
)

_REQUIRES: frozenset[str] = frozenset({TOKENIZE})
_SATISFIED: frozenset[str] = frozenset({SSPLIT})


def sentence_spans(text: str) -> list[tuple[int, int]]:
    """Return (begin, end) offsets of each non-blank sentence in text."""
    spans: list[tuple[int, int]] = []
    start = 0
    ends = [m.end() for m in _SENTENCE_END_RE.finditer(text)]
    ends.append(len(text))
    for end in ends:
        chunk = text[start:end]
        stripped = chunk.strip()
        if stripped:
            lead = len(chunk) - len(chunk.lstrip())
            spans.append((start + lead, start + lead + len(stripped)))
        start = end
    return spans


def split_sentences(text: str) -> list[str]:
    """Split text into sentences using regex heuristics."""
    return [text[b:e] for b, e in sentence_spans(text)]


class SentenceSplitterStage(Stage):
    """Groups already tokenized text into sentences by character offset."""

    name = SSPLIT

    def annotate(self, document: Document) -> None:
        sentences: list[Sentence] = []
        tokens = document.tokens
        i = 0
        for begin, end in sentence_spans(document.text):
            grouped = []
            while i < len(tokens) and tokens[i].begin < end:
                grouped.append(tokens[i])
                i += 1
            if grouped:
                sentences.append(Sentence(
                    index=len(sentences), begin=begin, end=end, tokens=grouped,
                ))
        document.sentences = sentences

    def requires(self) -> frozenset[str]:
        return _REQUIRES

    def requirements_satisfied(self) -> frozenset[str]:
        return _SATISFIED
