"""Tests for sentence splitter."""

from stopmark import Document, SentenceSplitterStage, TokenizerStage
from stopmark._sentence import sentence_spans, split_sentences


def test_empty():
    assert split_sentences("") == []
    assert split_sentences("   ") == []


def test_single_sentence():
    result = split_sentences("Hello world.")
    assert result == ["Hello world."]


def test_two_sentences():
    result = split_sentences("Hello world. This is a test.")
    assert result == ["Hello world.", "This is a test."]


def test_question_mark():
    result = split_sentences("What is this? It is a test.")
    assert len(result) == 2


def test_exclamation():
    result = split_sentences("Stop! That is enough.")
    assert len(result) == 2


def test_abbreviation_mr():
    """Mr. should not trigger a split."""
    result = split_sentences("Mr. Smith went to Washington. He was happy.")
    assert len(result) == 2
    assert "Mr" in result[0]


def test_abbreviation_dr():
    """Dr. should not trigger a split."""
    result = split_sentences("Dr. Jones is here. She is busy.")
    assert len(result) == 2


def test_no_capital_after_period():
    """Period followed by lowercase should not split."""
    result = split_sentences("The value is 3.14 approximately.")
    assert len(result) == 1


def test_spans_skip_whitespace():
    text = "  One here.   Two there.  "
    spans = sentence_spans(text)
    assert [text[b:e] for b, e in spans] == ["One here.", "Two there."]


def test_stage_groups_tokens():
    doc = Document("The cat sat. The dog ran away.")
    TokenizerStage().annotate(doc)
    SentenceSplitterStage().annotate(doc)
    assert len(doc.sentences) == 2
    assert [t.word for t in doc.sentences[0].tokens] == ["The", "cat", "sat", "."]
    assert doc.sentences[1].joined_words == "The dog ran away ."
    assert [s.index for s in doc.sentences] == [0, 1]
    # Every token lands in exactly one sentence
    assert sum(len(s.tokens) for s in doc.sentences) == len(doc.tokens)


def test_stage_contract():
    stage = SentenceSplitterStage()
    assert stage.requires() == frozenset({"tokenize"})
    assert stage.requirements_satisfied() == frozenset({"ssplit"})
