"""Capability identifiers shared by stage contracts."""

TOKENIZE = "tokenize"
SSPLIT = "ssplit"
POS = "pos"
LEMMA = "lemma"
NER = "ner"
REGEXNER = "regexner"
PARSE = "parse"
DCOREF = "dcoref"
STOPWORD = "stopword"

TOKENIZE_AND_SSPLIT: frozenset[str] = frozenset({TOKENIZE, SSPLIT})
TOKENIZE_SSPLIT_POS: frozenset[str] = frozenset({TOKENIZE, SSPLIT, POS})
TOKENIZE_SSPLIT_POS_LEMMA: frozenset[str] = frozenset(
    {TOKENIZE, SSPLIT, POS, LEMMA}
)
