"""Shared fixtures for stopmark tests."""

import pytest

from stopmark import Stage, StopwordFilter, StopwordFilterConfig
from stopmark._requirements import POS, TOKENIZE_AND_SSPLIT

EXAMPLE = (
    "The history of NLP generally starts in the 1950s, "
    "although work can be found from earlier periods."
)


class TagEverythingStage(Stage):
    """Stand-in part-of-speech stage that tags every token as "X"."""

    name = POS

    def annotate(self, document):
        for token in document.tokens:
            token.pos = "X"

    def requires(self):
        return TOKENIZE_AND_SSPLIT

    def requirements_satisfied(self):
        return frozenset({POS})


@pytest.fixture
def example():
    return EXAMPLE


@pytest.fixture
def pos_stage():
    return TagEverythingStage()


@pytest.fixture(scope="session")
def default_filter():
    """Default word list with case folding; shared like a real pipeline would."""
    return StopwordFilter(StopwordFilterConfig(ignore_case=True))
