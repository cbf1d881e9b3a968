import pytest

from ngram_viterbi.frequency import TrainingStats
from ngram_viterbi.tables import parse_probability_lines

TRAINING_LINES = ["the dog barks", "the cat runs"]

PROBABILITY_LINES = [
    "phi noun 0.8",
    "phi verb 0.2",
    "noun noun 0.3",
    "noun verb 0.7",
    "verb noun 0.6",
    "fish noun 0.5",
    "fish verb 0.1",
    "swim verb 0.4",
    "swim noun 0.05",
]


@pytest.fixture
def stats():
    return TrainingStats.from_sentences(line.split() for line in TRAINING_LINES)


@pytest.fixture
def tables():
    return parse_probability_lines(PROBABILITY_LINES)
