import math
from decimal import Decimal

import pytest

from ngram_viterbi.estimators import SentenceScore
from ngram_viterbi.report import (
    format_log_prob,
    format_ngram_report,
    format_viterbi_report,
    round_half_down,
)
from ngram_viterbi.viterbi import execute_viterbi_algorithm


@pytest.mark.parametrize("value, expected", [
    (-4.169925, Decimal("-4.1699")),
    (0.00015, Decimal("0.0001")),
    (-0.00015, Decimal("-0.0001")),
    (0.00016, Decimal("0.0002")),
    (-1.0, Decimal("-1.0000")),
])
def test_round_half_down(value, expected):
    assert round_half_down(value) == expected


@pytest.mark.parametrize("value, fixed, expected", [
    (-4.169925, False, "-4.1699"),
    (-1.0, False, "-1"),
    (-2.5, False, "-2.5"),
    (-1.0, True, "-1.0000"),
    (-0.00001, True, "0.0000"),
    (-0.00001, False, "0"),
    (-math.inf, True, "-inf"),
])
def test_format_log_prob(value, fixed, expected):
    assert format_log_prob(value, fixed=fixed) == expected


def test_ngram_report():
    scores = (SentenceScore(-4.169925), SentenceScore.UNDEFINED, SentenceScore(-3.029747))
    report = format_ngram_report("The dog", scores)

    assert report.splitlines() == [
        "S = The dog",
        "",
        "Unsmoothed Unigrams, logprob(S) = -4.1699",
        "Unsmoothed Bigrams, logprob(S) = undefined",
        "Smoothed Bigrams, logprob(S) = -3.0297",
    ]


def test_viterbi_report(tables):
    result = execute_viterbi_algorithm(tables, ["fish", "swim"])
    report = format_viterbi_report("Fish swim", ["fish", "swim"], result)
    lines = report.splitlines()

    assert lines[0] == "PROCESSING SENTENCE: Fish swim"
    assert "FINAL VITERBI NETWORK" in lines
    assert "FINAL BACKPTR NETWORK" in lines
    assert "BEST TAG SEQUENCE HAS LOG PROBABILITY = -3.1584" in lines
    assert lines[-2:] == ["swim -> verb", "fish -> noun"]
    noun_row = next(line for line in lines if line.startswith("noun"))
    assert "-1.3219" in noun_row and "-7.3808" in noun_row


def test_viterbi_report_single_word_has_no_backpointer_network(tables):
    result = execute_viterbi_algorithm(tables, ["fish"])
    report = format_viterbi_report("fish", ["fish"], result)

    assert "FINAL BACKPTR NETWORK" not in report
    assert report.rstrip().endswith("fish -> noun")
