"""
Sentence scoring under three n-gram estimators.

All scores are base-2 log probabilities. The unsmoothed estimators can hit a zero
probability; they then return `SentenceScore.UNDEFINED` instead of taking the
logarithm of zero.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from nltk.util import bigrams

from ngram_viterbi.frequency import PHI

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentenceScore:
    log_prob: Optional[float] = None

    @property
    def is_defined(self):
        return self.log_prob is not None


SentenceScore.UNDEFINED = SentenceScore()


def log2(probability):
    """
    Converts a probability to its base-2 logarithm.

    Args:
        probability (float): A probability in (0, 1].

    Returns:
        float: log10(probability) / log10(2).

    Raises:
        ValueError: If the probability is not positive.
    """

    if probability <= 0:
        raise ValueError(f"log2 is undefined for probability {probability!r}")
    return float(np.log10(probability) / np.log10(2))


def sentence_bigrams(tokens):
    """Returns the (previous, current) pairs of a sentence, starting with (PHI, first)."""
    return list(bigrams(tokens, pad_left=True, left_pad_symbol=PHI))


def unigram_probability(stats, token):
    """
    Computes the unsmoothed unigram probability P(token).

    Args:
        stats (TrainingStats): The training frequency tables.
        token (str): The token to look up.

    Returns:
        float: freq(token) / N, or 0.0 for a token never seen in training.
    """

    total = stats.total_unigram_token_count()
    frequency = stats.unigram_frequency(token)
    if frequency == 0:
        return 0.0
    return frequency / total


def bigram_probability(stats, prev, cur):
    """
    Computes the unsmoothed conditional probability P(cur | prev).

    Args:
        stats (TrainingStats): The training frequency tables.
        prev (str): The previous token, or PHI at the start of a sentence.
        cur (str): The current token.

    Returns:
        float: freq(prev, cur) / context_count(prev), or 0.0 for an unseen bigram.
    """

    frequency = stats.bigram_frequency(prev, cur)
    if frequency == 0:
        return 0.0
    return frequency / stats.context_count(prev)


def laplace_bigram_probability(stats, prev, cur):
    """
    Computes the add-one smoothed conditional probability P(cur | prev).

    Args:
        stats (TrainingStats): The training frequency tables.
        prev (str): The previous token, or PHI at the start of a sentence.
        cur (str): The current token.

    Returns:
        float: (freq(prev, cur) + 1) / (context_count(prev) + V).

    Raises:
        ValueError: If the denominator is zero, i.e. nothing was trained.
    """

    denominator = stats.context_count(prev) + stats.vocabulary_size()
    if denominator == 0:
        raise ValueError("Laplace estimate requires a trained model")
    return (stats.bigram_frequency(prev, cur) + 1) / denominator


def score_unigrams(stats, tokens):
    """
    Scores a sentence with the unsmoothed unigram model.

    Args:
        stats (TrainingStats): The training frequency tables.
        tokens (list): The lower-cased tokens of the sentence.

    Returns:
        SentenceScore: The summed log2 probability, or UNDEFINED if any token was never
                       seen in training.
    """

    probabilities = [unigram_probability(stats, token) for token in tokens]
    if any(p == 0.0 for p in probabilities):
        return SentenceScore.UNDEFINED
    return SentenceScore(sum((log2(p) for p in probabilities), 0.0))


def score_bigrams(stats, tokens):
    """
    Scores a sentence with the unsmoothed bigram model.

    Args:
        stats (TrainingStats): The training frequency tables.
        tokens (list): The lower-cased tokens of the sentence.

    Returns:
        SentenceScore: The summed log2 probability, or UNDEFINED as soon as one of the
                       sentence's bigrams was never observed in training.
    """

    log_prob = 0.0
    for prev, cur in sentence_bigrams(tokens):
        probability = bigram_probability(stats, prev, cur)
        if probability == 0.0:
            logger.debug("Unseen bigram (%s, %s)", prev, cur)
            return SentenceScore.UNDEFINED
        log_prob += log2(probability)
    return SentenceScore(log_prob)


def score_laplace_bigrams(stats, tokens):
    """
    Scores a sentence with the add-one smoothed bigram model.

    Args:
        stats (TrainingStats): The training frequency tables.
        tokens (list): The lower-cased tokens of the sentence.

    Returns:
        SentenceScore: The summed log2 probability. Always defined.

    Raises:
        ValueError: If nothing was trained.
    """

    return SentenceScore(sum((log2(laplace_bigram_probability(stats, prev, cur))
                              for prev, cur in sentence_bigrams(tokens)), 0.0))


def score_sentence(stats, tokens):
    """
    Scores a sentence under all three estimators.

    Returns:
        tuple: (unigram, bigram, laplace_bigram) SentenceScore values.
    """

    return (score_unigrams(stats, tokens),
            score_bigrams(stats, tokens),
            score_laplace_bigrams(stats, tokens))
