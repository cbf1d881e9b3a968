import logging
from dataclasses import dataclass

import numpy as np

from ngram_viterbi.tables import FALLBACK_PROBABILITY, REAL_TAGS, Tag

logger = logging.getLogger(__name__)


class UnknownWordError(LookupError):
    def __init__(self, word):
        super().__init__(f"sentence-initial word {word!r} is not in the probability table")
        self.word = word


@dataclass
class ViterbiResult:
    """
    Outcome of decoding one sentence.

    Attributes:
        tags (list): The best Tag for each word.
        scores (np.ndarray): num_tags x num_words matrix of best-path probabilities.
        backpointers (np.ndarray): num_tags x num_words matrix of predecessor tag indices.
        path_log_prob (float): The lowest log2 score along the chosen path.
    """

    tags: list
    scores: np.ndarray
    backpointers: np.ndarray
    path_log_prob: float

    def log_scores(self):
        """Returns the score matrix in log2, with -inf for zero cells."""
        with np.errstate(divide="ignore"):
            return np.log10(self.scores) / np.log10(2)


def best_predecessor(candidates):
    """
    Finds the best entry of a vector of non-negative path probabilities.

    Args:
        candidates (np.ndarray): Candidate probabilities, indexed by tag.

    Returns:
        tuple: (index, probability). Ties go to the lowest index, and when no candidate is
               positive the result is (0, 0.0).
    """

    index = int(np.argmax(candidates))
    if candidates[index] <= 0:
        return 0, 0.0
    return index, float(candidates[index])


def execute_viterbi_algorithm(tables, words):
    """
    Determines the most probable tag sequence for a sentence.

    Args:
        tables (ProbabilityTables): Transition and emission probabilities.
        words (list): Lower-cased tokens of the sentence.

    Returns:
        ViterbiResult: The decoded tags together with the score and backpointer matrices.

    Raises:
        ValueError: If the sentence is empty.
        UnknownWordError: If the first word has no emission column. Later unknown words
                          use FALLBACK_PROBABILITY as their emission.
    """

    if not words:
        raise ValueError("cannot decode an empty sentence")
    if words[0] not in tables:
        raise UnknownWordError(words[0])

    num_words, num_tags = len(words), len(REAL_TAGS)
    score_matrix = np.zeros((num_tags, num_words))
    backpointer_matrix = np.zeros((num_tags, num_words), dtype=int)

    for tag in REAL_TAGS:
        score_matrix[tag, 0] = tables.emission(tag, words[0]) * tables.transition(Tag.PHI, tag)

    for step in range(1, num_words):
        word = words[step]
        for tag in REAL_TAGS:
            candidates = score_matrix[:, step - 1] * tables.transitions[:num_tags, tag]
            best_index, best_probability = best_predecessor(candidates)
            if word in tables:
                emission = tables.emission(tag, word)
            else:
                emission = FALLBACK_PROBABILITY
            score_matrix[tag, step] = emission * best_probability
            backpointer_matrix[tag, step] = best_index

    predicted_indices = np.zeros(num_words, dtype=int)
    predicted_indices[-1] = best_predecessor(score_matrix[:, -1])[0]
    for step in range(num_words - 2, -1, -1):
        predicted_indices[step] = backpointer_matrix[predicted_indices[step + 1], step + 1]

    result = ViterbiResult(
        tags=[Tag(int(idx)) for idx in predicted_indices],
        scores=score_matrix,
        backpointers=backpointer_matrix,
        path_log_prob=0.0,
    )
    path_log_probs = result.log_scores()[predicted_indices, np.arange(num_words)]
    # Reported score is the minimum along the path, not the sum
    result.path_log_prob = min(0.0, float(np.min(path_log_probs)))
    logger.debug("Decoded %s as %s", words, [t.label for t in result.tags])
    return result
