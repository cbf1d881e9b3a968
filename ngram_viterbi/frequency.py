import logging

from nltk.probability import FreqDist
from nltk.util import bigrams

logger = logging.getLogger(__name__)

PHI = "phi"  # Synthetic previous-token of every sentence-initial word


class TrainingStats:
    """
    Unigram and bigram frequency tables collected from a training corpus.

    The tables are filled once by `record_sentence` and only read afterwards by the
    estimators. Every training sentence contributes one (PHI, first_word) bigram and
    increments `phi_count`, so PHI acts as the context of sentence-initial words.
    """

    def __init__(self):
        self.unigrams = FreqDist()
        self.bigram_counts = FreqDist()
        self.phi_count = 0

    @classmethod
    def from_sentences(cls, sentences):
        """
        Builds the frequency tables from an iterable of token lists.

        Args:
            sentences (iterable): Token lists, one per training sentence.

        Returns:
            TrainingStats: The populated frequency tables.
        """

        stats = cls()
        for tokens in sentences:
            stats.record_sentence(tokens)
        logger.debug("Trained on %d sentences: %d tokens, %d types, %d bigram types",
                     stats.phi_count, stats.total_unigram_token_count(),
                     stats.vocabulary_size(), stats.bigram_counts.B())
        return stats

    def record_sentence(self, tokens):
        """
        Adds one training sentence to the frequency tables.

        Args:
            tokens (list): The lower-cased tokens of the sentence. An empty list still counts
                           as a sentence for phi_count.
        """

        self.phi_count += 1
        for token in tokens:
            self.unigrams[token] += 1
        for pair in bigrams(tokens, pad_left=True, left_pad_symbol=PHI):
            self.bigram_counts[pair] += 1

    def unigram_frequency(self, token):
        return self.unigrams[token]

    def bigram_frequency(self, prev, cur):
        return self.bigram_counts[(prev, cur)]

    def vocabulary_size(self):
        return self.unigrams.B()

    def total_unigram_token_count(self):
        # FreqDist caches the sum and drops the cache whenever a count changes
        return self.unigrams.N()

    def context_count(self, prev):
        """Returns the count of the conditioning context of a bigram."""
        if prev == PHI:
            return self.phi_count
        return self.unigram_frequency(prev)
