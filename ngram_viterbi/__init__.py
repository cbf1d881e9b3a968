from ngram_viterbi.estimators import SentenceScore, score_sentence
from ngram_viterbi.frequency import PHI, TrainingStats
from ngram_viterbi.tables import FALLBACK_PROBABILITY, ProbabilityTables, Tag, parse_probability_lines
from ngram_viterbi.viterbi import UnknownWordError, ViterbiResult, execute_viterbi_algorithm

__version__ = "0.1.0"
