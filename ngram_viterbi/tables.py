import logging
from enum import IntEnum

import numpy as np

from ngram_viterbi.corpus import read_lines, tokenize

logger = logging.getLogger(__name__)

FALLBACK_PROBABILITY = 0.0001  # Value of every matrix cell the table file does not set


class Tag(IntEnum):
    NOUN = 0
    VERB = 1
    INF = 2
    PREP = 3
    PHI = 4

    @property
    def label(self):
        return self.name.lower()

    @classmethod
    def from_label(cls, label):
        return cls[label.upper()]

    @classmethod
    def is_label(cls, label):
        return label.upper() in cls.__members__


REAL_TAGS = (Tag.NOUN, Tag.VERB, Tag.INF, Tag.PREP)


class TableFormatError(ValueError):
    def __init__(self, line_number, line, reason):
        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number = line_number


class ProbabilityTables:
    """
    Transition and emission probabilities for the fixed tag set.

    Attributes:
        transitions (np.ndarray): 5x4 matrix, transitions[prev_tag, tag] = P(tag | prev_tag).
                                  Row Tag.PHI holds the sentence-initial transitions.
        emissions (np.ndarray): 4x|words| matrix, emissions[tag, word_index] = P(word | tag).
        word_index (dict): Maps each word of the table file to its emission column.
    """

    def __init__(self, word_index):
        self.word_index = dict(word_index)
        self.transitions = np.full((len(Tag), len(REAL_TAGS)), FALLBACK_PROBABILITY)
        self.emissions = np.full((len(REAL_TAGS), len(self.word_index)), FALLBACK_PROBABILITY)

    def transition(self, prev_tag, tag):
        return self.transitions[prev_tag, tag]

    def emission(self, tag, word):
        """
        Returns P(word | tag).

        Raises:
            KeyError: If the word has no column in the emission matrix.
        """
        return self.emissions[tag, self.word_index[word]]

    def __contains__(self, word):
        return word in self.word_index


def _split_entry(line_number, line):
    fields = tokenize(line)
    if len(fields) != 3:
        raise TableFormatError(line_number, line, "expected 'token token probability'")
    first, second, value = fields
    try:
        value = float(value)
    except ValueError:
        raise TableFormatError(line_number, line, "probability is not a number") from None
    return first, second, value


def parse_probability_lines(lines):
    """
    Builds the probability tables from the lines of a probability file.

    A line whose two tokens are both tag names is a transition, anything else is an
    emission "word tag probability". Words receive emission columns in the order they
    first appear. A transition line "prev_tag tag p" is P(tag | prev_tag) and is stored at
    transitions[prev_tag, tag]. phi is only a source, so "tag phi p" is rejected.

    Args:
        lines (iterable): Raw lines of the probability file. Blank lines are ignored.

    Returns:
        ProbabilityTables: The populated tables.

    Raises:
        TableFormatError: If a line does not have three fields, its value is not a number,
                          an emission line names an unknown tag,
                          or a transition line names phi as its target.
    """

    entries = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        entries.append((line_number, line) + _split_entry(line_number, line))

    word_index = {}
    for _, _, first, second, _ in entries:
        if not (Tag.is_label(first) and Tag.is_label(second)) and first not in word_index:
            word_index[first] = len(word_index)

    tables = ProbabilityTables(word_index)
    for line_number, line, first, second, value in entries:
        if Tag.is_label(first) and Tag.is_label(second):
            prev_tag, tag = Tag.from_label(first), Tag.from_label(second)
            if tag == Tag.PHI:
                raise TableFormatError(line_number, line, "phi cannot be a transition target")
            tables.transitions[prev_tag, tag] = value
        else:
            if not Tag.is_label(second) or second == Tag.PHI.label:
                raise TableFormatError(line_number, line, f"unknown emission tag {second!r}")
            tables.emissions[Tag.from_label(second), word_index[first]] = value

    logger.debug("Loaded %d entries: transitions %s, emissions %s",
                 len(entries), tables.transitions.shape, tables.emissions.shape)
    return tables


def load_probability_tables(path, encoding="utf-8"):
    """
    Reads a probability file and builds its tables.

    Args:
        path (str): Path of the probability file.
        encoding (str): Text encoding of the file.

    Returns:
        ProbabilityTables: The populated tables.

    Raises:
        OSError: If the file is missing or unreadable.
        TableFormatError: If a line is malformed.
    """

    return parse_probability_lines(read_lines(path, encoding))
