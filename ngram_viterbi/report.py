import math
from decimal import ROUND_HALF_DOWN, Decimal

from tabulate import tabulate

from ngram_viterbi.tables import REAL_TAGS, Tag

DISPLAY_DECIMALS = 4


def round_half_down(value, decimals=DISPLAY_DECIMALS):
    """
    Rounds a float to a fixed number of decimals, ties going towards zero.

    Args:
        value (float): The value to round. Must be finite.
        decimals (int): Number of decimal places to keep.

    Returns:
        Decimal: The rounded value.
    """

    return Decimal(repr(float(value))).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_DOWN)


def format_log_prob(value, fixed=False):
    """
    Formats a log probability for display.

    With fixed=False trailing zeros are dropped ("-4.17", "-3"); with fixed=True exactly
    DISPLAY_DECIMALS decimals are shown. Infinite values print as "-inf" / "inf".
    """

    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    text = f"{round_half_down(value):f}"
    if not fixed and "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0" or (fixed and text == f"-0.{'0' * DISPLAY_DECIMALS}"):
        text = text[1:]
    return text


def format_score(score):
    return format_log_prob(score.log_prob) if score.is_defined else "undefined"


def format_ngram_report(line, scores):
    """
    Builds the report block for one test sentence.

    Args:
        line (str): The test sentence as it appears in the file.
        scores (tuple): (unigram, bigram, laplace_bigram) SentenceScore values.

    Returns:
        str: The report block.
    """

    unigram, bigram, laplace = scores
    return "\n".join([
        f"S = {line}",
        "",
        f"Unsmoothed Unigrams, logprob(S) = {format_score(unigram)}",
        f"Unsmoothed Bigrams, logprob(S) = {format_score(bigram)}",
        f"Smoothed Bigrams, logprob(S) = {format_score(laplace)}",
        "",
    ])


def format_viterbi_report(line, words, result):
    """
    Builds the diagnostic report of one decoded sentence.

    Args:
        line (str): The sentence as it appears in the file.
        words (list): The lower-cased tokens that were decoded.
        result (ViterbiResult): The decoder output.

    Returns:
        str: The score network, the backpointer network, the reported path log probability
             and the "word -> tag" lines from the last word to the first.
    """

    log_scores = result.log_scores()
    score_rows = [[tag.label] + [format_log_prob(v, fixed=True) for v in log_scores[tag]]
                  for tag in REAL_TAGS]
    backptr_rows = [[tag.label] + [Tag(int(k)).label for k in result.backpointers[tag, 1:]]
                    for tag in REAL_TAGS]

    parts = [f"PROCESSING SENTENCE: {line}", "", "FINAL VITERBI NETWORK",
             tabulate(score_rows, headers=[""] + list(words), disable_numparse=True)]
    if len(words) > 1:
        parts += ["", "FINAL BACKPTR NETWORK",
                  tabulate(backptr_rows, headers=[""] + list(words[1:]), disable_numparse=True)]
    parts += ["", f"BEST TAG SEQUENCE HAS LOG PROBABILITY = "
                  f"{format_log_prob(result.path_log_prob, fixed=True)}"]
    parts += [f"{word} -> {tag.label}" for word, tag in reversed(list(zip(words, result.tags)))]
    return "\n".join(parts) + "\n"
