"""
Command-line entry points.

    ngram-viterbi ngrams <train-file> -test <test-file>
    ngram-viterbi viterbi <probabilities-file> <sentences-file>
"""

import argparse
import logging
import sys

from ngram_viterbi.corpus import read_sentences
from ngram_viterbi.estimators import score_sentence
from ngram_viterbi.frequency import TrainingStats
from ngram_viterbi.report import format_ngram_report, format_viterbi_report
from ngram_viterbi.tables import TableFormatError, load_probability_tables
from ngram_viterbi.viterbi import UnknownWordError, execute_viterbi_algorithm

logger = logging.getLogger("ngram_viterbi")


def run_ngrams(args):
    try:
        training = read_sentences(args.train_file, args.encoding)
        test = read_sentences(args.test_file, args.encoding)
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return 1

    stats = TrainingStats.from_sentences(tokens for _, tokens in training)
    if stats.vocabulary_size() == 0:
        logger.error("Training file %s contains no tokens", args.train_file)
        return 1

    for line, tokens in test:
        print(format_ngram_report(line, score_sentence(stats, tokens)))
    return 0


def run_viterbi(args):
    try:
        tables = load_probability_tables(args.probabilities_file, args.encoding)
        sentences = read_sentences(args.sentences_file, args.encoding)
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return 1
    except TableFormatError as e:
        logger.error("Malformed probability file %s: %s", args.probabilities_file, e)
        return 1

    status = 0
    for line, words in sentences:
        if not words:
            logger.warning("Skipping empty sentence")
            continue
        try:
            result = execute_viterbi_algorithm(tables, words)
        except UnknownWordError as e:
            logger.error("Cannot decode %r: %s", line, e)
            status = 1
            continue
        print(format_viterbi_report(line, words, result))
        print()
    return status


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ngram-viterbi",
        description="N-gram sentence scoring and Viterbi part-of-speech decoding")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Verbosity of diagnostics written to stderr")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of all input files")
    commands = parser.add_subparsers(dest="command", required=True)

    ngrams = commands.add_parser("ngrams", help="Score test sentences with n-gram models")
    ngrams.add_argument("train_file", help="Training corpus, one sentence per line")
    ngrams.add_argument("-test", dest="test_file", required=True,
                        help="Test sentences, one per line")
    ngrams.set_defaults(func=run_ngrams)

    viterbi = commands.add_parser("viterbi", help="Decode tag sequences with Viterbi")
    viterbi.add_argument("probabilities_file", help="Transition and emission probabilities")
    viterbi.add_argument("sentences_file", help="Sentences to tag, one per line")
    viterbi.set_defaults(func=run_viterbi)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
