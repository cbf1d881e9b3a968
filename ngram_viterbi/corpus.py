import logging

logger = logging.getLogger(__name__)


def tokenize(line):
    """
    Splits a raw line into lower-cased, whitespace-delimited tokens.

    Args:
        line (str): A raw line of text.

    Returns:
        list: The tokens of the line. A blank line yields an empty list.
    """

    return line.lower().split()


def read_lines(path, encoding="utf-8"):
    """
    Reads a text file and returns its lines without trailing newlines.

    Args:
        path (str): Path of the file to read.
        encoding (str): Text encoding of the file.

    Returns:
        list: The raw lines of the file, in order.

    Raises:
        OSError: If the file is missing or unreadable.
    """

    with open(path, "r", encoding=encoding) as f:
        lines = [raw.rstrip("\r\n") for raw in f]
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


def read_sentences(path, encoding="utf-8"):
    """
    Reads a one-sentence-per-line file.

    Args:
        path (str): Path of the file to read.
        encoding (str): Text encoding of the file.

    Returns:
        list: A list of (original_line, tokens) tuples. The original line keeps its casing
              for display; the tokens are lower-cased for lookup.
    """

    return [(line, tokenize(line)) for line in read_lines(path, encoding)]
