from ngram_viterbi.corpus import read_lines, read_sentences, tokenize


def test_tokenize_lowercases_and_splits_on_any_whitespace():
    assert tokenize("The  Dog\tBarks ") == ["the", "dog", "barks"]


def test_tokenize_blank_line_is_empty():
    assert tokenize("   ") == []


def test_read_sentences_keeps_original_line(tmp_path):
    path = tmp_path / "sentences.txt"
    path.write_text("Fish Swim\nthe DOG\n", encoding="utf-8")

    assert read_sentences(str(path)) == [
        ("Fish Swim", ["fish", "swim"]),
        ("the DOG", ["the", "dog"]),
    ]


def test_read_lines_strips_line_endings(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_bytes(b"a b\r\nc\n")

    assert read_lines(str(path)) == ["a b", "c"]
