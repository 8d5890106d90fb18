"""Tests for dictionary loading."""

import pytest

from hash_distribution.data.word_lists import DictionaryLoadError, load_word_list, word_bytes
from hash_distribution.hashing.string_hashes import first_character_hash


def test_load_word_list_preserves_order_and_empty_lines(tmp_path):
    """Lines come back in order with empty lines kept as words."""
    path = tmp_path / "words.txt"
    path.write_text("apple\nbanana\n\ncherry\napple\n", encoding="utf-8")

    words = load_word_list(path)

    assert words == ["apple", "banana", "", "cherry", "apple"]


def test_load_word_list_without_trailing_newline(tmp_path):
    """The last line is read even without a terminating newline."""
    path = tmp_path / "words.txt"
    path.write_text("alpha\nbeta", encoding="utf-8")

    assert load_word_list(str(path)) == ["alpha", "beta"]


def test_load_word_list_strips_crlf(tmp_path):
    """Windows line endings are stripped entirely."""
    path = tmp_path / "words.txt"
    path.write_bytes(b"one\r\ntwo\r\n")

    assert load_word_list(path) == ["one", "two"]


def test_load_word_list_empty_file(tmp_path):
    """An empty file yields an empty word list."""
    path = tmp_path / "words.txt"
    path.write_bytes(b"")

    assert load_word_list(path) == []


def test_load_word_list_keeps_raw_bytes(tmp_path):
    """Bytes that are not valid UTF-8 still reach the hash functions unchanged."""
    path = tmp_path / "words.txt"
    path.write_bytes(b"\xff\xfe\nok\n")

    words = load_word_list(path)

    assert len(words) == 2
    assert first_character_hash(words[0]) == 0xFF


def test_load_word_list_missing_file(tmp_path):
    """A missing dictionary is a load error."""
    with pytest.raises(DictionaryLoadError, match="Could not open dictionary file"):
        load_word_list(tmp_path / "missing.txt")


def test_load_word_list_directory(tmp_path):
    """A directory path is not a readable dictionary."""
    with pytest.raises(DictionaryLoadError):
        load_word_list(tmp_path)


def test_dictionary_load_error_is_os_error():
    assert issubclass(DictionaryLoadError, OSError)


def test_word_bytes_handles_any_lone_surrogate():
    """Surrogates outside the escape range fall back to surrogatepass encoding."""
    assert word_bytes("\udcff") == b"\xff"
    assert word_bytes("\ud800") == b"\xed\xa0\x80"
    assert first_character_hash("\ud800") == 0xED
