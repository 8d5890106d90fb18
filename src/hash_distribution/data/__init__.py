"""Dictionary loading utilities."""

from hash_distribution.data.word_lists import (
    DictionaryLoadError,
    load_word_list,
    word_bytes,
)

__all__ = [
    "DictionaryLoadError",
    "load_word_list",
    "word_bytes",
]
