"""Loader for newline-delimited dictionary files."""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

# Words keep their raw bytes recoverable via surrogateescape.
WORD_ENCODING = "utf-8"
WORD_ERRORS = "surrogateescape"


class DictionaryLoadError(OSError):
    """Raised when the dictionary file is missing or cannot be read."""


def load_word_list(path: Union[str, Path]) -> list[str]:
    """
    Load a dictionary file, one word per line.

    Line terminators are stripped ("\\n" and a "\\r" directly before it).
    No other validation is done: empty lines and duplicates are kept
    as words, in file order.

    Args:
        path: Path to the dictionary file

    Returns:
        List of words in file order

    Raises:
        DictionaryLoadError: If the file doesn't exist or can't be read
    """
    filepath = Path(path)

    if not filepath.is_file():
        raise DictionaryLoadError(f"Could not open dictionary file: {filepath}")

    words = []
    try:
        with open(filepath, "r", encoding=WORD_ENCODING, errors=WORD_ERRORS, newline="\n") as f:
            for line in f:
                if line.endswith("\n"):
                    line = line[:-1]
                    if line.endswith("\r"):
                        line = line[:-1]
                words.append(line)
    except OSError as e:
        raise DictionaryLoadError(f"Could not read dictionary file {filepath}: {e}") from e

    logger.info(f"Loaded {len(words)} words from {filepath}")
    return words


def word_bytes(word: str) -> bytes:
    """
    Raw bytes of a word as they appeared in the dictionary file.

    Words built in memory may hold lone surrogates outside the
    surrogateescape range; those are encoded with surrogatepass so every
    str maps to some byte string.
    """
    try:
        return word.encode(WORD_ENCODING, WORD_ERRORS)
    except UnicodeEncodeError:
        return word.encode(WORD_ENCODING, "surrogatepass")
