"""
Candidate string hash functions mapping words into a 16-bit bucket space.

Each function is pure: str -> int in [0, 65535]. Byte-oriented functions
work on the raw bytes of the word as read from the dictionary file, so a
character outside ASCII contributes each of its UTF-8 bytes.

The set is fixed:
- String length
- First character
- Additive checksum
- Remainder (polynomial, prime modulus 65413)
- Multiplicative (golden-ratio constant, fractional part)
- Standard library (Python's built-in ``hash``)
"""

import math
from dataclasses import dataclass
from typing import Callable

from hash_distribution.data.word_lists import word_bytes

NUM_BUCKETS = 65536
HASH_MASK = NUM_BUCKETS - 1

REMAINDER_MULTIPLIER = 31
REMAINDER_MODULUS = 65413  # prime, so buckets above 65412 stay empty

MULTIPLICATIVE_CONSTANT = 0.6180339887


def string_length_hash(word: str) -> int:
    """Length of the word in bytes, modulo 65536."""
    return len(word_bytes(word)) % NUM_BUCKETS


def first_character_hash(word: str) -> int:
    """Unsigned value of the first byte, or 0 for the empty word."""
    data = word_bytes(word)
    if not data:
        return 0
    return data[0] % NUM_BUCKETS


def additive_checksum_hash(word: str) -> int:
    """Sum of byte values, modulo 65536."""
    h = 0
    for b in word_bytes(word):
        h = (h + b) % NUM_BUCKETS
    return h


def remainder_hash(word: str) -> int:
    """
    Polynomial rolling hash reduced by a prime modulus.

    h = (h * 31 + byte) mod 65413, starting from 0. Output lies in
    [0, 65412], so the top 123 buckets are never used.
    """
    h = 0
    for b in word_bytes(word):
        h = (h * REMAINDER_MULTIPLIER + b) % REMAINDER_MODULUS
    return h


def multiplicative_hash(word: str) -> int:
    """
    Multiplicative hash keeping a running value in [0, 1).

    h = fmod(h * 0.6180339887 + byte, 1.0) per byte, then the fraction is
    scaled to 16 bits. Since each byte is an integer, adding it leaves the
    fractional part unchanged, and starting from 0.0 every word lands in
    bucket 0.
    """
    h = 0.0
    for b in word_bytes(word):
        h = math.fmod(h * MULTIPLICATIVE_CONSTANT + b, 1.0)
    return int(h * NUM_BUCKETS) & HASH_MASK


def builtin_hash(word: str) -> int:
    """
    Python's built-in string hash, modulo 65536.

    Implementation-defined: str hashing is salted per process unless
    PYTHONHASHSEED is set, so values are not reproducible across runs.
    """
    return hash(word) % NUM_BUCKETS


@dataclass(frozen=True)
class NamedHashFunction:
    """A labelled candidate hash function."""
    name: str
    func: Callable[[str], int]

    def __call__(self, word: str) -> int:
        return self.func(word)


HASH_FUNCTIONS = (
    NamedHashFunction("String Length", string_length_hash),
    NamedHashFunction("First Character", first_character_hash),
    NamedHashFunction("Additive Checksum", additive_checksum_hash),
    NamedHashFunction("Remainder", remainder_hash),
    NamedHashFunction("Multiplicative", multiplicative_hash),
    NamedHashFunction("Standard Library", builtin_hash),
)


def get_hash_function(name: str) -> NamedHashFunction:
    """
    Look up a candidate hash function by label.

    Args:
        name: Label such as "Remainder" (case-insensitive)

    Returns:
        The matching NamedHashFunction

    Raises:
        ValueError: If no function has that label
    """
    for named in HASH_FUNCTIONS:
        if named.name.lower() == name.lower():
            return named
    available = ", ".join(f"'{h.name}'" for h in HASH_FUNCTIONS)
    raise ValueError(f"Unknown hash function '{name}'. Available: {available}")
