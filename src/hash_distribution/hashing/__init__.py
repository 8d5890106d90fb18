"""Candidate 16-bit string hash functions."""

from hash_distribution.hashing.string_hashes import (
    NUM_BUCKETS,
    HASH_FUNCTIONS,
    NamedHashFunction,
    get_hash_function,
    string_length_hash,
    first_character_hash,
    additive_checksum_hash,
    remainder_hash,
    multiplicative_hash,
    builtin_hash,
)

__all__ = [
    "NUM_BUCKETS",
    "HASH_FUNCTIONS",
    "NamedHashFunction",
    "get_hash_function",
    "string_length_hash",
    "first_character_hash",
    "additive_checksum_hash",
    "remainder_hash",
    "multiplicative_hash",
    "builtin_hash",
]
