"""Decoder key helpers.

A decoder key is a 26-character string; the character at 0-based position
``i`` is the letter that a solved expression of value ``i + 1`` stands for.
"""

from __future__ import annotations

import random
import string
from typing import Optional

ALPHABET = string.ascii_lowercase
DEFAULT_SWAPS = 100


def identity_decoder_key() -> str:
    """Return the standard A=1, B=2 decoder key."""

    return ALPHABET


def random_decoder_key(rng: Optional[random.Random] = None, swaps: int = DEFAULT_SWAPS) -> str:
    """Return the alphabet shuffled by ``swaps`` random position swaps.

    Without ``rng`` a fresh generator seeded from the operating system is
    used, so separate runs produce different keys.
    """

    rng = rng or random.Random()
    letters = list(identity_decoder_key())
    for _ in range(swaps):
        a = rng.randrange(len(letters))
        b = rng.randrange(len(letters))
        letters[a], letters[b] = letters[b], letters[a]
    return "".join(letters)


def is_permutation(key: str) -> bool:
    """Return ``True`` when ``key`` holds every lowercase letter exactly once."""

    return len(key) == len(ALPHABET) and set(key) == set(ALPHABET)


__all__ = [
    "ALPHABET",
    "DEFAULT_SWAPS",
    "identity_decoder_key",
    "is_permutation",
    "random_decoder_key",
]
