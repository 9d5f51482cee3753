"""Multi-Crypto math puzzle generator.

Every letter of a phrase becomes a problem ``(a x b) - (c x d)`` whose answer,
between 1 and 26, points at that letter in a 26-character decoder key.
"""

from __future__ import annotations

from .decoder import identity_decoder_key, is_permutation, random_decoder_key
from .errors import (
    DecoderLetterMissing,
    IncompleteDifferenceCoverage,
    InvalidDecoderKeyLength,
    InvalidDigitRange,
    MulticryptoError,
)
from .generator import DecoderKeyCharacter, PuzzleCharacter, PuzzleGenerator

__all__ = [
    "DecoderKeyCharacter",
    "DecoderLetterMissing",
    "IncompleteDifferenceCoverage",
    "InvalidDecoderKeyLength",
    "InvalidDigitRange",
    "MulticryptoError",
    "PuzzleCharacter",
    "PuzzleGenerator",
    "identity_decoder_key",
    "is_permutation",
    "random_decoder_key",
]
