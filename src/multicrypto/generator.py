"""Puzzle generator turning phrases into ``(a x b) - (c x d)`` problems.

Given a decoder key of ``"klcnogdwprftyxqismjvehabzu"``, the problem
``(3 x 5) - (2 x 3)`` evaluates to ``9`` and is therefore a clue for ``p``,
the ninth letter of the key.
"""

from __future__ import annotations

import logging
import random
import string
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import (
    DecoderLetterMissing,
    IncompleteDifferenceCoverage,
    InvalidDecoderKeyLength,
)
from .tables import (
    ProductTable,
    SubtractionTable,
    TARGET_COUNT,
    build_product_table,
    build_subtraction_table,
    missing_differences,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PuzzleCharacter:
    """A character of the puzzle.

    Either a math problem ``(a x b) - (c x d)`` or, when ``literal_text`` is
    set, a character passed through unchanged.
    """

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    literal_text: Optional[str] = None

    @classmethod
    def math(cls, a: int, b: int, c: int, d: int) -> "PuzzleCharacter":
        return cls(a=a, b=b, c=c, d=d)

    @classmethod
    def literal(cls, text: str) -> "PuzzleCharacter":
        return cls(literal_text=text)

    def is_math_problem(self) -> bool:
        return self.literal_text is None

    @property
    def operands(self) -> Optional[Tuple[int, int, int, int]]:
        if not self.is_math_problem():
            return None
        return (self.a, self.b, self.c, self.d)

    @property
    def value(self) -> Optional[int]:
        """Evaluated result of the problem, ``None`` for literals."""

        if not self.is_math_problem():
            return None
        return self.a * self.b - self.c * self.d

    def __str__(self) -> str:
        if self.literal_text is not None:
            return self.literal_text
        return f"({self.a} x {self.b}) - ({self.c} x {self.d})"


@dataclass(frozen=True)
class DecoderKeyCharacter:
    """A math problem for one letter of the alphabet."""

    letter: str
    expression: PuzzleCharacter

    @property
    def clue(self) -> str:
        return str(self.expression)


class PuzzleGenerator:
    """Generate puzzles from phrases.

    Every letter becomes a problem ``(a x b) - (c x d)`` whose result, between
    1 and 26, is the 1-based position of that letter in ``decoder``.

    ``min_digit`` and ``max_digit`` bound the multiplication factors.
    ``decoder`` must be 26 characters long; it is expected to be a permutation
    of the alphabet but that is not checked (see
    :func:`multicrypto.decoder.is_permutation`).  ``rng`` is the default
    random source for every generation call and may be overridden per call.
    """

    def __init__(
        self,
        min_digit: int,
        max_digit: int,
        decoder: str,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        if len(decoder) != TARGET_COUNT:
            raise InvalidDecoderKeyLength(len(decoder))

        products = build_product_table(min_digit, max_digit)
        subtractions = build_subtraction_table(products)
        missing = missing_differences(subtractions)
        if missing:
            _LOGGER.warning(
                "digit range %d..%d leaves values %s unreachable",
                min_digit,
                max_digit,
                missing,
            )
            raise IncompleteDifferenceCoverage(min_digit, max_digit, missing)

        self._min_digit = min_digit
        self._max_digit = max_digit
        self._decoder = decoder
        self._products = products
        self._subtractions = subtractions
        self._rng = rng or random.Random()

    @property
    def min_digit(self) -> int:
        return self._min_digit

    @property
    def max_digit(self) -> int:
        return self._max_digit

    @property
    def decoder(self) -> str:
        return self._decoder

    @property
    def products(self) -> ProductTable:
        return self._products

    @property
    def subtractions(self) -> SubtractionTable:
        return self._subtractions

    def expression_for_index(self, index: int, rng: Optional[random.Random] = None) -> PuzzleCharacter:
        """Return a random problem evaluating to ``index + 1``.

        Each call samples afresh, so the same index yields different problems.
        """

        if not 0 <= index < TARGET_COUNT:
            raise IndexError(f"decoder index {index} out of range 0..{TARGET_COUNT - 1}")
        rng = rng or self._rng

        subtraction = rng.choice(self._subtractions[index])
        left = rng.choice(self._products[subtraction.a])
        right = rng.choice(self._products[subtraction.b])
        return PuzzleCharacter.math(left.a, left.b, right.a, right.b)

    def generate_decoder_key(self, rng: Optional[random.Random] = None) -> List[DecoderKeyCharacter]:
        """Return one clue per letter, in alphabetical order.

        The first entry is the problem for A, the second for B, and so on,
        regardless of the order of the decoder key.
        """

        result = []
        for letter in string.ascii_lowercase:
            index = self._decoder.find(letter)
            if index < 0:
                raise DecoderLetterMissing(letter)
            result.append(
                DecoderKeyCharacter(
                    letter=letter.upper(),
                    expression=self.expression_for_index(index, rng),
                )
            )
        return result

    def generate_puzzle(self, phrase: str, rng: Optional[random.Random] = None) -> List[PuzzleCharacter]:
        """Build a puzzle for ``phrase``, one entry per character.

        Characters missing from the decoder key (spaces, digits, punctuation)
        are passed through as literals.
        """

        result = []
        for ch in phrase.lower():
            index = self._decoder.find(ch)
            if index < 0:
                result.append(PuzzleCharacter.literal(ch))
            else:
                result.append(self.expression_for_index(index, rng))
        return result

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(min_digit={self._min_digit}, "
            f"max_digit={self._max_digit}, decoder={self._decoder!r})"
        )


__all__ = ["DecoderKeyCharacter", "PuzzleCharacter", "PuzzleGenerator"]
