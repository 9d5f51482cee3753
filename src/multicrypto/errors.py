"""Error types raised by the puzzle generator."""

from __future__ import annotations

from typing import Optional, Sequence


class MulticryptoError(RuntimeError):
    """Base class for generator failures.

    ``code`` is a stable machine-readable identifier, ``detail`` an optional
    human readable explanation.
    """

    code = "multicrypto-error"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        message = self.code if detail is None else f"{self.code}:{detail}"
        super().__init__(message)


class InvalidDigitRange(MulticryptoError):
    """Raised when the minimum multiplication digit exceeds the maximum."""

    code = "invalid-digit-range"

    def __init__(self, min_digit: int, max_digit: int) -> None:
        self.min_digit = min_digit
        self.max_digit = max_digit
        super().__init__(f"min_digit {min_digit} is greater than max_digit {max_digit}")


class InvalidDecoderKeyLength(MulticryptoError):
    """Raised when a decoder key is not exactly 26 characters long."""

    code = "invalid-decoder-key-length"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"the decoder must be 26 characters, got {length}")


class IncompleteDifferenceCoverage(MulticryptoError):
    """Raised when the digit range cannot express every value from 1 to 26."""

    code = "incomplete-difference-coverage"

    def __init__(self, min_digit: int, max_digit: int, missing: Sequence[int]) -> None:
        self.min_digit = min_digit
        self.max_digit = max_digit
        self.missing = tuple(missing)
        values = ", ".join(str(v) for v in self.missing)
        super().__init__(f"digits {min_digit}..{max_digit} cannot produce {values}")


class DecoderLetterMissing(MulticryptoError):
    """Raised when a clue is requested for a letter absent from the decoder key."""

    code = "decoder-letter-missing"

    def __init__(self, letter: str) -> None:
        self.letter = letter
        super().__init__(f"letter {letter!r} does not appear in the decoder key")


__all__ = [
    "DecoderLetterMissing",
    "IncompleteDifferenceCoverage",
    "InvalidDecoderKeyLength",
    "InvalidDigitRange",
    "MulticryptoError",
]
