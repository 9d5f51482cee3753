"""Plain-text rendering of a decoder key and a secret message."""

from __future__ import annotations

from typing import Iterable, List

from multicrypto.generator import DecoderKeyCharacter, PuzzleCharacter
from project_config import get_section

DEFAULT_BLANK = str(get_section("printer.text.blank", "______"))


def _heading(title: str) -> List[str]:
    return [title, "-" * len(title), ""]


def render_decoder_key(clues: Iterable[DecoderKeyCharacter], blank: str = DEFAULT_BLANK) -> List[str]:
    lines = _heading("Decoder Key")
    lines.extend(f"{clue.letter}: {clue.clue} = {blank}" for clue in clues)
    return lines


def render_message(puzzle: Iterable[PuzzleCharacter], blank: str = DEFAULT_BLANK) -> List[str]:
    lines = _heading("Secret Message")
    for ch in puzzle:
        if ch.is_math_problem():
            lines.append(f"{ch} = {blank}")
        else:
            lines.append(str(ch))
    return lines


def render_text(
    clues: Iterable[DecoderKeyCharacter],
    puzzle: Iterable[PuzzleCharacter],
    blank: str = DEFAULT_BLANK,
) -> str:
    """Return the worksheet: the decoder key block, then the secret message."""

    lines = render_decoder_key(clues, blank)
    lines.extend(["", "", ""])
    lines.extend(render_message(puzzle, blank))
    return "\n".join(lines) + "\n"


__all__ = ["DEFAULT_BLANK", "render_decoder_key", "render_message", "render_text"]
