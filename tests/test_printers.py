from __future__ import annotations

import random

from multicrypto.decoder import identity_decoder_key
from multicrypto.generator import DecoderKeyCharacter, PuzzleCharacter, PuzzleGenerator
from printer.pdf import export_pdf
from printer.text import render_text


def test_text_layout_matches_worksheet():
    clues = [DecoderKeyCharacter("A", PuzzleCharacter.math(3, 5, 2, 3))]
    puzzle = [PuzzleCharacter.math(3, 5, 2, 3), PuzzleCharacter.literal("!")]
    assert render_text(clues, puzzle, blank="___") == (
        "Decoder Key\n"
        "-----------\n"
        "\n"
        "A: (3 x 5) - (2 x 3) = ___\n"
        "\n\n\n"
        "Secret Message\n"
        "--------------\n"
        "\n"
        "(3 x 5) - (2 x 3) = ___\n"
        "!\n"
    )


def test_text_uses_configured_blank():
    generator = PuzzleGenerator(2, 12, identity_decoder_key(), rng=random.Random(2))
    text = render_text(generator.generate_decoder_key(), generator.generate_puzzle("hi you"))
    assert text.count("= ______") == 26 + 5


def test_pdf_export_writes_paginated_file(tmp_path):
    generator = PuzzleGenerator(2, 12, identity_decoder_key(), rng=random.Random(3))
    phrase = "the quick brown fox jumps over the lazy dog " * 2
    out = tmp_path / "sheets" / "puzzle.pdf"

    result = export_pdf(generator.generate_decoder_key(), generator.generate_puzzle(phrase), out)

    assert out.exists()
    assert out.read_bytes().startswith(b"%PDF")
    assert result["pdf_path"] == str(out)
    assert result["pages"] >= 3
