from __future__ import annotations

import random
import string

import pytest

from multicrypto.decoder import identity_decoder_key
from multicrypto.errors import (
    DecoderLetterMissing,
    IncompleteDifferenceCoverage,
    InvalidDecoderKeyLength,
    InvalidDigitRange,
)
from multicrypto.generator import DecoderKeyCharacter, PuzzleCharacter, PuzzleGenerator

KEY = "klcnogdwprftyxqismjvehabzu"


def _generator(decoder: str = KEY, seed: int = 1234) -> PuzzleGenerator:
    return PuzzleGenerator(2, 12, decoder, rng=random.Random(seed))


def test_puzzle_character_rendering():
    problem = PuzzleCharacter.math(3, 5, 2, 3)
    assert problem.is_math_problem()
    assert str(problem) == "(3 x 5) - (2 x 3)"
    assert problem.value == 9
    assert problem.operands == (3, 5, 2, 3)

    literal = PuzzleCharacter.literal("!")
    assert not literal.is_math_problem()
    assert str(literal) == "!"
    assert literal.value is None
    assert literal.operands is None


def test_literal_space_is_not_a_math_problem():
    assert not PuzzleCharacter.literal(" ").is_math_problem()


@pytest.mark.parametrize("decoder", ["a" * 25, "a" * 27, ""])
def test_decoder_key_length_is_enforced(decoder):
    with pytest.raises(InvalidDecoderKeyLength) as excinfo:
        PuzzleGenerator(2, 12, decoder)
    assert excinfo.value.length == len(decoder)


def test_inverted_digit_range_fails_construction():
    with pytest.raises(InvalidDigitRange):
        PuzzleGenerator(12, 2, KEY)


def test_narrow_digit_range_fails_construction():
    with pytest.raises(IncompleteDifferenceCoverage) as excinfo:
        PuzzleGenerator(2, 2, KEY)
    assert excinfo.value.missing == tuple(range(1, 27))
    assert excinfo.value.code == "incomplete-difference-coverage"


def test_every_index_yields_a_correct_expression():
    generator = _generator()
    for index in range(26):
        for _ in range(20):
            expression = generator.expression_for_index(index)
            a, b, c, d = expression.operands
            assert all(2 <= x <= 12 for x in (a, b, c, d))
            assert a * b - c * d == index + 1


def test_expression_for_index_varies_between_calls():
    generator = _generator()
    seen = {generator.expression_for_index(0).operands for _ in range(200)}
    assert len(seen) > 1


@pytest.mark.parametrize("index", [-1, 26])
def test_expression_for_index_rejects_out_of_range(index):
    with pytest.raises(IndexError):
        _generator().expression_for_index(index)


def test_decoder_key_is_alphabetical_and_decodes():
    clues = _generator().generate_decoder_key()
    assert len(clues) == 26
    assert [clue.letter for clue in clues] == list(string.ascii_uppercase)
    for clue in clues:
        assert isinstance(clue, DecoderKeyCharacter)
        assert clue.clue
        assert KEY[clue.expression.value - 1] == clue.letter.lower()


def test_decoder_key_for_non_permutation_reports_missing_letter():
    generator = PuzzleGenerator(2, 12, "a" * 26)
    with pytest.raises(DecoderLetterMissing) as excinfo:
        generator.generate_decoder_key()
    assert excinfo.value.letter == "b"


def test_empty_phrase_gives_empty_puzzle():
    assert _generator().generate_puzzle("") == []


def test_single_letter_with_identity_key():
    puzzle = _generator(identity_decoder_key()).generate_puzzle("a")
    assert len(puzzle) == 1
    assert puzzle[0].is_math_problem()
    assert puzzle[0].value == 1


def test_uppercase_input_is_lowered_before_lookup():
    puzzle = _generator(identity_decoder_key()[::-1]).generate_puzzle("A")
    assert puzzle[0].value == 26


def test_non_letters_pass_through_in_order():
    puzzle = _generator(identity_decoder_key()).generate_puzzle("a1!")
    assert [ch.is_math_problem() for ch in puzzle] == [True, False, False]
    assert puzzle[0].value == 1
    assert str(puzzle[1]) == "1"
    assert str(puzzle[2]) == "!"


def test_puzzle_decodes_back_to_the_phrase():
    phrase = "Hello, World"
    puzzle = _generator().generate_puzzle(phrase)
    decoded = "".join(KEY[ch.value - 1] if ch.is_math_problem() else str(ch) for ch in puzzle)
    assert decoded == phrase.lower()


def test_seeded_generators_are_reproducible():
    first = _generator(seed=99).generate_puzzle("same seed")
    second = _generator(seed=99).generate_puzzle("same seed")
    assert first == second


def test_per_call_rng_overrides_generator_rng():
    generator = _generator(seed=1)
    first = generator.generate_puzzle("override", rng=random.Random(5))
    second = generator.generate_puzzle("override", rng=random.Random(5))
    assert first == second


def test_generator_exposes_its_configuration():
    generator = _generator()
    assert (generator.min_digit, generator.max_digit, generator.decoder) == (2, 12, KEY)
    assert len(generator.subtractions) == 26
    assert 144 in generator.products
