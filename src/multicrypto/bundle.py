"""JSON-ready bundles holding a decoder key, a puzzle and its solution."""

from __future__ import annotations

import hashlib
import json
import random
import unicodedata
from typing import Any, Dict, Iterable, List, Optional

from .generator import DecoderKeyCharacter, PuzzleCharacter, PuzzleGenerator

BUNDLE_TYPE = "MulticryptoPuzzle"
SCHEMA_VERSION = "1.0"


def _normalize(obj: Any) -> Any:
    """Reduce bundle content to JSON primitives with a stable ordering.

    Puzzle characters and decoder clues are accepted directly and converted to
    their bundle entries.  Literal characters are NFC-normalised so that a
    phrase typed with combining accents hashes the same as its composed form.
    Floats never occur in a bundle and are rejected.
    """

    if isinstance(obj, PuzzleCharacter):
        return _normalize(character_to_dict(obj))
    if isinstance(obj, DecoderKeyCharacter):
        return _normalize(clues_to_list([obj])[0])
    if isinstance(obj, dict):
        return {str(k): _normalize(v) for k, v in sorted(obj.items(), key=lambda item: str(item[0]))}
    if isinstance(obj, (list, tuple)):
        return [_normalize(item) for item in obj]
    if isinstance(obj, str):
        return unicodedata.normalize("NFC", obj)
    if isinstance(obj, float):
        raise TypeError("bundles hold integer operands only")
    return obj


def canonicalize(obj: Dict[str, Any]) -> bytes:
    """Serialise a bundle into compact JSON bytes with sorted keys."""

    return json.dumps(
        _normalize(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


def compute_bundle_id(obj: Dict[str, Any]) -> str:
    """Return the content id of a bundle.

    The id covers the digit range, every clue and puzzle operand and the
    solution, so two bundles share an id exactly when a solver would see the
    same worksheet with the same answer.  The ``bundle_id`` field itself is
    left out of the hash.
    """

    content = {key: value for key, value in obj.items() if key != "bundle_id"}
    digest = hashlib.sha256(canonicalize(content)).hexdigest()
    return f"sha256-{digest}"


def character_to_dict(character: PuzzleCharacter) -> Dict[str, Any]:
    if character.is_math_problem():
        return {
            "kind": "math",
            "operands": list(character.operands or ()),
            "text": str(character),
            "value": character.value,
        }
    return {"kind": "literal", "text": str(character)}


def clues_to_list(clues: Iterable[DecoderKeyCharacter]) -> List[Dict[str, Any]]:
    return [
        {
            "letter": clue.letter,
            "clue": clue.clue,
            "operands": list(clue.expression.operands or ()),
        }
        for clue in clues
    ]


def build_bundle(
    generator: PuzzleGenerator,
    phrase: str,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """Generate a decoder key and a puzzle for ``phrase`` and bundle them."""

    clues = generator.generate_decoder_key(rng)
    puzzle = generator.generate_puzzle(phrase, rng)
    bundle: Dict[str, Any] = {
        "type": BUNDLE_TYPE,
        "schema_version": SCHEMA_VERSION,
        "digit_range": {"min": generator.min_digit, "max": generator.max_digit},
        "decoder_key": clues_to_list(clues),
        "puzzle": [character_to_dict(ch) for ch in puzzle],
        "solution": {"decoder": generator.decoder, "phrase": phrase.lower()},
    }
    bundle["bundle_id"] = compute_bundle_id(bundle)
    return bundle


def bundle_characters(bundle: Dict[str, Any]) -> List[PuzzleCharacter]:
    """Rebuild the puzzle characters stored in ``bundle``."""

    result = []
    for entry in bundle["puzzle"]:
        if entry["kind"] == "math":
            result.append(PuzzleCharacter.math(*entry["operands"]))
        else:
            result.append(PuzzleCharacter.literal(entry["text"]))
    return result


def bundle_clues(bundle: Dict[str, Any]) -> List[DecoderKeyCharacter]:
    """Rebuild the decoder key clues stored in ``bundle``."""

    return [
        DecoderKeyCharacter(entry["letter"], PuzzleCharacter.math(*entry["operands"]))
        for entry in bundle["decoder_key"]
    ]


__all__ = [
    "BUNDLE_TYPE",
    "SCHEMA_VERSION",
    "build_bundle",
    "bundle_characters",
    "bundle_clues",
    "canonicalize",
    "character_to_dict",
    "clues_to_list",
    "compute_bundle_id",
]
