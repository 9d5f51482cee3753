#!/usr/bin/env python3
"""Smoke-test deterministic behaviour of seeded puzzle generation."""

from __future__ import annotations

import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from contracts.schema_validator import validate_bundle
from multicrypto.bundle import build_bundle
from multicrypto.decoder import random_decoder_key
from multicrypto.generator import PuzzleGenerator

PHRASE = "Meet me at the old oak tree, 9pm!"


def _run_with_seed(seed: int) -> str:
    rng = random.Random(seed)
    generator = PuzzleGenerator(2, 12, random_decoder_key(rng), rng=rng)
    bundle = build_bundle(generator, PHRASE)
    validate_bundle(bundle)
    return bundle["bundle_id"]


def main() -> int:
    first = _run_with_seed(1234)
    second = _run_with_seed(1234)
    if first != second:
        print(f"determinism failed: {first} vs {second}")
        return 1

    third = _run_with_seed(4321)
    if first == third:
        print(f"different seed produced identical bundle: {first}")
        return 1

    print("Determinism smoke-test passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
