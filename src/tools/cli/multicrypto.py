"""Command line front end for the Multi-Crypto math puzzle."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from typing import List, Optional

from contracts.schema_validator import SchemaValidationError, validate_bundle
from multicrypto.bundle import build_bundle, bundle_characters, bundle_clues
from multicrypto.decoder import (
    identity_decoder_key,
    is_permutation,
    random_decoder_key,
)
from multicrypto.errors import MulticryptoError
from multicrypto.generator import PuzzleGenerator
from printer.pdf import export_pdf
from printer.text import render_text
from project_config import generator_settings, log_level

_LOGGER = logging.getLogger(__name__)

SETTINGS = generator_settings()
# working on the standard 12x12 times table, but without 1x's since that's too easy
DEFAULT_MIN_DIGIT = SETTINGS.min_digit
DEFAULT_MAX_DIGIT = SETTINGS.max_digit
DEFAULT_DECODER = SETTINGS.decoder
DECODER_SWAPS = SETTINGS.decoder_swaps
DEFAULT_LOG_LEVEL = log_level()


def resolve_decoder(choice: str, rng: random.Random) -> str:
    """Turn ``random``/``alphabetic`` or an explicit key into a decoder key."""

    if choice == "random":
        return random_decoder_key(rng, swaps=DECODER_SWAPS)
    if choice == "alphabetic":
        return identity_decoder_key()
    return choice.lower()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Turn a phrase into a Multi-Crypto math puzzle.",
    )
    parser.add_argument("phrase", nargs="?", help="Word or phrase to encode")
    parser.add_argument(
        "--min-digit",
        type=int,
        default=DEFAULT_MIN_DIGIT,
        help="Smallest multiplication factor (default from config).",
    )
    parser.add_argument(
        "--max-digit",
        type=int,
        default=DEFAULT_MAX_DIGIT,
        help="Largest multiplication factor (default from config).",
    )
    parser.add_argument(
        "--decoder",
        default=DEFAULT_DECODER,
        help="'random', 'alphabetic' or an explicit 26-letter key (default from config).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible puzzles. If not set, every run differs.",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format written to stdout.",
    )
    parser.add_argument("--pdf", default=None, help="Also write a PDF worksheet to this path.")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default from config).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.phrase is None:
        parser.error("Need a word or phrase!")

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    rng = random.Random(args.seed)
    decoder = resolve_decoder(args.decoder, rng)
    if not is_permutation(decoder):
        _LOGGER.warning("decoder key %r is not a permutation of the alphabet", decoder)

    try:
        generator = PuzzleGenerator(args.min_digit, args.max_digit, decoder, rng=rng)
        bundle = build_bundle(generator, args.phrase)
        validate_bundle(bundle)
    except (MulticryptoError, SchemaValidationError) as exc:
        _LOGGER.error("puzzle generation failed: %s", exc)
        print(f"Oops! Something went wrong building the puzzle: {exc}", file=sys.stderr)
        return 1

    clues = bundle_clues(bundle)
    puzzle = bundle_characters(bundle)

    if args.format == "json":
        print(json.dumps(bundle, indent=2, ensure_ascii=False))
    else:
        sys.stdout.write(render_text(clues, puzzle))

    if args.pdf:
        try:
            result = export_pdf(clues, puzzle, args.pdf)
        except OSError as exc:
            _LOGGER.error("pdf export to %s failed: %s", args.pdf, exc)
            print(f"Oops! Something went wrong writing the PDF: {exc}", file=sys.stderr)
            return 1
        print(f"PDF with {result['pages']} pages saved to: {result['pdf_path']}", file=sys.stderr)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
