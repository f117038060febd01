"""radixword CLI - convert between integers and alphabet words.

Usage:
    python -m radixword.main encode 255 --alphabet base16
    python -m radixword.main --symbols 01 decode 101
    python -m radixword.main --alphabet base2 validate 101 102
"""

import argparse
import logging
import sys
from typing import Optional

from .alphabet import Alphabet
from .presets import ALPHABETS, get_alphabet
from . import config as cfg


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with defaults from config.json."""
    default_alphabet = cfg.default_alphabet()
    default_width = cfg.default_width()

    parser = argparse.ArgumentParser(
        description="radixword - integers to words over arbitrary alphabets"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--alphabet",
        "-a",
        type=str,
        default=default_alphabet,
        help=f"Preset alphabet, one of {', '.join(ALPHABETS)} (default: {default_alphabet})",
    )
    source.add_argument(
        "--symbols",
        "-s",
        type=str,
        help="Custom alphabet given as a string of symbols",
    )
    parser.add_argument(
        "--width",
        "-w",
        type=int,
        choices=cfg.WIDTHS,
        default=default_width,
        help=f"Integer width in bits (default: {default_width})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=cfg.default_verbose(),
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    encode = commands.add_parser("encode", help="Convert integers to words")
    encode.add_argument("values", type=int, nargs="+")
    decode = commands.add_parser("decode", help="Convert words to integers")
    decode.add_argument("words", nargs="+")
    validate = commands.add_parser("validate", help="Check words against the alphabet")
    validate.add_argument("words", nargs="+")

    return parser


def _encode(alphabet: Alphabet, values: list[int], width: int) -> int:
    parse = alphabet.parse_long if width == 64 else alphabet.parse_int
    for value in values:
        print(parse(value))
    return 0


def _decode(alphabet: Alphabet, words: list[str], width: int) -> int:
    for text in words:
        word = alphabet.create_word(text)
        print(alphabet.to_long(word) if width == 64 else alphabet.to_int(word))
    return 0


def _validate(alphabet: Alphabet, words: list[str]) -> int:
    status = 0
    for text in words:
        offending = alphabet.offending_characters(text)
        if offending:
            print(f"{text}: invalid {' '.join(repr(c) for c in offending)}")
            status = 1
        else:
            print(f"{text}: ok")
    return status


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    # choices only checks command line values, not the configured default
    if args.width not in cfg.WIDTHS:
        parser.error(f"config.json width must be one of {cfg.WIDTHS}, got {args.width!r}")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    try:
        if args.symbols is not None:
            alphabet = Alphabet(args.symbols)
        else:
            alphabet = get_alphabet(args.alphabet)

        if args.command == "encode":
            return _encode(alphabet, args.values, args.width)
        if args.command == "decode":
            return _decode(alphabet, args.words, args.width)
        return _validate(alphabet, args.words)
    except (ValueError, OverflowError) as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
