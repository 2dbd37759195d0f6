"""Command line tool that encodes standard input to Base58 or decodes it back."""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, Sequence

from fiftyeight.alphabet import ALPHABET_SIZE, Alphabet
from fiftyeight.decode import DecodeBuilder
from fiftyeight.encode import EncodeBuilder

_VERSION = "0.1.2"
_CUSTOM_PREFIX = "custom("
_CUSTOM_SUFFIX = ")"

_NAMED_ALPHABETS = {
    "bitcoin": Alphabet.BITCOIN,
    "monero": Alphabet.MONERO,
    "ripple": Alphabet.RIPPLE,
    "flickr": Alphabet.FLICKR,
}


def _custom_body(text: str) -> str:
    body = text
    while body.startswith(_CUSTOM_PREFIX):
        body = body[len(_CUSTOM_PREFIX):]
    while body.endswith(_CUSTOM_SUFFIX):
        body = body[: -len(_CUSTOM_SUFFIX)]
    return body


def parse_alphabet(text: str) -> Alphabet:
    """Turn an alphabet name or ``custom(...)`` spec into an Alphabet.

    Raises ValueError (or an AlphabetError) when the text names no usable alphabet.
    """
    named = _NAMED_ALPHABETS.get(text)
    if named is not None:
        return named
    if text.startswith(_CUSTOM_PREFIX) and text.endswith(_CUSTOM_SUFFIX):
        raw = _custom_body(text).encode("utf-8")
        if len(raw) != ALPHABET_SIZE:
            raise ValueError(
                f"custom alphabet is not {ALPHABET_SIZE} characters long"
            )
        return Alphabet(raw)
    raise ValueError(f"'{text}' is not a known alphabet")


def run(
    stdin: BinaryIO,
    stdout: BinaryIO,
    decode: bool = False,
    alphabet: Alphabet = Alphabet.DEFAULT,
) -> None:
    """Read all of stdin, encode or decode it, and write the result to stdout."""
    data = stdin.read()
    if decode:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError("stream did not contain valid UTF-8") from exc
        output = DecodeBuilder(text.rstrip(), alphabet).into_bytes()
    else:
        output = EncodeBuilder(data, alphabet).into_bytes()
    stdout.write(output)
    stdout.flush()


def _alphabet_argument(text: str) -> Alphabet:
    try:
        return parse_alphabet(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fiftyeight",
        description="A cli utility for encoding/decoding base58 encoded data",
    )
    parser.add_argument(
        "-d", "--decode", action="store_true", help="Decode input"
    )
    parser.add_argument(
        "-a",
        "--alphabet",
        type=_alphabet_argument,
        default="bitcoin",
        help=(
            "Which base58 alphabet to decode/encode with [possible values: "
            "bitcoin, monero, ripple, flickr or custom(abc...xyz)]"
        ),
    )
    parser.add_argument("-V", "--version", action="version", version=_VERSION)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: returns 0 on success and 1 when the input cannot be handled."""
    args = _build_parser().parse_args(argv)
    try:
        run(sys.stdin.buffer, sys.stdout.buffer, args.decode, args.alphabet)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())