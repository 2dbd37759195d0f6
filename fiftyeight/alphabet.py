"""Base58 alphabets: validation and lookup tables."""

from __future__ import annotations

from typing import ClassVar

ALPHABET_SIZE = 58
_ASCII_LIMIT = 128
_MISSING = 0xFF


class AlphabetError(ValueError):
    """Raised when a string of characters cannot be used as a Base58 alphabet."""


class DuplicateCharacterError(AlphabetError):
    """The alphabet holds the same character at two positions."""

    def __init__(self, character: str, first: int, second: int) -> None:
        self.character = character
        self.first = first
        self.second = second
        super().__init__(
            f"alphabet contained a duplicate character `{character}` "
            f"at indexes {first} and {second}"
        )


class NonAsciiCharacterError(AlphabetError):
    """The alphabet holds a character outside of ASCII."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"alphabet contained a non-ascii character at {index}")


def _as_ascii_bytes(base: bytes | bytearray | str) -> bytes:
    if isinstance(base, str):
        for index, char in enumerate(base):
            if ord(char) >= _ASCII_LIMIT:
                raise NonAsciiCharacterError(index)
        return base.encode("ascii")
    data = bytes(base)
    for index, byte in enumerate(data):
        if byte >= _ASCII_LIMIT:
            raise NonAsciiCharacterError(index)
    return data


class Alphabet:
    """A validated set of 58 distinct ASCII characters used as Base58 digits."""

    __slots__ = ("_encode", "_decode")

    BITCOIN: ClassVar[Alphabet]
    MONERO: ClassVar[Alphabet]
    RIPPLE: ClassVar[Alphabet]
    FLICKR: ClassVar[Alphabet]
    DEFAULT: ClassVar[Alphabet]

    def __init__(self, base: bytes | bytearray | str) -> None:
        if len(base) != ALPHABET_SIZE:
            raise AlphabetError(
                f"alphabet must be {ALPHABET_SIZE} characters long, got {len(base)}"
            )
        data = _as_ascii_bytes(base)
        table = bytearray([_MISSING]) * _ASCII_LIMIT
        for index, byte in enumerate(data):
            if table[byte] != _MISSING:
                raise DuplicateCharacterError(chr(byte), table[byte], index)
            table[byte] = index
        self._encode = data
        self._decode = bytes(table)

    @property
    def characters(self) -> bytes:
        """The 58 digit characters, in order of value."""
        return self._encode

    @property
    def zero(self) -> int:
        """The byte standing for the digit zero."""
        return self._encode[0]

    def encode_digit(self, value: int) -> int:
        """Return the character byte for a digit value in 0..57."""
        if not 0 <= value < ALPHABET_SIZE:
            raise ValueError(f"digit value {value} is outside 0..{ALPHABET_SIZE - 1}")
        return self._encode[value]

    def decode_char(self, byte: int) -> int | None:
        """Return the digit value of a character byte, or None if it is not a digit."""
        if not 0 <= byte < _ASCII_LIMIT:
            return None
        value = self._decode[byte]
        return None if value == _MISSING else value

    def __repr__(self) -> str:
        return f"Alphabet({self._encode.decode('ascii')!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._encode == other._encode

    def __hash__(self) -> int:
        return hash(self._encode)


Alphabet.BITCOIN = Alphabet(b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")
Alphabet.MONERO = Alphabet(b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")
Alphabet.RIPPLE = Alphabet(b"rpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65jkm8oFqi1tuvAxyz")
Alphabet.FLICKR = Alphabet(b"123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ")
Alphabet.DEFAULT = Alphabet.BITCOIN