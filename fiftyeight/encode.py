"""Encoding bytes into Base58 text."""

from __future__ import annotations

from typing import Iterable, Union

from fiftyeight.alphabet import Alphabet
from fiftyeight.check import CHECKSUM_LEN, Check

BytesLike = Union[bytes, bytearray, memoryview, str, Iterable[int]]

_BASE = 58


class EncodeError(ValueError):
    """Raised when data cannot be encoded as requested."""


class BufferTooSmallError(EncodeError):
    """The output buffer was too small to hold the encoded text."""

    def __init__(self) -> None:
        super().__init__("buffer provided to encode base58 string into was too small")


def max_encoded_len(length: int) -> int:
    """Upper bound on the encoded length of `length` input bytes.

    The length must already include any version and checksum bytes.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    # log(256) / log(58) is about 1.37; 1.5 keeps the arithmetic simple.
    return length + -(-(length + 1) // 2)


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _encode_raw(data: bytes, alphabet: Alphabet) -> bytes:
    """Encode data with no checksum handling."""
    digits_table = alphabet.characters
    zeros = len(data) - len(data.lstrip(b"\x00"))
    number = int.from_bytes(data, "big")
    digits = bytearray()
    while number:
        number, remainder = divmod(number, _BASE)
        digits.append(digits_table[remainder])
    digits.extend(bytes([alphabet.zero]) * zeros)
    digits.reverse()
    return bytes(digits)


class EncodeBuilder:
    """Collects the alphabet and checksum settings for one encoding.

    Each ``with_*`` method returns a new builder; the original is unchanged.
    """

    __slots__ = ("_data", "_alphabet", "_check")

    def __init__(self, data: BytesLike, alphabet: Alphabet = Alphabet.DEFAULT) -> None:
        self._data = _as_bytes(data)
        self._alphabet = alphabet
        self._check = Check.disabled()

    def _replace(self, *, alphabet: Alphabet | None = None, check: Check | None = None) -> EncodeBuilder:
        clone = EncodeBuilder(self._data, alphabet if alphabet is not None else self._alphabet)
        clone._check = check if check is not None else self._check
        return clone

    def with_alphabet(self, alphabet: Alphabet) -> EncodeBuilder:
        """Use the given alphabet for encoding."""
        return self._replace(alphabet=alphabet)

    def with_check(self) -> EncodeBuilder:
        """Append a Base58Check checksum."""
        return self._replace(check=Check.base58check())

    def with_check_version(self, version: int) -> EncodeBuilder:
        """Prefix a version byte and append a Base58Check checksum."""
        return self._replace(check=Check.base58check(version))

    def as_cb58(self, version: int | None = None) -> EncodeBuilder:
        """Append a CB58 checksum, with an optional version byte prefix."""
        return self._replace(check=Check.cb58(version))

    @property
    def max_len(self) -> int:
        """Upper bound on the length of the encoded text."""
        extra = 0
        if self._check.checksum(b""):
            extra = CHECKSUM_LEN + (0 if self._check.version is None else 1)
        return max_encoded_len(len(self._data) + extra)

    def into_bytes(self) -> bytes:
        """Encode into new ASCII bytes."""
        return _encode_raw(self._check.wrap(self._data), self._alphabet)

    def into_string(self) -> str:
        """Encode into a new string."""
        return self.into_bytes().decode("ascii")

    def onto(self, output: bytearray | memoryview) -> int:
        """Write the encoded text into output and return its length.

        A bytearray is extended at its end. A writable memoryview is
        overwritten from its start, leaving bytes past the text untouched;
        BufferTooSmallError is raised if the text does not fit.
        """
        encoded = self.into_bytes()
        if isinstance(output, bytearray):
            output.extend(encoded)
            return len(encoded)
        if isinstance(output, memoryview):
            if output.readonly:
                raise TypeError("cannot encode onto a read-only buffer")
            target = output if output.ndim == 1 and output.format == "B" else output.cast("B")
            if len(encoded) > len(target):
                raise BufferTooSmallError()
            target[: len(encoded)] = encoded
            return len(encoded)
        raise TypeError(f"cannot encode onto {type(output).__name__}")


def encode(data: BytesLike) -> EncodeBuilder:
    """Start encoding data with the default alphabet."""
    return EncodeBuilder(data)