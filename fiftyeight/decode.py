"""Decoding Base58 text into bytes."""

from __future__ import annotations

from typing import Union

from fiftyeight.alphabet import Alphabet
from fiftyeight.check import CHECKSUM_LEN, Check, CheckKind

TextLike = Union[str, bytes, bytearray, memoryview]

_BASE = 58
_ASCII_LIMIT = 128


class DecodeError(ValueError):
    """Raised when Base58 text cannot be decoded."""


class BufferTooSmallError(DecodeError):
    """The output buffer was too small to hold the decoded bytes."""

    def __init__(self) -> None:
        super().__init__(
            "buffer provided to decode base58 encoded string into was too small"
        )


class InvalidCharacterError(DecodeError):
    """The input held a character that is not in the alphabet."""

    def __init__(self, character: str, index: int) -> None:
        self.character = character
        self.index = index
        super().__init__(
            f"provided string contained invalid character {character!r} at byte {index}"
        )


class NonAsciiCharacterError(DecodeError):
    """The input held a character outside of ASCII."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"provided string contained non-ascii character starting at byte {index}"
        )


class InvalidChecksumError(DecodeError):
    """The checksum carried by the input does not match its payload."""

    def __init__(self, checksum: bytes, expected_checksum: bytes) -> None:
        self.checksum = bytes(checksum)
        self.expected_checksum = bytes(expected_checksum)
        super().__init__(
            f"invalid checksum, calculated checksum: '{list(self.checksum)}', "
            f"expected checksum: {list(self.expected_checksum)}"
        )


class InvalidVersionError(DecodeError):
    """The version byte of the payload is not the expected one."""

    def __init__(self, version: int, expected_version: int) -> None:
        self.version = version
        self.expected_version = expected_version
        super().__init__(
            f"invalid version, payload version: '{version}', "
            f"expected version: {expected_version}"
        )


class NoChecksumError(DecodeError):
    """The decoded input is too short to hold a checksum."""

    def __init__(self) -> None:
        super().__init__("provided string is too small to contain a checksum")


def _as_bytes(data: TextLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _byte_length(number: int) -> int:
    return (number.bit_length() + 7) // 8


def _decode_raw(data: bytes, alphabet: Alphabet, capacity: int | None) -> bytes:
    """Decode data with no checksum handling.

    When capacity is given, BufferTooSmallError is raised as soon as the
    decoded value is known not to fit, before later characters are checked.
    """
    number = 0
    for index, byte in enumerate(data):
        if byte >= _ASCII_LIMIT:
            raise NonAsciiCharacterError(index)
        value = alphabet.decode_char(byte)
        if value is None:
            raise InvalidCharacterError(chr(byte), index)
        number = number * _BASE + value
        if capacity is not None and _byte_length(number) > capacity:
            raise BufferTooSmallError()

    zeros = len(data) - len(data.lstrip(bytes([alphabet.zero])))
    body = number.to_bytes(_byte_length(number), "big")
    if capacity is not None and len(body) + zeros > capacity:
        raise BufferTooSmallError()
    return bytes(zeros) + body


def _verify(decoded: bytes, check: Check) -> int:
    """Check the checksum and version of decoded bytes; return the payload length."""
    if check.kind is CheckKind.DISABLED:
        return len(decoded)
    if len(decoded) < CHECKSUM_LEN:
        raise NoChecksumError()
    split = len(decoded) - CHECKSUM_LEN
    payload, given = decoded[:split], decoded[split:]
    calculated = check.checksum(payload)
    if calculated != given:
        raise InvalidChecksumError(calculated, given)
    if check.version is not None and decoded[0] != check.version:
        raise InvalidVersionError(decoded[0], check.version)
    return split


class DecodeBuilder:
    """Collects the alphabet and checksum settings for one decoding.

    Each ``with_*`` method returns a new builder; the original is unchanged.
    """

    __slots__ = ("_data", "_alphabet", "_check")

    def __init__(self, data: TextLike, alphabet: Alphabet = Alphabet.DEFAULT) -> None:
        self._data = _as_bytes(data)
        self._alphabet = alphabet
        self._check = Check.disabled()

    def _replace(
        self, *, alphabet: Alphabet | None = None, check: Check | None = None
    ) -> DecodeBuilder:
        clone = DecodeBuilder(
            self._data, alphabet if alphabet is not None else self._alphabet
        )
        clone._check = check if check is not None else self._check
        return clone

    def with_alphabet(self, alphabet: Alphabet) -> DecodeBuilder:
        """Use the given alphabet for decoding."""
        return self._replace(alphabet=alphabet)

    def with_check(self, expected_version: int | None = None) -> DecodeBuilder:
        """Expect and verify a Base58Check checksum, and optionally a version byte."""
        return self._replace(check=Check.base58check(expected_version))

    def as_cb58(self, expected_version: int | None = None) -> DecodeBuilder:
        """Expect and verify a CB58 checksum, and optionally a version byte."""
        return self._replace(check=Check.cb58(expected_version))

    def _decode(self, capacity: int | None) -> tuple[bytes, int]:
        decoded = _decode_raw(self._data, self._alphabet, capacity)
        return decoded, _verify(decoded, self._check)

    def into_bytes(self) -> bytes:
        """Decode into new bytes; the checksum, if any, is stripped."""
        decoded, length = self._decode(None)
        return decoded[:length]

    def into_array(self, size: int) -> bytes:
        """Decode into exactly `size` bytes, padding with zero bytes at the end."""
        if self._check.kind is not CheckKind.DISABLED:
            raise ValueError("checksums are not supported when decoding into an array")
        if size < 0:
            raise ValueError("size must not be negative")
        decoded, _ = self._decode(size)
        return decoded + bytes(size - len(decoded))

    def onto(self, output: bytearray | memoryview) -> int:
        """Write the decoded bytes into output and return the payload length.

        A bytearray is extended at its end with the payload. A writable
        memoryview is overwritten from its start with everything decoded,
        checksum included, leaving bytes past it untouched;
        BufferTooSmallError is raised if that does not fit.
        """
        if isinstance(output, bytearray):
            decoded, length = self._decode(None)
            output.extend(decoded[:length])
            return length
        if isinstance(output, memoryview):
            if output.readonly:
                raise TypeError("cannot decode onto a read-only buffer")
            target = (
                output if output.ndim == 1 and output.format == "B" else output.cast("B")
            )
            decoded, length = self._decode(len(target))
            target[: len(decoded)] = decoded
            return length
        raise TypeError(f"cannot decode onto {type(output).__name__}")


def decode(data: TextLike) -> DecodeBuilder:
    """Start decoding data with the default alphabet."""
    return DecodeBuilder(data)