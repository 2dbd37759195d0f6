"""Checksum schemes that may wrap a Base58 payload."""

from __future__ import annotations

import enum
import hashlib
from dataclasses import dataclass

CHECKSUM_LEN = 4


def base58check_checksum(payload: bytes) -> bytes:
    """First four bytes of the double SHA-256 of the payload (Base58Check)."""
    return hashlib.sha256(hashlib.sha256(payload).digest()).digest()[:CHECKSUM_LEN]


def cb58_checksum(payload: bytes) -> bytes:
    """Last four bytes of the SHA-256 of the payload (CB58)."""
    return hashlib.sha256(payload).digest()[-CHECKSUM_LEN:]


class CheckKind(enum.Enum):
    """Which checksum scheme, if any, is in use."""

    DISABLED = "disabled"
    BASE58CHECK = "base58check"
    CB58 = "cb58"


def _validate_version(version: int | None) -> None:
    if version is not None and not 0 <= version <= 0xFF:
        raise ValueError(f"version {version} does not fit in a byte")


@dataclass(frozen=True)
class Check:
    """A checksum scheme together with an optional version byte."""

    kind: CheckKind = CheckKind.DISABLED
    version: int | None = None

    def __post_init__(self) -> None:
        _validate_version(self.version)
        if self.kind is CheckKind.DISABLED and self.version is not None:
            raise ValueError("a version byte needs a checksum scheme")

    @staticmethod
    def disabled() -> Check:
        """No checksum and no version byte."""
        return Check(CheckKind.DISABLED)

    @staticmethod
    def base58check(version: int | None = None) -> Check:
        """Base58Check, with an optional version byte."""
        return Check(CheckKind.BASE58CHECK, version)

    @staticmethod
    def cb58(version: int | None = None) -> Check:
        """CB58, with an optional version byte."""
        return Check(CheckKind.CB58, version)

    def checksum(self, payload: bytes) -> bytes:
        """Checksum of payload under this scheme; empty when disabled."""
        if self.kind is CheckKind.BASE58CHECK:
            return base58check_checksum(payload)
        if self.kind is CheckKind.CB58:
            return cb58_checksum(payload)
        return b""

    def wrap(self, data: bytes) -> bytes:
        """Prefix the version byte, if any, and append the checksum."""
        body = bytes(data) if self.version is None else bytes([self.version]) + bytes(data)
        return body + self.checksum(body)