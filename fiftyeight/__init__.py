"""Base58 encoding and decoding with configurable alphabets, Base58Check and CB58 checksums."""

__version__ = "0.5.1"
__all__ = ["alphabet", "check", "encode", "decode", "cli"]