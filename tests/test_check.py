import pytest
from hypothesis import given
from hypothesis import strategies as st

from fiftyeight.check import (
    CHECKSUM_LEN,
    Check,
    CheckKind,
    base58check_checksum,
    cb58_checksum,
)


def test_base58check_checksum_of_empty():
    assert base58check_checksum(b"") == bytes.fromhex("5df6e0e2")


def test_base58check_checksum_of_abc():
    assert base58check_checksum(b"abc") == bytes.fromhex("4f8b42c2")


def test_cb58_checksum_of_empty():
    assert cb58_checksum(b"") == bytes.fromhex("7852b855")


def test_cb58_checksum_of_abc():
    assert cb58_checksum(b"abc") == bytes.fromhex("f20015ad")


def test_constructors():
    assert Check.disabled() == Check(CheckKind.DISABLED, None)
    assert Check.base58check(42) == Check(CheckKind.BASE58CHECK, 42)
    assert Check.cb58(None) == Check(CheckKind.CB58, None)


def test_disabled_checksum_is_empty():
    assert Check.disabled().checksum(b"anything") == b""
    assert Check.disabled().wrap(b"\x01\x02") == b"\x01\x02"


def test_wrap_empty_base58check():
    assert Check.base58check().wrap(b"") == bytes.fromhex("5df6e0e2")


def test_wrap_with_version_prefixes_and_checksums():
    wrapped = Check.base58check(0x61).wrap(b"bc")
    assert wrapped == b"abc" + bytes.fromhex("4f8b42c2")


def test_wrap_cb58_with_version():
    assert Check.cb58(0x61).wrap(b"bc") == b"abc" + bytes.fromhex("f20015ad")


@pytest.mark.parametrize("version", [-1, 256, 1000])
def test_version_must_fit_in_byte(version):
    with pytest.raises(ValueError):
        Check.base58check(version)


def test_version_needs_scheme():
    with pytest.raises(ValueError):
        Check(CheckKind.DISABLED, 3)


@given(st.binary(max_size=64), st.one_of(st.none(), st.integers(0, 255)))
def test_wrap_structure(data, version):
    for check in (Check.base58check(version), Check.cb58(version)):
        wrapped = check.wrap(data)
        prefix = b"" if version is None else bytes([version])
        assert len(wrapped) == len(prefix) + len(data) + CHECKSUM_LEN
        body = wrapped[:-CHECKSUM_LEN]
        assert body == prefix + data
        assert wrapped[-CHECKSUM_LEN:] == check.checksum(body)


@given(st.binary(max_size=64))
def test_versioned_wrap_matches_unversioned_on_prefixed_data(data):
    assert Check.base58check(7).wrap(data) == Check.base58check().wrap(b"\x07" + data)
    assert Check.cb58(7).wrap(data) == Check.cb58().wrap(b"\x07" + data)