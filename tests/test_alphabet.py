import pytest
from hypothesis import given
from hypothesis import strategies as st

from fiftyeight.alphabet import (
    Alphabet,
    AlphabetError,
    DuplicateCharacterError,
    NonAsciiCharacterError,
)

BITCOIN_CHARS = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
CUSTOM_CHARS = " !\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXY"


def test_duplicate_character():
    with pytest.raises(DuplicateCharacterError) as info:
        Alphabet(b"a" * 58)
    assert (info.value.character, info.value.first, info.value.second) == ("a", 0, 1)
    assert str(info.value) == (
        "alphabet contained a duplicate character `a` at indexes 0 and 1"
    )


def test_non_ascii_character():
    alpha = bytearray(b"a" * 58)
    alpha[1] = 255
    with pytest.raises(NonAsciiCharacterError) as info:
        Alphabet(bytes(alpha))
    assert info.value.index == 1
    assert str(info.value) == "alphabet contained a non-ascii character at 1"


def test_non_ascii_in_text():
    text = "é" + BITCOIN_CHARS[1:]
    with pytest.raises(NonAsciiCharacterError) as info:
        Alphabet(text)
    assert info.value.index == 0


def test_duplicate_is_an_alphabet_error():
    with pytest.raises(AlphabetError):
        Alphabet(b"a" * 58)


@pytest.mark.parametrize("length", [0, 57, 59])
def test_wrong_length(length):
    with pytest.raises(AlphabetError):
        Alphabet(b"x" * length)


def test_custom_alphabet_accepted():
    alpha = Alphabet(CUSTOM_CHARS)
    assert alpha.characters == CUSTOM_CHARS.encode()
    assert alpha.zero == ord(" ")


def test_bitcoin_lookup():
    alpha = Alphabet.BITCOIN
    assert alpha.decode_char(ord("1")) == 0
    assert alpha.decode_char(ord("z")) == 57
    assert alpha.encode_digit(57) == ord("z")
    assert alpha.encode_digit(0) == ord("1")


@pytest.mark.parametrize("char", ["0", "O", "I", "l", "!", " "])
def test_bitcoin_rejects_characters(char):
    assert Alphabet.BITCOIN.decode_char(ord(char)) is None


def test_decode_char_outside_ascii():
    assert Alphabet.BITCOIN.decode_char(200) is None
    assert Alphabet.BITCOIN.decode_char(-1) is None


@pytest.mark.parametrize("value", [-1, 58, 100])
def test_encode_digit_out_of_range(value):
    with pytest.raises(ValueError):
        Alphabet.BITCOIN.encode_digit(value)


def test_builtin_alphabets():
    assert Alphabet.DEFAULT == Alphabet.BITCOIN
    assert Alphabet.MONERO == Alphabet.BITCOIN
    assert Alphabet.RIPPLE.zero == ord("r")
    assert Alphabet.FLICKR.characters.startswith(b"123456789abc")
    assert Alphabet.RIPPLE != Alphabet.FLICKR


def test_repr():
    assert repr(Alphabet(BITCOIN_CHARS)) == f"Alphabet({BITCOIN_CHARS!r})"
    assert repr(Alphabet(CUSTOM_CHARS)) == f"Alphabet({CUSTOM_CHARS!r})"


def test_equal_alphabets_hash_alike():
    assert hash(Alphabet(BITCOIN_CHARS)) == hash(Alphabet.BITCOIN)
    assert {Alphabet(BITCOIN_CHARS), Alphabet.BITCOIN} == {Alphabet.BITCOIN}


@given(st.permutations(BITCOIN_CHARS))
def test_permutation_round_trip(chars):
    alpha = Alphabet("".join(chars))
    for value in range(58):
        assert alpha.decode_char(alpha.encode_digit(value)) == value