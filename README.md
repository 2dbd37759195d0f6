# fiftyeight

Base58 encoding and decoding for Python. It offers:

- the Bitcoin, Monero, Ripple and Flickr alphabets, plus custom alphabets;
- Base58Check and CB58 checksums, each with an optional version byte;
- encoding or decoding into an existing `bytearray` or a writable `memoryview`;
- a small command-line tool.

It has no dependencies outside the standard library.

## Installation

```
pip install fiftyeight
```

## Encoding

```python
from fiftyeight.encode import encode

encode(bytes([0x04, 0x30, 0x5e, 0x2b, 0x24, 0x73, 0xf0, 0x58])).into_string()
# 'he11owor1d'
```

`encode(data)` takes `bytes`, `bytearray`, `memoryview`, an iterable of ints, or a `str`, which
it encodes as UTF-8. It returns an `EncodeBuilder` that uses `Alphabet.DEFAULT`, which is the
Bitcoin alphabet. Each `with_*` method returns a new builder and leaves the original unchanged.

- `with_alphabet(alphabet)` sets the alphabet:

  ```python
  from fiftyeight.alphabet import Alphabet

  encode(bytes([0x60, 0x65, 0xe7, 0x9b, 0xba, 0x2f, 0x78])).with_alphabet(Alphabet.RIPPLE).into_string()
  # 'he11owor1d'
  ```

- `with_check()` appends a Base58Check checksum.
- `with_check_version(version)` puts the version byte first and then appends a Base58Check
  checksum.
- `as_cb58(version=None)` appends a CB58 checksum. If a version byte is given, it goes first.

The encoded result can be obtained in three ways:

- `into_string()` returns a `str`.
- `into_bytes()` returns ASCII `bytes`.
- `onto(output)` writes the text and returns its length. If `output` is a `bytearray`, the text is
  appended to it. If `output` is a writable `memoryview`, the text is written from its start and
  the bytes past the text are left untouched. A `memoryview` that is too short raises
  `fiftyeight.encode.BufferTooSmallError`, a subclass of `EncodeError`.

`max_len` on a builder, and the function `max_encoded_len(length)`, give an upper bound on the
encoded length.

## Decoding

```python
from fiftyeight.decode import decode

decode("he11owor1d").into_bytes()
# b'\x040^+$s\xf0X'
```

`decode(data)` takes a `str` or bytes-like object and returns a `DecodeBuilder`. Its options are:

- `with_alphabet(alphabet)` sets the alphabet.
- `with_check(expected_version=None)` expects a Base58Check checksum.
- `as_cb58(expected_version=None)` expects a CB58 checksum.

With a checksum option, the checksum is verified. If `expected_version` is given, the first
decoded byte is compared with it.

The decoded result can be obtained in three ways:

- `into_bytes()` returns the payload, with any checksum removed.
- `into_array(size)` returns exactly `size` bytes, padded with zero bytes at the end. It raises
  `BufferTooSmallError` if the decoded data does not fit. It raises `ValueError` if a checksum
  option is set.
- `onto(output)` returns the payload length. If `output` is a `bytearray`, the payload is
  appended to it. If `output` is a writable `memoryview`, all decoded bytes are written from its
  start, checksum included, and the bytes past them are left untouched.

All errors derive from `fiftyeight.decode.DecodeError`, which is a subclass of `ValueError`:

- `InvalidCharacterError` has the attributes `character` and `index`.
- `NonAsciiCharacterError` has the attribute `index`.
- `BufferTooSmallError`.
- `InvalidChecksumError` has the attributes `checksum` and `expected_checksum`.
- `InvalidVersionError` has the attributes `version` and `expected_version`.
- `NoChecksumError`.

## Alphabets

`fiftyeight.alphabet.Alphabet` has the built-in alphabets `BITCOIN`, `MONERO`, `RIPPLE` and
`FLICKR`. `DEFAULT` is the same as `BITCOIN`.

`Alphabet(base)` builds a custom alphabet from 58 ASCII characters, given as `str` or `bytes`. It
raises one of these errors, all subclasses of `AlphabetError`, which is a `ValueError`:

- `DuplicateCharacterError`, with the attributes `character`, `first` and `second`, if a
  character appears twice.
- `NonAsciiCharacterError`, with the attribute `index`, if a character is not ASCII.
- `AlphabetError` itself, if the length is wrong.

An `Alphabet` also offers `characters`, `zero`, `encode_digit(value)` and `decode_char(byte)`.

## Checksums

`fiftyeight.check` contains the checksum functions and classes:

- `base58check_checksum(payload)` returns the first 4 bytes of a double SHA-256.
- `cb58_checksum(payload)` returns the last 4 bytes of a single SHA-256.
- `Check` is built with `Check.disabled()`, `Check.base58check(version)` or
  `Check.cb58(version)`. Its `wrap(data)` method puts the version byte first and appends the
  checksum.

## Command line

The `fiftyeight` command reads all of standard input and writes the result to standard output.
By default it encodes. With `-d` / `--decode` it decodes instead, after trailing whitespace is
stripped from the input.

```
echo -n hello | fiftyeight
fiftyeight --decode < encoded.txt
fiftyeight -a ripple < data.bin
fiftyeight -a 'custom(123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz)' < data.bin
```

`-a` / `--alphabet` takes one of these values:

- `bitcoin`, the default.
- `monero`.
- `ripple`.
- `flickr`.
- `custom(...)`, with exactly 58 distinct ASCII characters inside the parentheses.

`-V` / `--version` prints the tool's version.

If the input cannot be decoded, the command prints `Error: ...` to standard error and exits with
status 1. An unknown alphabet is reported as a usage error.

The command has no options for checksums. Base58Check and CB58 are available only through the
library.