# pdfcrypt

Building blocks for the PDF standard security handler and for PDF text encodings.

## What it offers

- `pdfcrypt.rc4.Rc4` — the RC4 stream cipher. Keys of 1 to 256 bytes (or a
  `str`, taken as UTF-8); `encrypt` and `decrypt` are the same operation, and
  `apply_keystream` XORs bytes with the keystream.
- `pdfcrypt.pkcs5.pad` / `unpad` — PKCS#5 padding for blocks of up to 16 bytes
  (16 by default). `unpad` raises `PaddingError` on malformed padding.
- `pdfcrypt.crypt_filters` — the crypt filters a PDF may name:
  `IdentityCryptFilter` (`Identity`), `Rc4CryptFilter` (`V2`),
  `Aes128CryptFilter` (`AESV2`) and `Aes256CryptFilter` (`AESV3`). Each has a
  `method` name, derives a per-object key with `compute_key(key, obj_id)` and
  offers `encrypt(key, plaintext)` / `decrypt(key, ciphertext)`. The AES filters
  use CBC mode with a random 16-byte IV placed in front of the ciphertext and
  PKCS#5 padding; they raise `InvalidKeyLengthError` for a key of the wrong size
  and `InvalidCipherTextLengthError` for ciphertext that is not whole blocks.
- `pdfcrypt.permissions.Permissions` — the document permission flags as an
  `IntFlag`. `Permissions.default()` grants everything; `correct_bits()` sets the
  reserved bits and extends the value to 64 bits the way the `/P` entry requires.
- `pdfcrypt.cmap.ToUnicodeCMap` — ToUnicode character maps for source codes of
  1 to 4 bytes, kept apart by length. Ranges are added with `put` (targets
  `HexString`, `UTF16CodePoint` or `ArrayOfHexStrings`) or `put_char`, and looked
  up with `get` / `get_or_replacement_char` (U+FFFD when unmapped).
  `ToUnicodeCMap.from_sections` builds a map from already parsed
  `CodeSpaceRange`, `BfCharSection` and `BfRangeSection` values and also the
  reverse table used by `get_source_codes_for_unicode`.
- `pdfcrypt.encodings` — `OneByteEncoding` (a 256-entry table),
  `SimpleEncoding` (only `UniGB-UCS2-H` and `UniGB-UTF16-H` decode; other names
  raise `CharacterEncodingError`) and `UnicodeMapEncoding` (driven by a
  `ToUnicodeCMap`), plus `bytes_to_string`, `string_to_bytes`,
  `encode_utf16_be` and `encode_utf8` for PDF text strings.

Errors derive from `pdfcrypt.errors.DecryptionError` (`InvalidKeyLengthError`,
`InvalidCipherTextLengthError`, `PaddingError`), from
`pdfcrypt.cmap.UnicodeCMapError` (`InvalidCodeRangeError`) and
`pdfcrypt.encodings.CharacterEncodingError`.

## Installation

    pip install pdfcrypt

## Examples

Encrypting a string for object 12, generation 0, with AES-128:

    from pdfcrypt.crypt_filters import Aes128CryptFilter

    crypt_filter = Aes128CryptFilter()
    file_key = bytes(16)
    object_key = crypt_filter.compute_key(file_key, (12, 0))
    ciphertext = crypt_filter.encrypt(object_key, b"Hello")
    assert crypt_filter.decrypt(object_key, ciphertext) == b"Hello"

RC4:

    from pdfcrypt.rc4 import Rc4

    cipher = Rc4(b"secret")
    assert cipher.decrypt(cipher.encrypt(b"pedia")) == b"pedia"

Decoding text through a ToUnicode CMap:

    from pdfcrypt.cmap import ToUnicodeCMap
    from pdfcrypt.encodings import UnicodeMapEncoding

    cmap = ToUnicodeCMap()
    cmap.put_char(0x0024, 2, [0x0024])
    assert UnicodeMapEncoding(cmap).bytes_to_string(b"\x00\x24") == "$"

Encoding text back to codes needs the reverse table, so build the map from
sections:

    from pdfcrypt.cmap import BfCharSection, ToUnicodeCMap
    from pdfcrypt.encodings import UnicodeMapEncoding

    cmap = ToUnicodeCMap.from_sections([BfCharSection((((0x0024, 2), [0x0024]),))])
    assert UnicodeMapEncoding(cmap).string_to_bytes("$") == b"\x00\x24"

Permissions:

    from pdfcrypt.permissions import Permissions

    flags = Permissions.PRINTABLE | Permissions.COPYABLE
    p_value = int(flags.correct_bits())

## What it does not do

This is a library of primitives. It does not read or write PDF files, build or
interpret `/Encrypt` dictionaries, compute file encryption keys from
passwords, or walk a document's objects to encrypt or decrypt them. It does
not parse CMap program text either: `ToUnicodeCMap.from_sections` takes
sections that have already been parsed. There is no command-line tool.

## Running the tests

    pip install -e ".[test]"
    pytest