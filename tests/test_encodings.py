import pytest

from pdfcrypt.cmap import BfCharSection, ToUnicodeCMap, UTF16CodePoint
from pdfcrypt.encodings import (
    CharacterEncodingError,
    OneByteEncoding,
    SimpleEncoding,
    UnicodeMapEncoding,
    bytes_to_string,
    encode_utf16_be,
    encode_utf8,
    string_to_bytes,
)


def _table():
    table = [None] * 256
    table[0x41] = 0x41
    table[0x80] = 0x20AC
    table[0x90] = 0x41
    return table


def _hi_cmap():
    return ToUnicodeCMap.from_sections(
        [BfCharSection((((0x01, 2), [0x48]), ((0x02, 2), [0x69])))]
    )


def test_unicode_with_2byte_code_does_not_convert_single_bytes():
    cmap = ToUnicodeCMap()
    cmap.put(0x0000, 0x0002, 2, UTF16CodePoint(0))
    cmap.put(0x0024, 0x0025, 2, UTF16CodePoint(0))
    assert UnicodeMapEncoding(cmap).bytes_to_string(b"\x00\x24") == "\u0024"


def test_one_byte_table_decodes_and_drops_unmapped():
    assert bytes_to_string(_table(), b"A\x80\x00") == "A\u20ac"


def test_one_byte_table_encodes_first_position():
    assert string_to_bytes(_table(), "A\u20acx") == b"A\x80"


def test_one_byte_encoding_round_trip():
    encoding = OneByteEncoding(_table())
    assert encoding.bytes_to_string(encoding.string_to_bytes("A\u20acA")) == "A\u20acA"


def test_encode_utf16_be_has_bom():
    assert encode_utf16_be("Ab") == b"\xfe\xff\x00A\x00b"


def test_encode_utf16_be_surrogate_pair():
    assert encode_utf16_be("\U0001F600") == b"\xfe\xff\xd8\x3d\xde\x00"


def test_encode_utf8_has_bom():
    assert encode_utf8("\u00e9") == b"\xef\xbb\xbf\xc3\xa9"


def test_unigb_round_trip():
    encoding = SimpleEncoding(b"UniGB-UCS2-H")
    data = encoding.string_to_bytes("\u4e2d\u6587")
    assert data == b"\xfe\xff\x4e\x2d\x65\x87"
    assert encoding.bytes_to_string(data) == "\u4e2d\u6587"


def test_unigb_decodes_without_bom():
    assert SimpleEncoding(b"UniGB-UTF16-H").bytes_to_string(b"\x00H\x00i") == "Hi"


def test_unknown_simple_encoding_cannot_decode():
    with pytest.raises(CharacterEncodingError):
        SimpleEncoding(b"Custom").bytes_to_string(b"abc")


def test_unknown_simple_encoding_encodes_utf8():
    assert SimpleEncoding(b"Custom").string_to_bytes("h\u00e9") == b"h\xc3\xa9"


def test_unicode_map_round_trip():
    encoding = UnicodeMapEncoding(_hi_cmap())
    data = encoding.string_to_bytes("Hi")
    assert data == b"\x00\x01\x00\x02"
    assert encoding.bytes_to_string(data) == "Hi"


def test_unicode_map_skips_unmapped_characters():
    assert UnicodeMapEncoding(_hi_cmap()).string_to_bytes("H?") == b"\x00\x01"


def test_unicode_map_leftover_byte_is_replacement():
    assert UnicodeMapEncoding(_hi_cmap()).bytes_to_string(b"\x00") == "\ufffd"


def test_unicode_map_flushes_after_four_bytes():
    encoding = UnicodeMapEncoding(ToUnicodeCMap())
    assert encoding.bytes_to_string(b"\x01\x02\x03\x04\x05") == "\ufffd\ufffd"