"""Text encodings used by PDF fonts and text strings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .cmap import ToUnicodeCMap

logger = logging.getLogger(__name__)

CodedCharacterSet = Sequence[Optional[int]]

_UNIGB_NAMES = (b"UniGB-UCS2-H", b"UniGB-UTF16-H")
_UTF8_BOM = b"\xef\xbb\xbf"
_UTF16BE_BOM = b"\xfe\xff"
_UTF16LE_BOM = b"\xff\xfe"


class CharacterEncodingError(Exception):
    """Text cannot be decoded with the font's encoding."""

    def __init__(self, message: str = "unsupported character encoding") -> None:
        super().__init__(message)


def _utf16_units(text: str) -> list[int]:
    raw = text.encode("utf-16-be", "surrogatepass")
    return [int.from_bytes(raw[k:k + 2], "big") for k in range(0, len(raw), 2)]


def _units_to_bytes(units: Sequence[int]) -> bytes:
    return b"".join((unit & 0xFFFF).to_bytes(2, "big") for unit in units)


def _decode_utf16be(data: bytes) -> str:
    """Decode UTF-16BE with byte order mark sniffing and replacement of bad input."""
    data = bytes(data)
    if data.startswith(_UTF8_BOM):
        return data[3:].decode("utf-8", "replace")
    if data.startswith(_UTF16LE_BOM):
        return data[2:].decode("utf-16-le", "replace")
    if data.startswith(_UTF16BE_BOM):
        data = data[2:]
    return data.decode("utf-16-be", "replace")


def bytes_to_string(encoding: CodedCharacterSet, data: bytes) -> str:
    """Decode single-byte codes through a 256-entry table; unmapped bytes are dropped."""
    units = [encoding[byte] for byte in data if encoding[byte] is not None]
    return _units_to_bytes(units).decode("utf-16-be")


def string_to_bytes(encoding: CodedCharacterSet, text: str) -> bytes:
    """Encode text through a 256-entry table; characters it lacks are dropped."""
    positions: dict[int, int] = {}
    for index, unit in enumerate(encoding):
        if unit is not None:
            positions.setdefault(unit, index)
    return bytes(positions[unit] for unit in _utf16_units(text) if unit in positions)


def encode_utf16_be(text: str) -> bytes:
    """Encode text as UTF-16BE with a byte order mark, the widely supported form."""
    return _UTF16BE_BOM + text.encode("utf-16-be")


def encode_utf8(text: str) -> bytes:
    """Encode text as UTF-8 with a byte order mark (PDF 2.0 only; poorly supported)."""
    return _UTF8_BOM + text.encode("utf-8")


@dataclass
class OneByteEncoding:
    """A simple font encoding given as a table of 256 optional UTF-16 units."""

    table: CodedCharacterSet

    def bytes_to_string(self, data: bytes) -> str:
        return bytes_to_string(self.table, data)

    def string_to_bytes(self, text: str) -> bytes:
        return string_to_bytes(self.table, text)


@dataclass
class SimpleEncoding:
    """An encoding known only by name; only the UniGB UCS-2/UTF-16 names decode."""

    name: bytes

    def bytes_to_string(self, data: bytes) -> str:
        if self.name in _UNIGB_NAMES:
            return _decode_utf16be(data)
        raise CharacterEncodingError()

    def string_to_bytes(self, text: str) -> bytes:
        if self.name in _UNIGB_NAMES:
            return encode_utf16_be(text)
        logger.debug("Unknown encoding %r used to encode text", self.name)
        return text.encode("utf-8")


@dataclass
class UnicodeMapEncoding:
    """An encoding defined by a ToUnicode CMap with codes of 1 to 4 bytes."""

    cmap: ToUnicodeCMap

    def bytes_to_string(self, data: bytes) -> str:
        units: list[int] = []
        code = 0
        code_len = 0
        for byte in data:
            if code_len == 4:
                units.extend(self.cmap.get_or_replacement_char(code, 4))
                code = code_len = 0
            code_len += 1
            code = code * 256 + byte
            mapped = self.cmap.get(code, code_len)
            if mapped is not None:
                units.extend(mapped)
                code = code_len = 0
        if code_len > 0:
            units.extend(self.cmap.get_or_replacement_char(code, code_len))
        return _decode_utf16be(_units_to_bytes(units))

    def string_to_bytes(self, text: str) -> bytes:
        result = bytearray()
        for char in text:
            sequence = _utf16_units(char)
            entries = self.cmap.get_source_codes_for_unicode(sequence)
            if entries is None:
                logger.warning("Unicode sequence %s not found in ToUnicode CMap, skipping.", sequence)
                continue
            if not entries:
                logger.warning("Unicode sequence %s found in map but no entries, skipping.", sequence)
                continue
            entry = entries[0]
            if 1 <= entry.code_len <= 4:
                mask = (1 << (8 * entry.code_len)) - 1
                result += (entry.source_code & mask).to_bytes(entry.code_len, "big")
        return bytes(result)