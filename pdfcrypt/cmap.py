"""ToUnicode character maps: source codes of 1 to 4 bytes mapped to UTF-16 units."""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

SourceCode = int
CodeLen = int

_MAX_CODE_LEN = 4


def _as_units(values: Iterable[int]) -> Tuple[int, ...]:
    return tuple(int(value) & 0xFFFF for value in values)


@dataclass(frozen=True)
class HexString:
    """A sequence of UTF-16 units; the last unit grows with the source code."""

    values: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _as_units(self.values))


@dataclass(frozen=True)
class UTF16CodePoint:
    """A single UTF-16 unit stored as an offset from the source code."""

    offset: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "offset", int(self.offset) & 0xFFFFFFFF)


@dataclass(frozen=True)
class ArrayOfHexStrings:
    """One UTF-16 sequence for each source code of a range, in order."""

    values: Tuple[Tuple[int, ...], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(_as_units(item) for item in self.values))


BfRangeTarget = Union[HexString, UTF16CodePoint, ArrayOfHexStrings]


@dataclass(frozen=True)
class ReverseCMapEntry:
    """A source code and its length in bytes that produce a Unicode sequence."""

    source_code: SourceCode
    code_len: CodeLen


@dataclass(frozen=True)
class CodeSpaceRange:
    """A codespacerange section: ((low, high, code_len), ...)."""

    ranges: Tuple[Tuple[SourceCode, SourceCode, CodeLen], ...] = ()


@dataclass(frozen=True)
class BfCharSection:
    """A bfchar section: (((code, code_len), utf16_units), ...)."""

    mappings: Tuple[Tuple[Tuple[SourceCode, CodeLen], Sequence[int]], ...] = ()


@dataclass(frozen=True)
class BfRangeSection:
    """A bfrange section: (((start, end, code_len), [utf16_units, ...]), ...)."""

    mappings: Tuple[
        Tuple[Tuple[SourceCode, SourceCode, CodeLen], Sequence[Sequence[int]]], ...
    ] = ()


CMapSection = Union[CodeSpaceRange, BfCharSection, BfRangeSection]


class UnicodeCMapError(Exception):
    """A ToUnicode CMap could not be built."""


class InvalidCodeRangeError(UnicodeCMapError):
    """A code range is empty, reversed or has no target."""

    def __init__(self, message: str = "invalid code range") -> None:
        super().__init__(message)


class _RangeMap:
    """Inclusive, non-overlapping ranges of ints; touching equal values coalesce."""

    def __init__(self) -> None:
        self._entries: list[Tuple[int, int, BfRangeTarget]] = []
        self._starts: list[int] = []

    def insert(self, start: int, end: int, value: BfRangeTarget) -> None:
        if end < start:
            raise InvalidCodeRangeError()
        new_start, new_end = start, end
        kept: list[Tuple[int, int, BfRangeTarget]] = []
        for lo, hi, current in self._entries:
            if hi < start - 1 or lo > end + 1:
                kept.append((lo, hi, current))
            elif current == value:
                new_start = min(new_start, lo)
                new_end = max(new_end, hi)
            elif hi < start or lo > end:
                kept.append((lo, hi, current))
            else:
                if lo < start:
                    kept.append((lo, start - 1, current))
                if hi > end:
                    kept.append((end + 1, hi, current))
        kept.append((new_start, new_end, value))
        kept.sort(key=lambda entry: entry[0])
        self._entries = kept
        self._starts = [entry[0] for entry in kept]

    def get_key_value(self, key: int) -> Tuple[int, int, BfRangeTarget] | None:
        index = bisect.bisect_right(self._starts, key) - 1
        if index < 0:
            return None
        entry = self._entries[index]
        return entry if entry[1] >= key else None

    def __iter__(self) -> Iterator[Tuple[int, int, BfRangeTarget]]:
        return iter(self._entries)


def _valid_code_len(code_len: CodeLen) -> bool:
    return 1 <= code_len <= _MAX_CODE_LEN


class ToUnicodeCMap:
    """Maps source codes to UTF-16 sequences, keeping codes of different lengths apart."""

    REPLACEMENT_CHAR = 0xFFFD

    def __init__(self) -> None:
        self._maps = [_RangeMap() for _ in range(_MAX_CODE_LEN)]
        self._reverse_map: dict[Tuple[int, ...], list[ReverseCMapEntry]] | None = None

    @classmethod
    def from_sections(cls, sections: Iterable[CMapSection]) -> "ToUnicodeCMap":
        """Build a map from parsed CMap sections, including the reverse lookup table."""
        cmap = cls()
        for section in sections:
            if isinstance(section, BfCharSection):
                for (code, code_len), dst in section.mappings:
                    cmap.put_char(code, code_len, dst)
            elif isinstance(section, BfRangeSection):
                for (start, end, code_len), dst_list in section.mappings:
                    if end < start:
                        raise InvalidCodeRangeError()
                    dst_list = [list(dst) for dst in dst_list]
                    if not dst_list:
                        raise InvalidCodeRangeError()
                    if len(dst_list) == 1 and len(dst_list[0]) == 1:
                        target: BfRangeTarget = UTF16CodePoint((dst_list[0][0] - start) & 0xFFFFFFFF)
                    elif len(dst_list) == 1:
                        target = HexString(dst_list[0])
                    else:
                        target = ArrayOfHexStrings(dst_list)
                    cmap.put(start, end, code_len, target)
        cmap._reverse_map = cmap._build_reverse_map()
        return cmap

    def _build_reverse_map(self) -> dict[Tuple[int, ...], list[ReverseCMapEntry]]:
        reverse: dict[Tuple[int, ...], list[ReverseCMapEntry]] = {}
        for code_len, range_map in enumerate(self._maps, start=1):
            for start, end, target in range_map:
                for src_code in range(start, end + 1):
                    sequence = self._reverse_sequence(target, start, src_code)
                    if sequence:
                        reverse.setdefault(sequence, []).append(ReverseCMapEntry(src_code, code_len))
        return reverse

    @staticmethod
    def _reverse_sequence(target: BfRangeTarget, start: int, src_code: int) -> Tuple[int, ...] | None:
        if isinstance(target, UTF16CodePoint):
            return (((src_code + target.offset) & 0xFFFFFFFF) & 0xFFFF,)
        if isinstance(target, HexString):
            if src_code == start:
                return target.values
            if not target.values:
                return None
            *head, last = target.values
            return (*head, (last + src_code - start) & 0xFFFF)
        index = src_code - start
        if index < len(target.values):
            return target.values[index]
        return None

    def get(self, code: SourceCode, code_len: CodeLen) -> list[int] | None:
        """Return the UTF-16 units for ``code`` of ``code_len`` bytes, or None."""
        if not _valid_code_len(code_len):
            logger.error("Code length should be between 1 and 4 bytes, got %s", code_len)
            return None
        found = self._maps[code_len - 1].get_key_value(code)
        if found is None:
            return None
        start, _, target = found
        if isinstance(target, HexString):
            units = list(target.values)
            units[-1] = (units[-1] + code - start) & 0xFFFF
            return units
        if isinstance(target, UTF16CodePoint):
            return [((code + target.offset) & 0xFFFFFFFF) & 0xFFFF]
        return list(target.values[code - start])

    def get_or_replacement_char(self, code: SourceCode, code_len: CodeLen) -> list[int]:
        """Like get, but U+FFFD when the code is not mapped."""
        units = self.get(code, code_len)
        return units if units is not None else [self.REPLACEMENT_CHAR]

    def put(
        self,
        src_code_lo: SourceCode,
        src_code_hi: SourceCode,
        code_len: CodeLen,
        target: BfRangeTarget,
    ) -> None:
        """Map the inclusive range of codes to ``target``; bad lengths are ignored."""
        if not _valid_code_len(code_len):
            logger.error("Code length should be between 1 and 4 bytes, got %s, ignoring", code_len)
            return
        self._maps[code_len - 1].insert(src_code_lo, src_code_hi, target)

    def put_char(self, code: SourceCode, code_len: CodeLen, dst: Sequence[int]) -> None:
        """Map a single code to a UTF-16 sequence."""
        dst = list(dst)
        if len(dst) == 1:
            target: BfRangeTarget = UTF16CodePoint((dst[0] - code) & 0xFFFFFFFF)
        else:
            target = HexString(dst)
        self.put(code, code, code_len, target)

    def get_source_codes_for_unicode(
        self, unicode_sequence: Sequence[int]
    ) -> Tuple[ReverseCMapEntry, ...] | None:
        """Source codes producing ``unicode_sequence``; only maps built from sections have them."""
        if self._reverse_map is None:
            return None
        entries = self._reverse_map.get(tuple(unicode_sequence))
        return tuple(entries) if entries is not None else None