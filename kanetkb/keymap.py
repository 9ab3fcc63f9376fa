"""The key matrix of the keyboard and the sorting of pressed keys by kind."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

MATRIX_LINES = 17
LINE_WIDTH = 8
MAX_PRESSED = 8
MAX_VENDOR_KEYS = 4

# Codes sent on the vendor endpoint for the keys that have no HID usage.
LANG = 1
QC = 2
N1 = 3
N2 = 4
N3 = 5
N4 = 6
N5 = 7

SHIFT = 0x40  # right Alt modifier bit, used for the second-level characters


class KeyKind(IntEnum):
    """Where a key's code is reported."""

    NONE = 0
    CHAR = 1
    MODIFIER = 2
    VENDOR = 3


@dataclass(frozen=True)
class KeyEntry:
    """One position of the matrix: a key code, its modifier bits and its kind."""

    key_code: int = 0
    modifier: int = 0
    kind: KeyKind = KeyKind.NONE


@dataclass
class SortedKeys:
    """Pressed keys split by the report they belong to."""

    chars: list[KeyEntry] = field(default_factory=list)
    modifiers: list[KeyEntry] = field(default_factory=list)
    vendor: list[KeyEntry] = field(default_factory=list)


def _row(*cells: tuple[int, int, KeyKind]) -> tuple[KeyEntry, ...]:
    return tuple(KeyEntry(code, mod, kind) for code, mod, kind in cells)


_C = KeyKind.CHAR
_M = KeyKind.MODIFIER
_V = KeyKind.VENDOR
_N = KeyKind.NONE

CODE_CHART: tuple[tuple[KeyEntry, ...], ...] = (
    _row((0x3E, 0x00, _C), (0x3F, 0x00, _C), (0x40, 0x00, _C), (0x41, 0x00, _C),
         (0x42, 0x00, _C), (0x43, 0x00, _C), (0x44, 0x00, _C), (0x45, 0x00, _C)),
    _row((0x21, 0x00, _C), (0x1E, 0x00, _C), (0x1F, 0x00, _C), (0x20, 0x00, _C),
         (0x22, 0x00, _C), (0x23, 0x00, _C), (0x24, 0x00, _C), (0x25, 0x00, _C)),
    _row((0x18, 0x40, _C), (0x15, 0x40, _C), (0x17, 0x40, _C), (0x1C, 0x40, _C),
         (0x0C, 0x40, _C), (0x14, 0x40, _C), (0x1A, 0x40, _C), (0x08, 0x40, _C)),
    _row((0x35, 0x00, _C), (0x39, 0x00, _C), (0x2B, 0x00, _C), (0x29, 0x00, _C),
         (0x3A, 0x00, _C), (0x3B, 0x00, _C), (0x3C, 0x00, _C), (0x3D, 0x00, _C)),
    _row((0x26, 0x00, _C), (0x27, 0x00, _C), (0x2D, 0x00, _C), (0x2E, 0x00, _C),
         (N5, 0x00, _V), (N4, 0x00, _V), (N3, 0x00, _V), (LANG, 0x00, _V)),
    _row((0x00, 0x00, _N), (QC, 0x00, _V), (0x49, 0x00, _C), (0x4A, 0x00, _C),
         (0x4B, 0x00, _C), (0x4E, 0x00, _C), (0x4D, 0x00, _C), (0x4C, 0x00, _C)),
    _row((0x16, 0x40, _C), (0x07, 0x40, _C), (0x31, 0x00, _C), (N2, 0x00, _V),
         (N1, 0x00, _V), (0x12, 0x40, _C), (0x13, 0x40, _C), (0x04, 0x40, _C)),
    _row((0x14, 0x00, _C), (0x15, 0x00, _C), (0x17, 0x00, _C), (0x09, 0x40, _C),
         (0x0A, 0x40, _C), (0x0B, 0x40, _C), (0x1A, 0x00, _C), (0x08, 0x00, _C)),
    _row((0x16, 0x00, _C), (0x1B, 0x40, _C), (0x0E, 0x40, _C), (0x1D, 0x40, _C),
         (0x04, 0x00, _C), (0x07, 0x00, _C), (0x09, 0x00, _C), (0x0F, 0x40, _C)),
    _row((0x2A, 0x00, _C), (0x30, 0x00, _C), (0x0C, 0x00, _C), (0x18, 0x00, _C),
         (0x1C, 0x00, _C), (0x12, 0x00, _C), (0x2F, 0x00, _C), (0x13, 0x00, _C)),
    _row((0x0E, 0x00, _C), (0x0B, 0x00, _C), (0x34, 0x00, _C), (0x33, 0x00, _C),
         (0x0F, 0x00, _C), (0x28, 0x00, _C), (0x0D, 0x00, _C), (0x0A, 0x00, _C)),
    _row((0x19, 0x00, _C), (0x1B, 0x00, _C), (0x05, 0x40, _C), (0x06, 0x00, _C),
         (0x19, 0x40, _C), (0x1D, 0x00, _C), (0x06, 0x40, _C), (0x11, 0x40, _C)),
    _row((0xE6, 0x40, _M), (0xE3, 0x08, _M), (0xE1, 0x02, _M), (0xE2, 0x04, _M),
         (0x0D, 0x40, _C), (0xE7, 0x80, _M), (0x2C, 0x00, _C), (0xE0, 0x01, _M)),
    _row((0x38, 0x00, _C), (0x37, 0x00, _C), (0x36, 0x00, _C), (0x10, 0x00, _C),
         (0x11, 0x00, _C), (0x05, 0x00, _C), (0x00, 0x00, _N), (0xE5, 0x20, _M)),
    _row((0x5A, 0x00, _C), (0x5D, 0x00, _C), (0x60, 0x00, _C), (0x54, 0x00, _C),
         (0x53, 0x00, _C), (0x5F, 0x00, _C), (0x5C, 0x00, _C), (0x59, 0x00, _C)),
    _row((0x56, 0x00, _C), (0x57, 0x00, _C), (0x58, 0x00, _C), (0x63, 0x00, _C),
         (0x5B, 0x00, _C), (0x5E, 0x00, _C), (0x61, 0x00, _C), (0x55, 0x00, _C)),
    _row((0x52, 0x00, _C), (0x50, 0x00, _C), (0x51, 0x00, _C), (0x4F, 0x00, _C),
         (0xE4, 0x10, _M), (0x62, 0x00, _C), (0x65, 0x00, _C), (0x00, 0x00, _N)),
)


def scan_line(line_no: int, port_value: int) -> list[KeyEntry]:
    """Return the matrix entries of ``line_no`` whose bits are set in ``port_value``.

    Bit 0 of the port is the first column; entries come out in column order.
    """
    if not 0 <= line_no < MATRIX_LINES:
        raise ValueError(f"line {line_no} is outside the matrix of {MATRIX_LINES} lines")
    if not 0 <= port_value <= 0xFF:
        raise ValueError(f"port value {port_value} does not fit in a byte")
    return [entry for bit, entry in enumerate(CODE_CHART[line_no]) if port_value & (1 << bit)]


def scan_matrix(line_values: Sequence[int]) -> list[KeyEntry]:
    """Scan every line of the matrix and collect at most eight pressed positions.

    ``line_values`` holds the port reading for each of the matrix lines, in
    scan order. Positions beyond the eighth are dropped.
    """
    values = list(line_values)
    if len(values) != MATRIX_LINES:
        raise ValueError(f"expected {MATRIX_LINES} line values, got {len(values)}")
    pressed: list[KeyEntry] = []
    for line_no, value in enumerate(values):
        for entry in scan_line(line_no, value):
            if len(pressed) < MAX_PRESSED:
                pressed.append(entry)
    return pressed


def sort_keys(entries: Iterable[KeyEntry]) -> SortedKeys:
    """Split pressed entries into character, modifier and vendor keys.

    Empty positions are dropped and at most four vendor keys are kept.
    """
    result = SortedKeys()
    for entry in entries:
        if entry.kind is KeyKind.CHAR:
            result.chars.append(entry)
        elif entry.kind is KeyKind.MODIFIER:
            result.modifiers.append(entry)
        elif entry.kind is KeyKind.VENDOR and len(result.vendor) < MAX_VENDOR_KEYS:
            result.vendor.append(entry)
    return result