import pytest

from kanetkb.keymap import (
    CODE_CHART,
    LANG,
    MATRIX_LINES,
    QC,
    KeyEntry,
    KeyKind,
    scan_line,
    scan_matrix,
    sort_keys,
)


@pytest.mark.parametrize("line_no", range(MATRIX_LINES))
def test_every_line_has_eight_columns(line_no):
    entries = scan_line(line_no, 0xFF)
    assert len(entries) == 8
    assert entries == list(CODE_CHART[line_no])


def test_scan_line_first_column():
    assert scan_line(0, 0b00000001) == [KeyEntry(0x3E, 0x00, KeyKind.CHAR)]


def test_scan_line_no_bits():
    assert scan_line(3, 0) == []


def test_scan_line_modifier_key():
    assert scan_line(12, 0b00000001) == [KeyEntry(0xE6, 0x40, KeyKind.MODIFIER)]


def test_scan_line_vendor_keys():
    entries = scan_line(4, 0b10000000)
    assert entries == [KeyEntry(LANG, 0x00, KeyKind.VENDOR)]
    assert scan_line(5, 0b00000010)[0].key_code == QC


def test_scan_line_column_order():
    entries = scan_line(1, 0xFF)
    assert entries == list(CODE_CHART[1])


@pytest.mark.parametrize("line_no", [-1, MATRIX_LINES])
def test_scan_line_rejects_bad_line(line_no):
    with pytest.raises(ValueError):
        scan_line(line_no, 1)


def test_scan_line_rejects_wide_port():
    with pytest.raises(ValueError):
        scan_line(0, 0x100)


def test_scan_matrix_collects_across_lines():
    values = [0] * MATRIX_LINES
    values[0] = 0b00000001
    values[16] = 0b00010000
    assert scan_matrix(values) == [CODE_CHART[0][0], CODE_CHART[16][4]]


def test_scan_matrix_caps_pressed_keys():
    values = [0xFF] * MATRIX_LINES
    pressed = scan_matrix(values)
    assert pressed == list(CODE_CHART[0])


def test_scan_matrix_requires_all_lines():
    with pytest.raises(ValueError):
        scan_matrix([0] * (MATRIX_LINES - 1))


def test_sort_keys_splits_by_kind():
    entries = scan_line(12, 0xFF)
    sorted_keys = sort_keys(entries)
    assert all(e.kind is KeyKind.CHAR for e in sorted_keys.chars)
    assert all(e.kind is KeyKind.MODIFIER for e in sorted_keys.modifiers)
    assert len(sorted_keys.chars) + len(sorted_keys.modifiers) == len(entries)
    assert sorted_keys.vendor == []


def test_sort_keys_drops_empty_positions():
    entries = scan_line(5, 0b00000011)
    sorted_keys = sort_keys(entries)
    assert sorted_keys.vendor == [KeyEntry(QC, 0x00, KeyKind.VENDOR)]
    assert sorted_keys.chars == []
    assert sorted_keys.modifiers == []


def test_sort_keys_keeps_at_most_four_vendor_keys():
    vendor = scan_line(4, 0xF0) + scan_line(6, 0b00011000)
    assert len(vendor) == 6
    sorted_keys = sort_keys(vendor)
    assert sorted_keys.vendor == vendor[:4]


def test_sort_keys_preserves_order():
    entries = scan_line(2, 0xFF)
    assert sort_keys(entries).chars == entries