"""HID keyboard input reports and the vendor endpoint report built from pressed keys."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .keymap import KeyEntry, SortedKeys, sort_keys

HID_REPORT_DESCRIPTOR = bytes(
    [
        0x05, 0x01,  # USAGE_PAGE (Generic Desktop)
        0x09, 0x06,  # USAGE (Keyboard)
        0xA1, 0x01,  # COLLECTION (Application)
        0x05, 0x07,  #   USAGE_PAGE (Keyboard)
        0x19, 0xE0,  #   USAGE_MINIMUM (Keyboard LeftControl)
        0x29, 0xE7,  #   USAGE_MAXIMUM (Keyboard Right GUI)
        0x15, 0x00,  #   LOGICAL_MINIMUM (0)
        0x25, 0x01,  #   LOGICAL_MAXIMUM (1)
        0x75, 0x01,  #   REPORT_SIZE (1)
        0x95, 0x08,  #   REPORT_COUNT (8)
        0x81, 0x02,  #   INPUT (Data,Var,Abs)
        0x95, 0x01,  #   REPORT_COUNT (1)
        0x75, 0x08,  #   REPORT_SIZE (8)
        0x81, 0x03,  #   INPUT (Cnst,Var,Abs)
        0x95, 0x05,  #   REPORT_COUNT (5)
        0x75, 0x01,  #   REPORT_SIZE (1)
        0x05, 0x08,  #   USAGE_PAGE (LEDs)
        0x19, 0x01,  #   USAGE_MINIMUM (Num Lock)
        0x29, 0x05,  #   USAGE_MAXIMUM (Kana)
        0x91, 0x02,  #   OUTPUT (Data,Var,Abs)
        0x95, 0x01,  #   REPORT_COUNT (1)
        0x75, 0x03,  #   REPORT_SIZE (3)
        0x91, 0x03,  #   OUTPUT (Cnst,Var,Abs)
        0x95, 0x06,  #   REPORT_COUNT (6)
        0x75, 0x08,  #   REPORT_SIZE (8)
        0x15, 0x00,  #   LOGICAL_MINIMUM (0)
        0x25, 0xFF,  #   LOGICAL_MAXIMUM (255)
        0x05, 0x07,  #   USAGE_PAGE (Keyboard)
        0x19, 0x00,  #   USAGE_MINIMUM (Reserved)
        0x29, 0xFF,  #   USAGE_MAXIMUM
        0x81, 0x00,  #   INPUT (Data,Ary,Abs)
        0xC0,        # END_COLLECTION
    ]
)

INPUT_REPORT_SIZE = 8
VENDOR_REPORT_SIZE = 8
MAX_REPORT_KEYS = 6
VENDOR_KEY_SLOTS = 4
DEFAULT_IDLE_RATE_MS = 500
SOF_WRAP = 32767
MAX_IDLE_SPAN_MS = 5000


def _check_byte(value: int, what: str) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{what} {value} does not fit in a byte")


@dataclass(frozen=True)
class InputReport:
    """The keyboard INPUT report: modifier bits and up to six key codes."""

    modifiers: int = 0
    keys: tuple[int, ...] = (0,) * MAX_REPORT_KEYS

    def __post_init__(self) -> None:
        if len(self.keys) != MAX_REPORT_KEYS:
            raise ValueError(f"an input report holds {MAX_REPORT_KEYS} keys, got {len(self.keys)}")
        _check_byte(self.modifiers, "modifier value")
        for code in self.keys:
            _check_byte(code, "key code")

    def to_bytes(self) -> bytes:
        """The eight bytes sent to the host: modifiers, a reserved byte, six keys."""
        return bytes([self.modifiers, 0, *self.keys])


def _sorted(keys: SortedKeys | Iterable[KeyEntry]) -> SortedKeys:
    return keys if isinstance(keys, SortedKeys) else sort_keys(keys)


def build_input_report(keys: SortedKeys | Iterable[KeyEntry]) -> InputReport:
    """Build the input report from pressed keys.

    Modifier keys contribute their bits; the first six character keys
    contribute their code and their modifier bits. Further characters are dropped.
    """
    sorted_keys = _sorted(keys)
    modifiers = 0
    for entry in sorted_keys.modifiers:
        modifiers |= entry.modifier
    codes = [0] * MAX_REPORT_KEYS
    for slot, entry in enumerate(sorted_keys.chars[:MAX_REPORT_KEYS]):
        modifiers |= entry.modifier
        codes[slot] = entry.key_code
    return InputReport(modifiers, tuple(codes))


def build_vendor_report(keys: SortedKeys | Iterable[KeyEntry]) -> bytes:
    """Build the eight-byte vendor report: up to four vendor key codes, then zeros."""
    sorted_keys = _sorted(keys)
    data = bytearray(VENDOR_REPORT_SIZE)
    for slot, entry in enumerate(sorted_keys.vendor[:VENDOR_KEY_SLOTS]):
        _check_byte(entry.key_code, "key code")
        data[slot] = entry.key_code
    return bytes(data)


class KeyboardReporter:
    """Decides which reports to send on each pass of the keyboard task.

    The input report is sent when it changes or when the idle rate has
    elapsed; the vendor report is sent only when it changes. Time is given as
    the start-of-frame count, one per millisecond, wrapping at 32767.
    """

    def __init__(self, sof_count: int = 0) -> None:
        self.idle_rate = DEFAULT_IDLE_RATE_MS
        self.old_sof = sof_count
        self.last_input = InputReport()
        self.last_vendor = bytes(VENDOR_REPORT_SIZE)

    def set_idle_rate(self, report_id: int, rate: int) -> None:
        """Apply a SET_IDLE request; only report id 0 is used by this keyboard."""
        _check_byte(rate, "idle rate")
        if report_id == 0:
            self.idle_rate = rate

    def elapsed(self, sof_count: int) -> int:
        """Milliseconds since the last input report was sent."""
        delta = sof_count - self.old_sof
        if delta < 0:
            delta = (SOF_WRAP - self.old_sof) + sof_count
        return delta

    def task(
        self, keys: SortedKeys | Iterable[KeyEntry], sof_count: int
    ) -> tuple[bytes | None, bytes | None]:
        """Run one pass; return the input and vendor packets sent, None where none was."""
        sorted_keys = _sorted(keys)
        delta = self.elapsed(sof_count)
        if delta > MAX_IDLE_SPAN_MS:
            self.old_sof = sof_count - MAX_IDLE_SPAN_MS

        report = build_input_report(sorted_keys)
        send = report != self.last_input
        if self.idle_rate != 0 and delta >= self.idle_rate:
            send = True
        sent_input = None
        if send:
            self.last_input = report
            sent_input = report.to_bytes()
            self.old_sof = sof_count

        vendor = build_vendor_report(sorted_keys)
        sent_vendor = None
        if vendor != self.last_vendor:
            self.last_vendor = vendor
            sent_vendor = vendor
        return sent_input, sent_vendor