"""The keyboard's indicator LEDs and the lock-state output report that drives them."""

from __future__ import annotations

from enum import IntEnum


class Led(IntEnum):
    """The LEDs on the board; NONE stands for no LED and is ignored."""

    NONE = 0
    E1 = 1
    E2 = 2
    E3 = 3


LED_COUNT = 4

USB_DEVICE_STATE_LED = Led.E1
CAPS_LOCK_LED = Led.E1
NUM_LOCK_LED = Led.E2
SCROLL_LOCK_LED = Led.E3

# Bits of the one-byte keyboard OUTPUT report sent by the host.
NUM_LOCK_BIT = 0x01
CAPS_LOCK_BIT = 0x02
SCROLL_LOCK_BIT = 0x04
COMPOSE_BIT = 0x08
KANA_BIT = 0x10


class LedBank:
    """The latch state of each LED.

    All LEDs start off. Switching an LED that has not been enabled still
    sets its latch, as the pin latch exists whether or not the pin drives.
    """

    def __init__(self) -> None:
        self._lit: dict[Led, bool] = {led: False for led in Led if led is not Led.NONE}
        self.enabled: set[Led] = set()

    def enable(self, led: Led) -> None:
        """Configure ``led`` as a digital output."""
        led = Led(led)
        if led is not Led.NONE:
            self.enabled.add(led)

    def _set(self, led: Led, state: bool) -> None:
        led = Led(led)
        if led is not Led.NONE:
            self._lit[led] = state

    def on(self, led: Led) -> None:
        self._set(led, True)

    def off(self, led: Led) -> None:
        self._set(led, False)

    def toggle(self, led: Led) -> None:
        led = Led(led)
        if led is not Led.NONE:
            self._lit[led] = not self._lit[led]

    def get(self, led: Led) -> bool:
        """Whether ``led`` is on; NONE is never on."""
        led = Led(led)
        return False if led is Led.NONE else self._lit[led]

    def apply_output_report(self, value: int) -> None:
        """Show the host's caps, num and scroll lock states from an OUTPUT report byte."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"output report value {value} does not fit in a byte")
        for bit, led in (
            (CAPS_LOCK_BIT, CAPS_LOCK_LED),
            (NUM_LOCK_BIT, NUM_LOCK_LED),
            (SCROLL_LOCK_BIT, SCROLL_LOCK_LED),
        ):
            self._set(led, bool(value & bit))