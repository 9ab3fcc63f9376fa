"""The USB status indicator: a blink pattern that shows the bus state."""

from __future__ import annotations

from dataclasses import dataclass

CONFIGURED_ON_MS = 75
CONFIGURED_PERIOD_MS = 150
UNCONFIGURED_ON_MS = 50
UNCONFIGURED_PERIOD_MS = 950


@dataclass
class StatusBlinker:
    """Millisecond blink pattern for the status LED.

    A fast blink means configured, a slow pulse means still connecting and
    off means suspended. Call :meth:`update` once per millisecond.
    """

    count: int = 0
    lit: bool = False

    def __init__(self) -> None:
        self.count = 0
        self.lit = False

    def update(self, configured: bool, suspended: bool = False) -> bool:
        """Advance the pattern by one millisecond and return whether the LED is on."""
        if suspended:
            self.lit = False
            return self.lit
        if configured:
            on_ms, period_ms = CONFIGURED_ON_MS, CONFIGURED_PERIOD_MS
        else:
            on_ms, period_ms = UNCONFIGURED_ON_MS, UNCONFIGURED_PERIOD_MS
        if self.count == 1:
            self.lit = True
        elif self.count == on_ms:
            self.lit = False
        elif self.count > period_ms:
            self.count = 0
        self.count += 1
        return self.lit