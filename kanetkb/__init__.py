"""Settings tools and a key-matrix, report and LED model for a multilingual USB HID keyboard."""

__version__ = "0.1.0"