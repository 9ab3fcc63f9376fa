"""Configuration of the programmable +N keys and the wizard that edits them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

NKEYS = ("+1", "+2", "+3", "+4", "+5")
TABLE_KEY = "NKeysConfig"


class KeyType(str, Enum):
    """What pressing a +N key does."""

    NONE = "NONE"
    TEXT = "TEXT"
    ACTION = "ACTION"


class WizardPage(IntEnum):
    """The pages of the key configuration wizard, in their fixed order."""

    TYPE = 0
    CHAR = 1
    ACTION = 2
    FINAL = 3


def next_page(page: WizardPage, key_type: KeyType | str) -> WizardPage | None:
    """Return the page after ``page`` for the chosen type, or None after the last."""
    page = WizardPage(page)
    if page is WizardPage.TYPE:
        if key_type == KeyType.TEXT:
            return WizardPage.CHAR
        if key_type == KeyType.ACTION:
            return WizardPage.ACTION
        return WizardPage.FINAL
    if page in (WizardPage.CHAR, WizardPage.ACTION):
        return WizardPage.FINAL
    return None


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _type_name(key_type: KeyType | str) -> str:
    return key_type.value if isinstance(key_type, KeyType) else str(key_type)


@dataclass
class NKeyConfig:
    """The setting of one +N key.

    ``key_type`` is a :class:`KeyType`, or the raw type string when a stored
    document holds a type that is not known.
    """

    key_type: KeyType | str = KeyType.NONE
    text: str = ""
    exe: str = ""
    param: str = ""

    def to_json(self) -> dict[str, str]:
        """The stored form: the type plus only the fields that type uses."""
        document = {"type": _type_name(self.key_type)}
        if self.key_type == KeyType.TEXT:
            document["text"] = self.text
        elif self.key_type == KeyType.ACTION:
            document["exe"] = self.exe
            document["param"] = self.param
        return document

    @classmethod
    def from_json(cls, data: Any) -> NKeyConfig:
        """Read a stored key setting; missing or non-string fields read as empty."""
        if not isinstance(data, dict):
            data = {}
        name = _string(data.get("type"))
        try:
            key_type: KeyType | str = KeyType(name)
        except ValueError:
            key_type = name
        return cls(
            key_type=key_type,
            text=_string(data.get("text")),
            exe=_string(data.get("exe")),
            param=_string(data.get("param")),
        )

    def describe(self) -> list[str]:
        """The lines shown for the key in the key list."""
        lines = [f"Type : {_type_name(self.key_type)}"]
        if self.key_type == KeyType.TEXT:
            lines.append(f"Text : {self.text}")
        elif self.key_type == KeyType.ACTION:
            lines.append(f"Run : {self.exe}")
            lines.append(f"Parameter : {self.param}")
        return lines

    def summary(self) -> list[str]:
        """The lines shown on the wizard's final page."""
        lines = [f"    Type : {_type_name(self.key_type)}"]
        if self.key_type == KeyType.TEXT:
            lines.append(f"    Text : {self.text}")
        elif self.key_type == KeyType.ACTION:
            lines.append(f"    Executable File : {self.exe}")
            lines.append(f"    Parameters : {self.param}")
        return lines


class NKeyTable:
    """View over the +N key document, as loaded and saved by the config store.

    ``document`` is changed in place by :meth:`set`.
    """

    def __init__(self, document: dict[str, Any] | None = None) -> None:
        self.document = document if document is not None else {}

    def _table(self) -> dict[str, Any]:
        table = self.document.get(TABLE_KEY)
        return table if isinstance(table, dict) else {}

    def get(self, key: str) -> NKeyConfig:
        """The setting of ``key``; an absent key reads as one with an empty type."""
        return NKeyConfig.from_json(self._table().get(key))

    def set(self, key: str, config: NKeyConfig) -> None:
        """Store ``config`` for ``key``, as the wizard does when it finishes.

        Text keys need text and action keys need an executable.
        """
        if config.key_type == KeyType.TEXT and not config.text:
            raise ValueError(f"{key}: a TEXT key needs text")
        if config.key_type == KeyType.ACTION and not config.exe:
            raise ValueError(f"{key}: an ACTION key needs an executable")
        table = dict(self._table())
        table[key] = config.to_json()
        self.document[TABLE_KEY] = table

    def to_json(self) -> dict[str, Any]:
        return self.document