"""Editing the ordered list of selected keyboard languages."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import NamedTuple

BASE_LANGUAGE = "QWERTY"
MAX_SELECTED = 4
_ADD = "add"


class LangLine(NamedTuple):
    number: int
    language: str
    editable: bool


class LanguageEditor:
    """Adds, replaces and removes selected languages.

    ``on_change`` is called with the new selection after every change, in
    place of saving and redrawing.
    """

    def __init__(
        self,
        options: Iterable[str],
        selected: Iterable[str] = (),
        on_change: Callable[[list[str]], None] | None = None,
    ) -> None:
        self.options = list(options)
        self.selected = list(selected)
        self.on_change = on_change
        self._target: int | str | None = None

    def can_add(self) -> bool:
        return len(self.selected) < MAX_SELECTED

    def lines(self) -> list[LangLine]:
        """The rows shown: the fixed base layout, then each selected language."""
        rows = [LangLine(1, BASE_LANGUAGE, False)]
        rows.extend(LangLine(i + 2, lang, True) for i, lang in enumerate(self.selected))
        return rows

    def _unselected(self) -> list[str]:
        return [lang for lang in self.options if lang not in self.selected]

    def begin_add(self) -> list[str]:
        """Start adding a language; return the choices offered."""
        if not self.can_add():
            raise ValueError(f"at most {MAX_SELECTED} languages can be selected")
        self._target = _ADD
        return self._unselected()

    def begin_edit(self, index: int) -> list[str]:
        """Start replacing the language at ``index``; return the choices offered."""
        current = self.selected[index]
        self._target = index
        return [current, *self._unselected()]

    def _changed(self) -> None:
        self._target = None
        if self.on_change is not None:
            self.on_change(list(self.selected))

    def choose(self, lang: str) -> None:
        """Complete the pending add or edit with ``lang``."""
        if self._target is None:
            raise RuntimeError("no language choice is pending")
        if self._target == _ADD:
            self.selected.append(lang)
        else:
            self.selected[self._target] = lang
        self._changed()

    def remove(self, index: int) -> None:
        """Remove the language at ``index`` and every other occurrence of it."""
        lang = self.selected[index]
        self.selected = [item for item in self.selected if item != lang]
        self._changed()