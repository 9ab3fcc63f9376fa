"""Loading and saving of the keyboard configuration files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

NKEY_FILE = "nKeysConfig.store"
LANG_FILE = "langconfig.store"
LANG_OPTIONS_FILE = "langoptions.store"
CONFIG_DIR = ".kanetkb"


class ConfigError(OSError):
    """Raised when a configuration file cannot be read or written."""


def _parse_object(raw: bytes) -> dict[str, Any]:
    """Parse a JSON document, yielding an empty object when it is not one."""
    try:
        document = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return {}
    return document if isinstance(document, dict) else {}


class ConfigStore:
    """Holds the language options, the selected languages and the +N key table.

    Files live in ``<home>/.kanetkb`` except the language options, which are
    read from ``data_dir``.
    """

    def __init__(self, home: str | Path | None = None, data_dir: str | Path | None = None) -> None:
        self.home = Path(home) if home is not None else Path.home()
        self.data_dir = Path(data_dir) if data_dir is not None else Path("../data")
        self.lang_list: list[str] = []
        self.selected_langs: list[str] = []
        self.nkey_object: dict[str, Any] = {}

    @property
    def config_dir(self) -> Path:
        return self.home / CONFIG_DIR

    @property
    def nkey_path(self) -> Path:
        return self.config_dir / NKEY_FILE

    @property
    def lang_path(self) -> Path:
        return self.config_dir / LANG_FILE

    @property
    def options_path(self) -> Path:
        return self.data_dir / LANG_OPTIONS_FILE

    @staticmethod
    def _read(path: Path, what: str) -> dict[str, Any]:
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ConfigError(f"{what}: cannot open {path} for reading") from exc
        return _parse_object(raw)

    @staticmethod
    def _write(path: Path, document: dict[str, Any], what: str) -> None:
        text = json.dumps(document, indent=4, ensure_ascii=False) + "\n"
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"{what}: cannot open {path} for writing") from exc

    def load_lang_options(self) -> list[str]:
        """Read the available languages: the sorted keys of ``langoptions``."""
        document = self._read(self.options_path, "load_lang_options")
        options = document.get("langoptions")
        self.lang_list = sorted(options) if isinstance(options, dict) else []
        return self.lang_list

    def load_lang_config(self) -> list[str]:
        """Append the stored selected languages to ``selected_langs``."""
        document = self._read(self.lang_path, "load_lang_config")
        stored = document.get("selectedLanguage")
        if isinstance(stored, list):
            self.selected_langs.extend(item if isinstance(item, str) else "" for item in stored)
        return self.selected_langs

    def save_lang_config(self) -> None:
        """Write ``selected_langs`` to the language configuration file."""
        self._write(
            self.lang_path,
            {"selectedLanguage": list(self.selected_langs)},
            "save_lang_config",
        )

    def load_nkey_config(self) -> dict[str, Any]:
        """Replace ``nkey_object`` with the stored +N key document."""
        self.nkey_object = self._read(self.nkey_path, "load_nkey_config")
        return self.nkey_object

    def save_nkey_config(self) -> None:
        """Write ``nkey_object`` to the +N key configuration file."""
        self._write(self.nkey_path, self.nkey_object, "save_nkey_config")