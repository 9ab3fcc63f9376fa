"""Command line for configuring the keyboard's languages and +N keys."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .languages import LanguageEditor
from .nkeys import NKEYS, KeyType, NKeyConfig, NKeyTable
from .store import ConfigError, ConfigStore

PROG = "kanetkb"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG, description="Quick keys configuration: languages and +N keys."
    )
    parser.add_argument("--home", help="directory holding .kanetkb (default: the home directory)")
    parser.add_argument("--data-dir", help="directory holding langoptions.store")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("languages", help="show the selected languages")
    add = sub.add_parser("add", help="add a language")
    add.add_argument("language")
    edit = sub.add_parser("edit", help="replace the language on a numbered line")
    edit.add_argument("number", type=int)
    edit.add_argument("language")
    remove = sub.add_parser("remove", help="remove the language on a numbered line")
    remove.add_argument("number", type=int)

    sub.add_parser("nkeys", help="show the +N key settings")
    set_key = sub.add_parser("set-nkey", help="configure one +N key")
    set_key.add_argument("key", choices=NKEYS)
    set_key.add_argument("type", choices=[kind.value for kind in KeyType])
    set_key.add_argument("--text", default="")
    set_key.add_argument("--exe", default="")
    set_key.add_argument("--param", default="")
    return parser


def _load(store: ConfigStore) -> None:
    for loader in (store.load_lang_options, store.load_lang_config, store.load_nkey_config):
        try:
            loader()
        except ConfigError as exc:
            print(f"{PROG}: warning: {exc}", file=sys.stderr)


def _editor(store: ConfigStore) -> LanguageEditor:
    def save(selected: list[str]) -> None:
        store.selected_langs = selected
        store.save_lang_config()

    return LanguageEditor(store.lang_list, store.selected_langs, save)


def _show_languages(editor: LanguageEditor) -> None:
    for line in editor.lines():
        suffix = "" if line.editable else " (fixed)"
        print(f"{line.number}  {line.language}{suffix}")
    if editor.can_add():
        print("+  add another language")


def _show_nkeys(table: NKeyTable) -> None:
    for key in NKEYS:
        print(key)
        for text in table.get(key).describe():
            print(f"    {text}")


def _line_index(editor: LanguageEditor, number: int) -> int:
    index = number - 2
    if not 0 <= index < len(editor.selected):
        raise ValueError(f"there is no editable language on line {number}")
    return index


def _pick(language: str, choices: list[str]) -> str:
    if language not in choices:
        offered = ", ".join(choices) or "none"
        raise ValueError(f"{language!r} is not available (choices: {offered})")
    return language


def _run(args: argparse.Namespace, store: ConfigStore) -> None:
    command = args.command or "languages"
    if command in ("languages", "add", "edit", "remove"):
        editor = _editor(store)
        if command == "add":
            editor.choose(_pick(args.language, editor.begin_add()))
        elif command == "edit":
            index = _line_index(editor, args.number)
            editor.choose(_pick(args.language, editor.begin_edit(index)))
        elif command == "remove":
            editor.remove(_line_index(editor, args.number))
        _show_languages(editor)
        return

    table = NKeyTable(store.nkey_object)
    if command == "set-nkey":
        config = NKeyConfig(KeyType(args.type), args.text, args.exe, args.param)
        table.set(args.key, config)
        store.nkey_object = table.to_json()
        store.save_nkey_config()
    _show_nkeys(table)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the configuration command; return the exit status."""
    args = _build_parser().parse_args(argv)
    store = ConfigStore(args.home, args.data_dir)
    _load(store)
    try:
        _run(args, store)
    except (ValueError, ConfigError) as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())