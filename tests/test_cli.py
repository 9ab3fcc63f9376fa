import json

import pytest

from kanetkb.cli import main


@pytest.fixture
def dirs(tmp_path):
    home = tmp_path / "home"
    (home / ".kanetkb").mkdir(parents=True)
    data = tmp_path / "data"
    data.mkdir()
    (data / "langoptions.store").write_text(
        json.dumps({"langoptions": {"Hindi": {}, "Tamil": {}, "Telugu": {}}}), encoding="utf-8"
    )
    return home, data


def run(dirs, *args):
    home, data = dirs
    return main(["--home", str(home), "--data-dir", str(data), *args])


def stored_langs(dirs):
    path = dirs[0] / ".kanetkb" / "langconfig.store"
    return json.loads(path.read_text(encoding="utf-8"))


def stored_nkeys(dirs):
    path = dirs[0] / ".kanetkb" / "nKeysConfig.store"
    return json.loads(path.read_text(encoding="utf-8"))


def test_add_language_saves(dirs, capsys):
    assert run(dirs, "add", "Hindi") == 0
    assert stored_langs(dirs) == {"selectedLanguage": ["Hindi"]}
    out = capsys.readouterr().out
    assert "QWERTY" in out
    assert "Hindi" in out


def test_add_unknown_language_fails(dirs):
    assert run(dirs, "add", "Klingon") == 1
    assert not (dirs[0] / ".kanetkb" / "langconfig.store").exists()


def test_add_already_selected_fails(dirs):
    assert run(dirs, "add", "Tamil") == 0
    assert run(dirs, "add", "Tamil") == 1
    assert stored_langs(dirs) == {"selectedLanguage": ["Tamil"]}


def test_edit_and_remove(dirs):
    assert run(dirs, "add", "Hindi") == 0
    assert run(dirs, "add", "Tamil") == 0
    assert run(dirs, "edit", "3", "Telugu") == 0
    assert stored_langs(dirs) == {"selectedLanguage": ["Hindi", "Telugu"]}
    assert run(dirs, "remove", "2") == 0
    assert stored_langs(dirs) == {"selectedLanguage": ["Telugu"]}


def test_remove_bad_line_fails(dirs):
    assert run(dirs, "remove", "1") == 1
    assert run(dirs, "remove", "5") == 1


def test_languages_is_default(dirs, capsys):
    assert run(dirs) == 0
    out = capsys.readouterr().out
    assert "QWERTY" in out
    assert "add another language" in out


def test_set_text_key(dirs, capsys):
    assert run(dirs, "set-nkey", "+1", "TEXT", "--text", "hello") == 0
    assert stored_nkeys(dirs) == {"NKeysConfig": {"+1": {"type": "TEXT", "text": "hello"}}}
    assert run(dirs, "nkeys") == 0
    out = capsys.readouterr().out
    assert "Type : TEXT" in out
    assert "Text : hello" in out


def test_text_key_without_text_fails(dirs):
    assert run(dirs, "set-nkey", "+1", "TEXT") == 1
    assert not (dirs[0] / ".kanetkb" / "nKeysConfig.store").exists()


def test_save_without_config_dir_fails(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    (data / "langoptions.store").write_text(json.dumps({"langoptions": {"Hindi": {}}}))
    code = main(["--home", str(tmp_path / "nohome"), "--data-dir", str(data), "add", "Hindi"])
    assert code == 1