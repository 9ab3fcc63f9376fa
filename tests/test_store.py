import json

import pytest

from kanetkb.store import ConfigError, ConfigStore


@pytest.fixture
def store(tmp_path):
    home = tmp_path / "home"
    (home / ".kanetkb").mkdir(parents=True)
    data = tmp_path / "data"
    data.mkdir()
    return ConfigStore(home, data)


def test_lang_config_round_trip(store, tmp_path):
    store.selected_langs = ["Telugu", "Devanagari"]
    store.save_lang_config()
    other = ConfigStore(store.home, store.data_dir)
    assert other.load_lang_config() == ["Telugu", "Devanagari"]


def test_lang_config_file_format(store):
    store.selected_langs = ["Telugu"]
    store.save_lang_config()
    document = json.loads(store.lang_path.read_text(encoding="utf-8"))
    assert document == {"selectedLanguage": ["Telugu"]}


def test_load_lang_config_appends(store):
    store.selected_langs = ["Tamil"]
    store.save_lang_config()
    store.load_lang_config()
    assert store.selected_langs == ["Tamil", "Tamil"]


def test_nkey_config_round_trip(store):
    store.nkey_object = {"NKeysConfig": {"+1": {"type": "TEXT", "text": "hello"}}}
    store.save_nkey_config()
    other = ConfigStore(store.home, store.data_dir)
    assert other.load_nkey_config() == store.nkey_object


def test_lang_options_are_sorted_keys(store):
    store.options_path.write_text(
        json.dumps({"langoptions": {"Telugu": {}, "Devanagari": {}, "Kannada": {}}}),
        encoding="utf-8",
    )
    assert store.load_lang_options() == ["Devanagari", "Kannada", "Telugu"]
    assert store.lang_list == ["Devanagari", "Kannada", "Telugu"]


def test_invalid_json_gives_empty(store):
    store.nkey_path.write_text("not json", encoding="utf-8")
    assert store.load_nkey_config() == {}


def test_non_object_options_give_empty_list(store):
    store.options_path.write_text(json.dumps({"langoptions": [1, 2]}), encoding="utf-8")
    assert store.load_lang_options() == []


def test_missing_lang_options_raise(store):
    with pytest.raises(ConfigError):
        store.load_lang_options()
    assert not store.options_path.exists()
    store.options_path.write_text(
        json.dumps({"langoptions": {"Telugu": {}}}), encoding="utf-8"
    )
    assert store.load_lang_options() == ["Telugu"]


def test_missing_lang_config_raises(store):
    with pytest.raises(ConfigError):
        store.load_lang_config()
    assert not store.lang_path.exists()
    store.lang_path.write_text(
        json.dumps({"selectedLanguage": ["Kannada"]}), encoding="utf-8"
    )
    assert store.load_lang_config() == ["Kannada"]


def test_missing_nkey_config_raises(store):
    with pytest.raises(ConfigError):
        store.load_nkey_config()
    assert not store.nkey_path.exists()
    document = {"NKeysConfig": {"+2": {"type": "NONE"}}}
    store.nkey_path.write_text(json.dumps(document), encoding="utf-8")
    assert store.load_nkey_config() == document


def test_save_without_directory_raises(tmp_path):
    store = ConfigStore(tmp_path / "nowhere", tmp_path)
    with pytest.raises(ConfigError):
        store.save_lang_config()
    with pytest.raises(ConfigError):
        store.save_nkey_config()