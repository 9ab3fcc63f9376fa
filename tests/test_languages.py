import pytest

from kanetkb.languages import LanguageEditor

OPTIONS = ["Devanagari", "Kannada", "Tamil", "Telugu", "Bengali"]


def test_lines_start_with_fixed_base():
    editor = LanguageEditor(OPTIONS, ["Telugu", "Tamil"])
    lines = editor.lines()
    assert lines[0].language == "QWERTY"
    assert not lines[0].editable
    assert [(l.number, l.language) for l in lines[1:]] == [(2, "Telugu"), (3, "Tamil")]
    assert all(l.editable for l in lines[1:])


def test_add_offers_unselected_and_appends():
    changes = []
    editor = LanguageEditor(OPTIONS, ["Telugu"], changes.append)
    choices = editor.begin_add()
    assert "Telugu" not in choices
    assert set(choices) | {"Telugu"} == set(OPTIONS)
    editor.choose("Kannada")
    assert editor.selected == ["Telugu", "Kannada"]
    assert changes == [["Telugu", "Kannada"]]


def test_edit_offers_current_first_and_replaces():
    editor = LanguageEditor(OPTIONS, ["Telugu", "Tamil"])
    choices = editor.begin_edit(1)
    assert choices[0] == "Tamil"
    assert "Telugu" not in choices
    editor.choose("Bengali")
    assert editor.selected == ["Telugu", "Bengali"]


def test_choose_without_pending_raises():
    editor = LanguageEditor(OPTIONS)
    with pytest.raises(RuntimeError):
        editor.choose("Tamil")
    editor.begin_add()
    editor.choose("Tamil")
    with pytest.raises(RuntimeError):
        editor.choose("Telugu")


def test_add_limited_to_four():
    editor = LanguageEditor(OPTIONS, OPTIONS[:4])
    assert not editor.can_add()
    with pytest.raises(ValueError):
        editor.begin_add()
    assert LanguageEditor(OPTIONS, OPTIONS[:3]).can_add()


def test_remove_drops_all_occurrences():
    changes = []
    editor = LanguageEditor(OPTIONS, ["Tamil", "Telugu", "Tamil"], changes.append)
    editor.remove(0)
    assert editor.selected == ["Telugu"]
    assert changes == [["Telugu"]]


def test_bad_index_raises():
    editor = LanguageEditor(OPTIONS, ["Tamil"])
    with pytest.raises(IndexError):
        editor.begin_edit(3)
    with pytest.raises(IndexError):
        editor.remove(2)