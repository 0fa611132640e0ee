"""Tests for the alert preference store."""

from codealert.store import PreferenceStore


def test_unknown_players_get_alerts(tmp_path):
    store = PreferenceStore.loadOrCreate(str(tmp_path / "prefs.data"))
    assert store.isEnabled(1)
    assert store.isEnabled(76561198000000001)
    assert len(store) == 0


def test_toggle_twice_restores(tmp_path):
    store = PreferenceStore.loadOrCreate(str(tmp_path / "prefs.data"))
    assert store.toggle(7) is False
    assert store.toggle(7) is True
    assert store.isEnabled(7)


def test_survives_reload(tmp_path):
    path = str(tmp_path / "prefs.data")
    store = PreferenceStore.loadOrCreate(path)
    store.toggle(7)
    store.toggle(8)
    store.toggle(8)
    reloaded = PreferenceStore.loadOrCreate(path)
    assert reloaded.isEnabled(7) is False
    assert reloaded.isEnabled(8) is True
    assert 7 in reloaded and 8 in reloaded


def test_bad_entries_skipped(tmp_path):
    path = tmp_path / "prefs.data"
    path.write_text("[alerts]\n12 = false\nbob = true\n13 = maybe\n")
    store = PreferenceStore.loadOrCreate(str(path))
    assert store.alerts == {12: False}


def test_missing_section_is_empty(tmp_path):
    path = tmp_path / "prefs.data"
    path.write_text("")
    store = PreferenceStore.loadOrCreate(str(path))
    assert len(store) == 0


def test_unparseable_file_starts_empty(tmp_path, caplog):
    path = tmp_path / "prefs.data"
    path.write_text("12 = false\n")
    store = PreferenceStore.loadOrCreate(str(path))
    assert len(store) == 0
    assert store.isEnabled(12)
    assert "Can't parse alert preferences" in caplog.text


def test_duplicate_entries_start_empty(tmp_path):
    path = tmp_path / "prefs.data"
    path.write_text("[alerts]\n12 = false\n12 = true\n")
    store = PreferenceStore.loadOrCreate(str(path))
    assert len(store) == 0
