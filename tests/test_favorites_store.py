"""
Favorites persistence tests.
Toggle semantics, write-through, degraded reads and the JsonStore adapter.
"""
import json

from WordCards.models.state import WordEntry
from WordCards.persistence.favorites_store import FAVORITES_KEY, FavoritesStore
from WordCards.persistence.storage import KivyStoreStorage


class TestToggle:
    """Adding and removing by term."""

    def test_toggle_adds_then_removes(self, favorites, entries):
        assert favorites.toggle(entries[0]) == [entries[0]]
        assert favorites.is_favorite("안녕")
        assert favorites.toggle(entries[0]) == []
        assert not favorites.is_favorite("안녕")

    def test_toggle_twice_restores_previous(self, favorites, entries):
        favorites.toggle(entries[1])
        favorites.toggle(entries[2])
        before = favorites.list()
        favorites.toggle(entries[0])
        favorites.toggle(entries[0])
        assert set(favorites.list()) == set(before)

    def test_match_by_term_only(self, favorites):
        favorites.toggle(WordEntry("눈", "眼睛", "body"))
        assert favorites.is_favorite("눈")
        # gleicher Begriff, andere Übersetzung: zählt als derselbe Favorit
        assert favorites.toggle(WordEntry("눈", "雪", "weather")) == []

    def test_removes_first_match_only(self, storage):
        dup = [{"korean": "눈", "chinese": "眼睛", "category": "body"},
               {"korean": "눈", "chinese": "雪", "category": "weather"}]
        storage.set_item(FAVORITES_KEY, json.dumps(dup, ensure_ascii=False))
        store = FavoritesStore(storage)
        store.load()
        assert store.toggle(WordEntry("눈", "眼睛", "body")) == [WordEntry("눈", "雪", "weather")]

    def test_list_is_a_copy(self, favorites, entries):
        favorites.toggle(entries[0])
        favorites.list().clear()
        assert len(favorites) == 1


class TestPersistence:
    """Write-through and round trip."""

    def test_every_toggle_writes(self, favorites, storage, entries):
        favorites.toggle(entries[0])
        favorites.toggle(entries[1])
        favorites.toggle(entries[0])
        assert storage.writes == 3

    def test_round_trip(self, favorites, storage, entries):
        favorites.toggle(entries[2])
        favorites.toggle(entries[0])
        again = FavoritesStore(storage)
        assert again.load() == favorites.list()

    def test_stored_format(self, favorites, storage, entries):
        favorites.toggle(entries[0])
        data = json.loads(storage.get_item(FAVORITES_KEY))
        assert data == [{"korean": "안녕", "chinese": "你好", "category": "greeting"}]

    def test_entry_appears_once_after_reload(self, favorites, storage, entries):
        favorites.toggle(entries[3])
        again = FavoritesStore(storage).load()
        assert [e.term for e in again].count("학교") == 1

    def test_clear_removes_key(self, favorites, storage, entries):
        favorites.toggle(entries[0])
        favorites.clear()
        assert favorites.list() == []
        assert storage.get_item(FAVORITES_KEY) is None

    def test_custom_key(self, storage, entries):
        store = FavoritesStore(storage, key="other")
        store.toggle(entries[0])
        assert storage.get_item("other") is not None
        assert storage.get_item(FAVORITES_KEY) is None


class TestDegradedReads:
    """Bad stored values never raise."""

    def test_missing_key(self, favorites):
        assert favorites.load() == []

    def test_malformed_json(self, storage):
        storage.set_item(FAVORITES_KEY, "{not json")
        assert FavoritesStore(storage).load() == []

    def test_not_an_array(self, storage):
        storage.set_item(FAVORITES_KEY, '{"korean": "a"}')
        assert FavoritesStore(storage).load() == []

    def test_bad_items_skipped(self, storage):
        storage.set_item(FAVORITES_KEY, json.dumps([1, {"korean": "a"}, {"korean": "물", "chinese": "水", "category": "food"}]))
        assert FavoritesStore(storage).load() == [WordEntry("물", "水", "food")]


class TestKivyStoreStorage:
    """String storage over a JsonStore file."""

    def test_set_get_remove(self, tmp_path):
        s = KivyStoreStorage.open(tmp_path / "favorites.json")
        assert s.get_item("k") is None
        s.set_item("k", "[1,2]")
        assert s.get_item("k") == "[1,2]"
        s.remove_item("k")
        assert s.get_item("k") is None
        s.remove_item("k")

    def test_survives_reopen(self, tmp_path, entries):
        path = tmp_path / "favorites.json"
        FavoritesStore(KivyStoreStorage.open(path)).toggle(entries[0])
        assert FavoritesStore(KivyStoreStorage.open(path)).load() == [entries[0]]

    def test_corrupt_file_moved_aside(self, tmp_path):
        path = tmp_path / "favorites.json"
        path.write_text("{broken", encoding="utf-8")
        s = KivyStoreStorage.open(path)
        assert s.get_item(FAVORITES_KEY) is None
        assert list(tmp_path.glob("favorites_*.corrupt"))

    def test_creates_parent_dir(self, tmp_path):
        s = KivyStoreStorage.open(tmp_path / "sub" / "favorites.json")
        s.set_item("k", "v")
        assert (tmp_path / "sub" / "favorites.json").exists()

    def test_raw_record_reads_as_empty(self, tmp_path, entries):
        path = tmp_path / "favorites.json"
        path.write_text(json.dumps({FAVORITES_KEY: [{"korean": "a", "chinese": "b"}]}), encoding="utf-8")
        store = FavoritesStore(KivyStoreStorage.open(path))
        assert store.load() == []
        assert store.toggle(entries[0]) == [entries[0]]
        assert FavoritesStore(KivyStoreStorage.open(path)).load() == [entries[0]]

    def test_record_without_string_value(self, tmp_path):
        path = tmp_path / "favorites.json"
        path.write_text(json.dumps({FAVORITES_KEY: {"value": 5}}), encoding="utf-8")
        assert KivyStoreStorage.open(path).get_item(FAVORITES_KEY) is None

    def test_array_root_moved_aside(self, tmp_path, entries):
        path = tmp_path / "favorites.json"
        path.write_text("[1, 2]", encoding="utf-8")
        store = FavoritesStore(KivyStoreStorage.open(path))
        assert store.load() == []
        assert list(tmp_path.glob("favorites_*.corrupt"))
        assert store.toggle(entries[1]) == [entries[1]]
