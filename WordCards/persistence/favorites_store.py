from __future__ import annotations
import json

from kivy.logger import Logger

from WordCards.models.state import WordEntry
from WordCards.persistence.storage import KeyValueStorage

FAVORITES_KEY = "koreanWordFavorites"


class FavoritesStore:
    """Favorites list, written through to storage on every change.

    Entries are matched by ``term`` only: two entries sharing a term are the
    same favorite.
    """

    def __init__(self, storage: KeyValueStorage, key: str = FAVORITES_KEY):
        self.storage = storage
        self.key = key
        self._items: list[WordEntry] = []

    # ---- IO ----
    def load(self) -> list[WordEntry]:
        self._items = self._read()
        return self.list()

    reload = load

    def _read(self) -> list[WordEntry]:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError as e:
            Logger.warning(f"WordCards: Favoriten unlesbar ({e}), starte leer")
            return []
        if not isinstance(data, list):
            Logger.warning("WordCards: Favoriten sind kein Array, starte leer")
            return []
        out = []
        for item in data:
            if not isinstance(item, dict):
                continue
            try:
                out.append(WordEntry.from_dict(item))
            except ValueError:
                Logger.warning(f"WordCards: ungültiger Favorit übersprungen: {item!r}")
        return out

    def _write(self):
        payload = json.dumps([e.to_dict() for e in self._items], ensure_ascii=False, separators=(",", ":"))
        self.storage.set_item(self.key, payload)

    # ---- Queries ----
    def list(self) -> list[WordEntry]:
        return list(self._items)

    def is_favorite(self, term: str) -> bool:
        return any(e.term == term for e in self._items)

    def __len__(self):
        return len(self._items)

    # ---- Mutations ----
    def toggle(self, entry: WordEntry) -> list[WordEntry]:
        for i, e in enumerate(self._items):
            if e.term == entry.term:
                del self._items[i]
                Logger.info(f"WordCards: Favorit entfernt: {entry.term}")
                break
        else:
            self._items.append(entry)
            Logger.info(f"WordCards: Favorit hinzugefügt: {entry.term}")
        self._write()
        return self.list()

    def clear(self):
        self._items = []
        self.storage.remove_item(self.key)
        Logger.info("WordCards: Favoriten geleert")
