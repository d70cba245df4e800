from __future__ import annotations
from pathlib import Path
from typing import Optional, Protocol
import datetime as _dt
import json
import shutil

from kivy.logger import Logger
from kivy.storage import AbstractStore
from kivy.storage.jsonstore import JsonStore


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


def _store_file_problem(path: Path) -> Optional[str]:
    if not path.exists():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        if not text.strip():
            return None
        data = json.loads(text)
    except ValueError as e:
        return str(e)
    if not isinstance(data, dict):
        return f"Wurzel ist {type(data).__name__}, kein Objekt"
    return None


class KivyStoreStorage:
    """String key/value storage on top of a Kivy store.

    Each key holds ``{"value": <text>}`` so callers keep full control over
    the encoding of what they store.
    """

    def __init__(self, store: AbstractStore):
        self.store = store

    @classmethod
    def open(cls, path: Path) -> "KivyStoreStorage":
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        problem = _store_file_problem(path)
        if problem:
            # kaputte Datei beiseite legen, frisch anfangen
            ts = _dt.datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            aside = path.with_name(f"{path.stem}_{ts}.corrupt")
            shutil.move(str(path), str(aside))
            Logger.warning(f"WordCards: Speicher {path} unlesbar ({problem}), verschoben nach {aside}")
        return cls(JsonStore(str(path)))

    def get_item(self, key: str) -> Optional[str]:
        if not self.store.exists(key):
            return None
        record = self.store.get(key)
        value = record.get("value") if isinstance(record, dict) else None
        if not isinstance(value, str):
            Logger.warning(f"WordCards: Eintrag {key!r} hat unerwartete Form, ignoriert")
            return None
        return value

    def set_item(self, key: str, value: str) -> None:
        self.store.put(key, value=value)

    def remove_item(self, key: str) -> None:
        if self.store.exists(key):
            self.store.delete(key)
