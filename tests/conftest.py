"""
Pytest configuration for WordCards tests.
Keeps Kivy from parsing pytest's argv and from writing log files.
"""
import os

os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")

import random

import pytest

from WordCards.models.state import WordEntry


class MemoryStorage:
    """In-memory stand-in for the key/value storage port."""

    def __init__(self, data=None):
        self.data = dict(data or {})
        self.writes = 0

    def get_item(self, key):
        return self.data.get(key)

    def set_item(self, key, value):
        self.writes += 1
        self.data[key] = value

    def remove_item(self, key):
        self.data.pop(key, None)


class RecordingSurface:
    """ViewSurface fake that remembers what was drawn last."""

    def __init__(self):
        self.word = None
        self.favorite = None
        self.favorites = None
        self.errors = []

    def show_word(self, text):
        self.word = text

    def show_favorite_state(self, label, color, active):
        self.favorite = (label, color, active)

    def show_favorites(self, lines, empty_message):
        self.favorites = (lines, empty_message)

    def show_error(self, title, message):
        self.errors.append((title, message))


@pytest.fixture
def entries():
    return [
        WordEntry("안녕", "你好", "greeting"),
        WordEntry("감사합니다", "谢谢", "greeting"),
        WordEntry("사과", "苹果", "food"),
        WordEntry("학교", "学校", "place"),
    ]


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def favorites(storage):
    from WordCards.persistence.favorites_store import FavoritesStore
    return FavoritesStore(storage)


@pytest.fixture
def session(favorites, surface):
    from WordCards.controllers.session import StudySession
    from WordCards.ui.render import RenderView
    return StudySession(favorites, RenderView(surface), rng=random.Random(7))
