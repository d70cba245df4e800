from __future__ import annotations
from typing import Optional
import random as _random

from kivy.logger import Logger

from WordCards.controllers.filters import ALL, FilterController
from WordCards.controllers.navigation import NavigationController
from WordCards.models.state import AppState, WordEntry
from WordCards.persistence.favorites_store import FavoritesStore
from WordCards.ui.render import RenderView


class StudySession:
    """One viewing session: the state plus one handler per control.

    Handlers only work after ``start`` or ``start_failed``; until the word
    document resolved there is nothing to show.
    """

    def __init__(self, favorites: FavoritesStore, view: RenderView, rng: Optional[_random.Random] = None):
        self.favorites = favorites
        self.view = view
        self.rng = rng
        self.state = AppState()
        self.navigation = NavigationController(self.state, rng)
        self.filters = FilterController(self.state)
        self.started = False

    # ---- Startup ----
    def start(self, words: list[WordEntry]):
        self.state = AppState.initial(words, self.favorites.load())
        self.navigation = NavigationController(self.state, self.rng)
        self.filters = FilterController(self.state)
        self.started = True
        self.redraw()

    def start_failed(self, error):
        self.start([])
        self.view.report_error(error)

    def _require_started(self):
        if not self.started:
            raise RuntimeError("session not started, word list still loading")

    def redraw(self):
        self.view.render(self.state, self.state.favorites)

    def categories(self) -> list[str]:
        return self.filters.categories()

    # ---- Handlers ----
    def on_next(self, *_):
        self._require_started()
        self.navigation.next()
        self.redraw()

    def on_prev(self, *_):
        self._require_started()
        self.navigation.prev()
        self.redraw()

    def on_random(self, *_):
        self._require_started()
        self.navigation.random()
        self.redraw()

    def on_toggle_translation(self, *_):
        self._require_started()
        self.state.showing_translation = not self.state.showing_translation
        self.view.render_word(self.state)

    def on_toggle_favorite(self, *_):
        self._require_started()
        entry = self.state.current_entry
        if entry.is_placeholder:
            Logger.debug(f"WordCards: Platzhalter nicht favorisierbar: {entry.term}")
            return
        self.state.favorites = self.favorites.toggle(entry)
        self.view.render_favorite_button(self.state, self.state.favorites)

    def on_filter(self, selector: str = ALL):
        self._require_started()
        self.filters.apply_filter(selector)
        self.redraw()

    def on_show_favorites(self, *_):
        self._require_started()
        self.state.favorites = self.favorites.reload()
        self.view.render_favorites(self.state.favorites)

    def on_clear_favorites(self, *_):
        self._require_started()
        self.favorites.clear()
        self.state.favorites = self.favorites.list()
        self.view.render_favorites(self.state.favorites)
        self.view.render_favorite_button(self.state, self.state.favorites)
