from __future__ import annotations
from typing import Iterable, Optional, Protocol

from WordCards.models.state import AppState, WordEntry

FAVORITE_ON_COLOR = (231 / 255, 76 / 255, 60 / 255, 1)    # #e74c3c
FAVORITE_OFF_COLOR = (244 / 255, 67 / 255, 54 / 255, 1)   # #f44336
FAVORITE_ON_LABEL = "♥ 取消收藏"
FAVORITE_OFF_LABEL = "♥ 收藏"
EMPTY_FAVORITES = "暂无收藏单词"
EMPTY_VIEW_TEXT = "没有找到词汇数据"


class ViewSurface(Protocol):
    def show_word(self, text: str) -> None: ...
    def show_favorite_state(self, label: str, color: tuple, active: bool) -> None: ...
    def show_favorites(self, lines: list[str], empty_message: Optional[str]) -> None: ...
    def show_error(self, title: str, message: str) -> None: ...


def entry_text(entry: Optional[WordEntry], showing_translation: bool) -> str:
    if entry is None:
        return EMPTY_VIEW_TEXT
    if showing_translation:
        return f"{entry.term} ({entry.translation})"
    return entry.term


def favorite_face(is_favorite: bool) -> tuple[str, tuple]:
    if is_favorite:
        return FAVORITE_ON_LABEL, FAVORITE_ON_COLOR
    return FAVORITE_OFF_LABEL, FAVORITE_OFF_COLOR


def favorites_lines(favorites: Iterable[WordEntry]) -> list[str]:
    return [f"{e.term} - {e.translation}" for e in favorites]


def _current(state: AppState) -> Optional[WordEntry]:
    if 0 <= state.current_index < len(state.filtered_words):
        return state.filtered_words[state.current_index]
    return None


class RenderView:
    def __init__(self, surface: ViewSurface):
        self.surface = surface

    def render_word(self, state: AppState):
        self.surface.show_word(entry_text(_current(state), state.showing_translation))

    def render_favorite_button(self, state: AppState, favorites: Iterable[WordEntry]):
        cur = _current(state)
        active = cur is not None and any(e.term == cur.term for e in favorites)
        label, color = favorite_face(active)
        self.surface.show_favorite_state(label, color, active)

    def render_favorites(self, favorites: Iterable[WordEntry]):
        lines = favorites_lines(favorites)
        self.surface.show_favorites(lines, None if lines else EMPTY_FAVORITES)

    def render(self, state: AppState, favorites: Iterable[WordEntry]):
        self.render_word(state)
        self.render_favorite_button(state, list(favorites))

    def report_error(self, error):
        message = error.diagnostic() if hasattr(error, "diagnostic") else str(error)
        self.surface.show_error("加载词汇数据失败", message)
