from __future__ import annotations

from WordCards.models.state import AppState, NO_MATCH_PLACEHOLDER

ALL = "all"
FAVORITES = "favorites"


class FilterController:
    def __init__(self, state: AppState):
        self.state = state

    def apply_filter(self, selector: str) -> list:
        s = self.state
        if selector == ALL:
            view = list(s.all_words)
        elif selector == FAVORITES:
            view = list(s.favorites)
        else:
            view = [w for w in s.all_words if w.category == selector]
        # leere Ansicht nie zulassen
        s.filtered_words = view or [NO_MATCH_PLACEHOLDER]
        s.current_index = 0
        s.selector = selector
        return s.filtered_words

    def categories(self) -> list[str]:
        seen, out = set(), []
        for w in self.state.all_words:
            c = w.category
            if c and not w.is_placeholder and c not in seen:
                seen.add(c)
                out.append(c)
        return out
