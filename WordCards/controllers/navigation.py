from __future__ import annotations
from typing import Optional
import random as _random

from WordCards.models.state import AppState, EmptyViewError


class NavigationController:
    def __init__(self, state: AppState, rng: Optional[_random.Random] = None):
        self.state = state
        self.rng = rng or _random.Random()

    def _size(self) -> int:
        n = len(self.state.filtered_words)
        if n == 0:
            raise EmptyViewError("cannot navigate an empty view")
        return n

    def next(self) -> int:
        n = self._size()
        self.state.current_index = (self.state.current_index + 1) % n
        return self.state.current_index

    def prev(self) -> int:
        n = self._size()
        self.state.current_index = (self.state.current_index - 1 + n) % n
        return self.state.current_index

    def random(self) -> int:
        n = self._size()
        self.state.current_index = self.rng.randrange(n)
        return self.state.current_index
