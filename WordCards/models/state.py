from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

ERROR_CATEGORY = "error"


class EmptyViewError(RuntimeError):
    """Raised when an operation needs a current entry but the view is empty."""


@dataclass(frozen=True, slots=True)
class WordEntry:
    term: str
    translation: str
    category: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WordEntry":
        # korean/chinese sind die Schlüssel im Wortdokument und im Speicher
        term = data.get("korean", data.get("term"))
        translation = data.get("chinese", data.get("translation"))
        if not isinstance(term, str) or not isinstance(translation, str):
            raise ValueError("entry needs string 'korean' and 'chinese' fields")
        category = data.get("category") or ""
        return cls(term, translation, category if isinstance(category, str) else str(category))

    def to_dict(self) -> dict[str, str]:
        return {"korean": self.term, "chinese": self.translation, "category": self.category}

    @property
    def is_placeholder(self) -> bool:
        return self.category == ERROR_CATEGORY


LOAD_PLACEHOLDER = WordEntry("初始化错误", "未加载词汇数据", ERROR_CATEGORY)
NO_MATCH_PLACEHOLDER = WordEntry("无匹配数据", "请尝试其他分类", ERROR_CATEGORY)


@dataclass(slots=True)
class AppState:
    all_words: list[WordEntry] = field(default_factory=list)
    filtered_words: list[WordEntry] = field(default_factory=list)
    current_index: int = 0
    showing_translation: bool = False
    favorites: list[WordEntry] = field(default_factory=list)

    # aktiver Filter (nicht persistiert)
    selector: str = "all"

    @classmethod
    def initial(cls, words: Optional[list[WordEntry]] = None, favorites: Optional[list[WordEntry]] = None) -> "AppState":
        words = list(words or [])
        view = list(words) if words else [LOAD_PLACEHOLDER]
        return cls(all_words=words, filtered_words=view, favorites=list(favorites or []))

    @property
    def current_entry(self) -> WordEntry:
        if not self.filtered_words:
            raise EmptyViewError("filtered view is empty")
        return self.filtered_words[self.current_index]
