from __future__ import annotations
from dataclasses import dataclass, field, replace
from pathlib import Path
import os
from typing import Mapping, Optional

RES_DIR = Path(__file__).resolve().parent / "res"

DEFAULT_THEME = {
    "bg": (0.07, 0.08, 0.10, 1),
    "surface": (0.12, 0.14, 0.18, 1),
    "text": (0.95, 0.98, 1, 1),
    "muted": (0.78, 0.82, 0.88, 1),
    "primary": (0.20, 0.52, 0.90, 1),
    "success": (0.25, 0.65, 0.38, 1),
    "warning": (0.93, 0.65, 0.25, 1),
    "danger": (0.85, 0.32, 0.35, 1),
    "accent": (0.55, 0.32, 0.75, 1),
    "closeButton": (0.5, 0.5, 0.5, 1),
}

# erstes existierendes File wird genommen
DEFAULT_FONT_CANDIDATES = (
    RES_DIR / "fonts" / "NotoSansCJK-Regular.ttc",
    Path("/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc"),
    Path("/usr/share/fonts/noto-cjk/NotoSansCJK-Regular.ttc"),
    Path("/System/Library/Fonts/AppleSDGothicNeo.ttc"),
    Path("C:/Windows/Fonts/malgun.ttf"),
)


@dataclass(slots=True)
class AppConfig:
    source: str = str(RES_DIR / "words.json")
    storage_name: str = "favorites.json"
    favorites_key: str = "koreanWordFavorites"
    window_size: tuple[int, int] = (800, 1000)
    font_candidates: tuple[Path, ...] = DEFAULT_FONT_CANDIDATES
    theme: dict = field(default_factory=lambda: dict(DEFAULT_THEME))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        cfg = cls()
        source = (env.get("WORDCARDS_SOURCE") or "").strip()
        if source:
            cfg = replace(cfg, source=source)
        key = (env.get("WORDCARDS_FAVORITES_KEY") or "").strip()
        if key:
            cfg = replace(cfg, favorites_key=key)
        return cfg

    def storage_path(self, user_data_dir: str | Path) -> Path:
        return Path(user_data_dir) / self.storage_name

    def find_font(self) -> Optional[Path]:
        for p in self.font_candidates:
            if Path(p).exists():
                return Path(p)
        return None
