from kivy.app import App
from kivy.core.text import LabelBase
from kivy.core.window import Window
from kivy.logger import Logger
from WordCards.config import AppConfig
from WordCards.persistence.storage import KivyStoreStorage
from WordCards.screens.main import WordCardsScreen


class WordCardsApp(App):
    title = "韩语单词卡"

    def __init__(self, cards_config: AppConfig | None = None, **kwargs):
        super().__init__(**kwargs)
        self.cards_config = cards_config or AppConfig.from_env()

    def build(self):
        Window.size = self.cards_config.window_size
        self._register_font()
        self.storage = KivyStoreStorage.open(self.cards_config.storage_path(self.user_data_dir))
        return WordCardsScreen(self.cards_config, self.storage)

    def _register_font(self):
        # Roboto kann kein Hangul/Hanzi, also Standardfont ersetzen
        p = self.cards_config.find_font()
        if p is None:
            Logger.warning("WordCards: Kein CJK-Font gefunden, Koreanisch/Chinesisch evtl. unlesbar")
            return
        LabelBase.register(name="Roboto", fn_regular=str(p))
        Logger.info(f"WordCards: Font geladen: {p}")


def main():
    WordCardsApp().run()


if __name__ == "__main__":
    main()
