from kivy.uix.boxlayout import BoxLayout
from kivy.uix.popup import Popup
from kivy.uix.label import Label
from kivy.uix.spinner import Spinner
from kivy.graphics import Color, Rectangle
from kivy.metrics import sp
from WordCards.config import AppConfig
from WordCards.controllers.filters import ALL, FAVORITES
from WordCards.controllers.session import StudySession
from WordCards.persistence.favorites_store import FavoritesStore
from WordCards.services.loader import fetch_words
from WordCards.ui.fader import WordFader
from WordCards.ui.render import RenderView
from WordCards.ui.widgets import RoundedButton as Button, FavoriteButton
from .favorites import FavoritesScreen

LABEL_ALL = "全部"
LABEL_FAVORITES = "我的收藏"


class WordCardsScreen(FavoritesScreen, BoxLayout):
    def __init__(self, config: AppConfig, storage, **kwargs):
        super().__init__(**kwargs)
        self.orientation = 'vertical'
        self.padding = 20
        self.spacing = 20
        self.cards_config = config
        self.theme = config.theme

        with self.canvas.before:
            Color(*self.theme["bg"])
            self.rect = Rectangle(size=self.size, pos=self.pos)
        self.bind(size=self._update_rect, pos=self._update_rect)

        self.favorites_store = FavoritesStore(storage, config.favorites_key)
        self.session = StudySession(self.favorites_store, RenderView(self))
        self._category_selectors = {LABEL_ALL: ALL, LABEL_FAVORITES: FAVORITES}

        self._build_ui()
        # bis das Wortdokument da ist, bleibt alles inaktiv
        self._set_controls_enabled(False)
        self._load_request = fetch_words(config.source, self._on_words_loaded, self._on_words_failed)

    # ---- UI building ----
    def _build_ui(self):
        header = BoxLayout(orientation='horizontal', size_hint=(1, 0.1), spacing=8)
        self.category_spinner = Spinner(text=LABEL_ALL, values=(LABEL_ALL, LABEL_FAVORITES), font_size=24, size_hint=(0.6, 1))
        self.favorites_list_btn = Button(text="收藏列表", font_size=24, size_hint=(0.4, 1), background_color=self.theme["accent"])
        header.add_widget(self.category_spinner)
        header.add_widget(self.favorites_list_btn)
        self.add_widget(header)

        self.word_label = Label(text="加载中…", font_size=sp(56), size_hint=(1, 0.45), color=self.theme["text"], halign='center', valign='middle')
        self.word_label.bind(size=lambda inst, *_: setattr(inst, "text_size", (inst.width - 24, None)))
        self.add_widget(self.word_label)
        self.word_fader = WordFader(self.word_label)

        self.show_translation_btn = Button(text="显示中文", font_size=28, size_hint=(1, 0.1), background_color=self.theme["primary"])
        self.add_widget(self.show_translation_btn)

        nav = BoxLayout(size_hint=(1, 0.12), spacing=10)
        self.prev_btn = Button(text="上一个", font_size=28, background_color=self.theme["surface"])
        self.random_btn = Button(text="随机", font_size=28, background_color=self.theme["warning"])
        self.next_btn = Button(text="下一个", font_size=28, background_color=self.theme["success"])
        nav.add_widget(self.prev_btn)
        nav.add_widget(self.random_btn)
        nav.add_widget(self.next_btn)
        self.add_widget(nav)

        self.favorite_btn = FavoriteButton(text="♥ 收藏", font_size=28, size_hint=(1, 0.1))
        self.add_widget(self.favorite_btn)

    def _controls(self):
        return (self.category_spinner, self.favorites_list_btn, self.show_translation_btn,
                self.prev_btn, self.random_btn, self.next_btn, self.favorite_btn)

    def _set_controls_enabled(self, enabled: bool):
        for w in self._controls():
            w.disabled = not enabled

    def _update_rect(self, instance, value):
        self.rect.pos = instance.pos
        self.rect.size = instance.size

    # ---- Loading ----
    def _on_words_loaded(self, words):
        self.session.start(words)
        self._after_start()

    def _on_words_failed(self, error):
        self.session.start_failed(error)
        self._after_start()

    def _after_start(self):
        cats = self.session.categories()
        for c in cats:
            self._category_selectors.setdefault(c, c)
        self.category_spinner.values = [LABEL_ALL, LABEL_FAVORITES] + cats
        self._bind_events()
        self._set_controls_enabled(True)

    def _bind_events(self):
        s = self.session
        self.show_translation_btn.bind(on_release=s.on_toggle_translation)
        self.next_btn.bind(on_release=s.on_next)
        self.prev_btn.bind(on_release=s.on_prev)
        self.random_btn.bind(on_release=s.on_random)
        self.favorite_btn.bind(on_release=s.on_toggle_favorite)
        self.favorites_list_btn.bind(on_release=self.open_favorites_popup)
        self.category_spinner.bind(text=self._on_category_selected)

    def _on_category_selected(self, spinner, text):
        self.session.on_filter(self._category_selectors.get(text, text))

    # ---- ViewSurface ----
    def show_word(self, text: str):
        self.word_fader.show(text)

    def show_favorite_state(self, label: str, color, active: bool):
        self.favorite_btn.set_face(label, color, active)

    def show_error(self, title: str, message: str):
        root = BoxLayout(orientation='vertical', spacing=10, padding=12)
        msg = Label(text=message, font_size=20, size_hint=(1, 0.85), halign='left', valign='top')
        msg.bind(size=lambda inst, *_: setattr(inst, "text_size", inst.size))
        root.add_widget(msg)
        ok_btn = Button(text="确定", font_size=24, size_hint=(1, 0.15), background_color=self.theme["closeButton"])
        root.add_widget(ok_btn)
        popup = Popup(title=title, content=root, size_hint=(0.9, 0.8), auto_dismiss=False)
        ok_btn.bind(on_release=lambda *_: popup.dismiss())
        popup.open()
