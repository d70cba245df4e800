from kivy.uix.boxlayout import BoxLayout
from kivy.uix.gridlayout import GridLayout
from kivy.uix.scrollview import ScrollView
from kivy.uix.popup import Popup
from kivy.uix.label import Label
from WordCards.ui.widgets import RoundedButton as Button


class FavoritesScreen:
    """Favorites popup: read-only listing plus clearing with confirmation."""

    def open_favorites_popup(self, *_):
        root = BoxLayout(orientation='vertical', spacing=10, padding=12)

        sv = ScrollView(size_hint=(1, 0.82))
        self._favorites_grid = GridLayout(cols=1, spacing=6, size_hint_y=None, padding=(0, 6))
        self._favorites_grid.bind(minimum_height=self._favorites_grid.setter('height'))
        sv.add_widget(self._favorites_grid)
        root.add_widget(sv)

        bar = BoxLayout(size_hint=(1, 0.18), spacing=8)
        clear_btn = Button(text="清空收藏", font_size=24, background_color=self.theme["danger"])
        clear_btn.bind(on_release=self._confirm_clear_favorites)
        close_btn = Button(text="关闭", font_size=24, background_color=self.theme["closeButton"])
        bar.add_widget(clear_btn)
        bar.add_widget(close_btn)
        root.add_widget(bar)

        self.favorites_popup = Popup(title="收藏列表", content=root, size_hint=(0.9, 0.85), auto_dismiss=True)
        close_btn.bind(on_release=lambda *_: self.favorites_popup.dismiss())
        self.favorites_popup.bind(on_dismiss=self._forget_favorites_grid)
        self.favorites_popup.open()

        self.session.on_show_favorites()

    def _forget_favorites_grid(self, *_):
        self._favorites_grid = None

    def show_favorites(self, lines, empty_message):
        grid = getattr(self, "_favorites_grid", None)
        if grid is None:
            return
        grid.clear_widgets()
        if empty_message:
            lines = [empty_message]
        for text in lines:
            self._add_wrapped_label(grid, text, font_size=26, color=self.theme["text"])

    def _add_wrapped_label(self, parent, text, font_size, color=(1, 1, 1, 1)):
        lbl = Label(text=text, font_size=font_size, color=color, size_hint_y=None, halign='left', valign='middle')
        def _recalc(*_):
            lbl.text_size = (lbl.width - 12, None)
            lbl.texture_update()
            lbl.height = max(44, lbl.texture_size[1] + 8)
        lbl.bind(width=_recalc)
        _recalc()
        parent.add_widget(lbl)

    def _confirm_clear_favorites(self, *_):
        root = BoxLayout(orientation='vertical', spacing=10, padding=12)
        root.add_widget(Label(text="确定要清空所有收藏吗？", font_size=26, size_hint=(1, 0.6)))
        bar = BoxLayout(size_hint=(1, 0.4), spacing=8)
        yes_btn = Button(text="确定", font_size=24, background_color=self.theme["danger"])
        no_btn = Button(text="取消", font_size=24, background_color=self.theme["closeButton"])
        bar.add_widget(yes_btn)
        bar.add_widget(no_btn)
        root.add_widget(bar)
        popup = Popup(title="清空收藏", content=root, size_hint=(0.7, 0.35), auto_dismiss=False)

        def _yes(*_):
            popup.dismiss()
            self.session.on_clear_favorites()
        yes_btn.bind(on_release=_yes)
        no_btn.bind(on_release=lambda *_: popup.dismiss())
        popup.open()
