from kivy.uix.button import Button
from kivy.properties import NumericProperty, ListProperty, BooleanProperty
from kivy.graphics import Color, RoundedRectangle


class RoundedButton(Button):
    corner_radius = NumericProperty(12)
    fill_color = ListProperty([0.20, 0.52, 0.90, 1])

    def __init__(self, **kwargs):
        # background_color wird zur Füllfarbe, der Standardhintergrund bleibt unsichtbar
        fill = kwargs.pop("background_color", None)
        super().__init__(**kwargs)
        if fill is not None:
            self.fill_color = list(fill)
        self.background_normal = ""
        self.background_down = ""
        self.background_disabled_normal = ""
        self.background_color = (0, 0, 0, 0)
        with self.canvas.before:
            self._fill_instr = Color(*self.fill_color)
            self._fill_rect = RoundedRectangle(pos=self.pos, size=self.size, radius=self._radius())
        self.bind(
            pos=self._update_canvas,
            size=self._update_canvas,
            state=self._update_canvas,
            disabled=self._update_canvas,
            fill_color=self._update_canvas,
            corner_radius=self._update_canvas,
        )

    def _radius(self):
        r = float(self.corner_radius)
        return [(r, r)] * 4

    def _update_canvas(self, *_):
        r, g, b, a = self.fill_color
        if self.state == "down":
            r, g, b = r * 0.8, g * 0.8, b * 0.8
        if self.disabled:
            a *= 0.4
        self._fill_instr.rgba = (r, g, b, a)
        self._fill_rect.pos = self.pos
        self._fill_rect.size = self.size
        self._fill_rect.radius = self._radius()


class FavoriteButton(RoundedButton):
    active = BooleanProperty(False)

    def set_face(self, label: str, color, active: bool):
        self.text = label
        self.fill_color = list(color)
        self.active = active
