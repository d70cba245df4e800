from kivy.animation import Animation


class WordFader:
    """Fades a label out and back in with new text.

    Compares against the pending text, not the shown one, so a change that
    arrives mid-fade always wins.
    """

    def __init__(self, label, fade_out: float = 0.10, fade_in: float = 0.12):
        self.label = label
        self.target = label.text
        self.fade_out = fade_out
        self.fade_in = fade_in

    def show(self, text: str):
        if text == self.target:
            return
        self.target = text
        lbl = self.label
        Animation.cancel_all(lbl)
        out = Animation(opacity=0.0, duration=self.fade_out)
        out.bind(on_complete=lambda *_: self._set_and_fade_in(text))
        out.start(lbl)

    def _set_and_fade_in(self, text: str):
        if text != self.target:
            return
        self.label.text = text
        Animation(opacity=1.0, duration=self.fade_in).start(self.label)
