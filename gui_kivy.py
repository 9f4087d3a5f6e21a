"""A Kivy-based GUI that redraws an identicon as you type."""


import io
import logging
import sys

# pylint: disable=import-error
from kivy.app import App
from kivy.clock import Clock
from kivy.core.image import Image as CoreImage
from kivy.lang.builder import Builder
from kivy.properties import ObjectProperty, StringProperty
from kivy.uix.boxlayout import BoxLayout

# pylint: enable=import-error

import identicon
import live_preview
import surfaces

IDENTICON_SIZE = 250

# Layout rules for IdenticonPanel, loaded in VisualHashApp.build().
VISUAL_HASH_KV = """
<IdenticonPanel>:
    orientation: "vertical"
    padding: 12
    spacing: 12
    TextInput:
        id: text_input
        multiline: False
        size_hint_y: None
        height: 40
        hint_text: "Type anything"
        on_text: app.request_identicon(self.text)
    Image:
        texture: root.texture
        allow_stretch: False
    Label:
        size_hint_y: None
        height: 30
        text: root.digest
"""


class IdenticonPanel(BoxLayout):
    """Text box above the identicon it produces."""

    texture = ObjectProperty(None, allownone=True)
    digest = StringProperty("")

    def on_kv_post(self, base_widget):
        """Draws the identicon for whatever text the box starts with."""
        App.get_running_app().request_identicon(self.ids.text_input.text)

    def show_png(self, png_bytes, raw_string):
        """Swaps in a freshly rendered identicon. Must run on the main thread."""
        self.texture = CoreImage(io.BytesIO(png_bytes), ext="png").texture
        self.digest = identicon.hash_string(raw_string)[:16]


class VisualHashApp(App):
    """Controller for the Kivy identicon preview."""

    panel = ObjectProperty(None)

    def __init__(self, size=IDENTICON_SIZE, grid_size=identicon.DEFAULT_GRID_SIZE):
        super().__init__()
        self.title = "Visual Hash"
        self.image_size = size
        self.renderer = live_preview.LatestOnlyRenderer(
            lambda: surfaces.PillowSurface(self.image_size, self.image_size),
            self.on_identicon_ready,
            grid_size=grid_size)

    def request_identicon(self, raw_string):
        self.renderer.request(raw_string)

    def on_identicon_ready(self, surface, raw_string):
        """Called on the worker thread; hands the frame to the Kivy clock."""
        png_bytes = surface.to_png_bytes()

        def show(unused_dt):
            self.panel.show_png(png_bytes, raw_string)

        Clock.schedule_once(show, 0)

    def build(self):
        Builder.load_string(VISUAL_HASH_KV)
        self.panel = IdenticonPanel()
        return self.panel

    def on_stop(self):
        self.renderer.shutdown(wait=False)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s:%(levelname)s:%(message)s',
        stream=sys.stderr)
    VisualHashApp().run()


if __name__ == "__main__":
    main()
