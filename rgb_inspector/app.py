from typing import Optional

import customtkinter as ctk

from rgb_inspector.config import AppConfig
from rgb_inspector.controllers.app_controller import AppController
from rgb_inspector.ui.image_viewer import ImageViewer
from rgb_inspector.ui.sidebar import Sidebar
from rgb_inspector.ui.bottom_bar import BottomBar


class RgbInspectorApp(ctk.CTk):
    def __init__(self, config: Optional[AppConfig] = None) -> None:
        super().__init__()
        config = config or AppConfig()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title(config.title)
        self.minsize(config.min_width, config.min_height)

        # root layout: left viewer, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self, min_zoom=config.zoom_min_percent, max_zoom=config.zoom_max_percent)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(
            self,
            min_zoom=config.zoom_min_percent,
            max_zoom=config.zoom_max_percent,
            presets=config.zoom_presets,
        )
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            viewer=self._viewer, sidebar=self._sidebar, bottom=self._bottom, window=self, config=config
        )
        self._controller.bind_events()
