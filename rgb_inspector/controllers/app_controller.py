"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без расчётов над пикселями).
- DIP: зависит от сервисов как от абстрактных ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from tkinter import TclError, filedialog, messagebox
from typing import Optional, Tuple

import customtkinter as ctk

from rgb_inspector.config import AppConfig
from rgb_inspector.errors import DecodeError, RegionError
from rgb_inspector.models.image_model import ImageData
from rgb_inspector.models.pixel_model import Region
from rgb_inspector.services.format_service import format_selection, format_stats
from rgb_inspector.services.image_service import ImageService
from rgb_inspector.services.stats_service import get_rgb_statistics
from rgb_inspector.ui.bottom_bar import BottomBar
from rgb_inspector.ui.image_viewer import ImageViewer
from rgb_inspector.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка изображений через `ImageService`.
    - Расчёт статистики выделенной области и вывод её в сайдбар.
    - Синхронизация состояния зума.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    config: AppConfig = field(default_factory=AppConfig)

    _image_service: Optional[ImageService] = None
    _current_image: Optional[ImageData] = None

    def __post_init__(self) -> None:
        if self._image_service is None:
            self._image_service = ImageService(self.config)

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Сохраняет слабую связность: компоненты UI ничего не знают друг о друге,
        общаются через контроллер.
        """
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_clear_selection = self._handle_clear_selection
        self.viewer.on_cursor_move = self._handle_cursor_move
        self.viewer.on_zoom_change = self._handle_viewer_zoom_changed
        self.viewer.on_selection = self._handle_selection

        # Bottom bar bindings
        self.bottom.on_zoom_change = self._handle_zoom_change
        self.bottom.on_zoom_preset = self._handle_zoom_change
        self.bottom.on_zoom_fit = self._handle_zoom_fit

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите изображение",
                filetypes=self.config.file_types,
            )
        except TclError:
            logger.warning("Не удалось открыть диалог выбора файла", exc_info=True)
            return

        if not file_path:
            return

        try:
            image_data = self._image_service.load_image(file_path)
        except (FileNotFoundError, DecodeError) as exc:
            logger.error("Ошибка загрузки %s: %s", file_path, exc)
            messagebox.showerror("Ошибка загрузки", str(exc), parent=self.window)
            return
        self._current_image = image_data

        self.viewer.set_image(image_data.pil_image)
        self.sidebar.set_image_info(image_data)
        self._clear_stats()
        # Reset zoom to fit
        self._handle_zoom_fit()

    def _handle_selection(self, region: Region) -> None:
        if self._current_image is None:
            return
        self.sidebar.set_selection_text(format_selection(region))
        try:
            stats = get_rgb_statistics(self._current_image.pixels, region)
        except RegionError as exc:
            logger.error("Некорректная область %s: %s", region, exc)
            messagebox.showerror("Ошибка выделения", str(exc), parent=self.window)
            self._clear_stats()
            return
        self.sidebar.set_stats(
            format_stats(stats, precision=self.config.mean_precision, median_precision=self.config.median_precision)
        )

    def _handle_clear_selection(self) -> None:
        self.viewer.clear_selection()
        self._clear_stats()

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        self.sidebar.update_cursor_info(x, y, rgba)

    def _handle_zoom_change(self, zoom_percent: int) -> None:
        self.viewer.set_zoom_percent(zoom_percent)

    def _handle_viewer_zoom_changed(self, zoom_percent: int) -> None:
        # Sync slider/value when user zooms with mouse wheel
        self.bottom.set_zoom_percent(zoom_percent)

    def _handle_zoom_fit(self) -> None:
        self.viewer.set_zoom_to_fit()
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())

    # ---- Helpers ----
    def _clear_stats(self) -> None:
        self.sidebar.set_selection_text(format_selection(None))
        self.sidebar.set_stats(format_stats(None))
