"""Боковая панель: открытие файла, информация, курсор и статистика выделения.

Принципы:
- SRP: только отображение; значения приходят уже отформатированными.
- ISP: события наружу через `on_*`, обновление через компактные методы `set_*`.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

import customtkinter as ctk

from rgb_inspector.models.image_model import ImageData

CHANNELS = ("R", "G", "B")
STAT_COLUMNS = (("mean", "Среднее"), ("median", "Медиана"), ("std_dev", "СКО"), ("variance", "Дисперсия"))


def _rgba_to_hex(rgba: Tuple[int, int, int, int]) -> str:
    """Преобразует RGBA в HEX (без альфа)."""
    r, g, b, _a = rgba
    return f"#{r:02X}{g:02X}{b:02X}"


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: файл, информация, курсор, статистика."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=300, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_clear_selection: Optional[Callable[[], None]] = None

        # Controls
        self._title = ctk.CTkLabel(self, text="Инструменты", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=2, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._mode_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=270, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_mode = ctk.CTkLabel(self, textvariable=self._mode_val, anchor="w", justify="left")

        self._info_path.grid(row=3, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=4, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=5, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_mode.grid(row=6, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=ctk.CTkFont(size=16, weight="bold"))
        self._cursor_title.grid(row=7, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgba_val = ctk.StringVar(value="—")
        self._cursor_hex_val = ctk.StringVar(value="—")

        self._cursor_xy = ctk.CTkLabel(self, textvariable=self._cursor_xy_val, anchor="w", justify="left")
        self._cursor_rgba = ctk.CTkLabel(self, textvariable=self._cursor_rgba_val, anchor="w", justify="left")
        self._cursor_hex = ctk.CTkLabel(self, textvariable=self._cursor_hex_val, anchor="w", justify="left")

        self._cursor_xy.grid(row=8, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_rgba.grid(row=9, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_hex.grid(row=10, column=0, padx=8, pady=(0, 2), sticky="ew")

        # Statistics section
        self._stats_title = ctk.CTkLabel(self, text="Статистика", font=ctk.CTkFont(size=16, weight="bold"))
        self._stats_title.grid(row=11, column=0, padx=8, pady=(8, 4), sticky="w")

        self._selection_val = ctk.StringVar(value="No selection")
        self._selection_label = ctk.CTkLabel(self, textvariable=self._selection_val, anchor="w", justify="left")
        self._selection_label.grid(row=12, column=0, padx=8, pady=(0, 4), sticky="ew")

        # таблица: строки — показатели, столбцы — каналы
        table = ctk.CTkFrame(self, fg_color="transparent")
        table.grid(row=13, column=0, padx=8, pady=(0, 8), sticky="ew")
        for col, channel in enumerate(CHANNELS, start=1):
            table.grid_columnconfigure(col, weight=1)
            ctk.CTkLabel(table, text=channel, font=ctk.CTkFont(weight="bold")).grid(row=0, column=col, padx=4)

        self._stat_vals: Dict[str, Dict[str, ctk.StringVar]] = {channel: {} for channel in CHANNELS}
        for row, (key, title) in enumerate(STAT_COLUMNS, start=1):
            ctk.CTkLabel(table, text=title, anchor="w").grid(row=row, column=0, padx=(0, 6), sticky="w")
            for col, channel in enumerate(CHANNELS, start=1):
                var = ctk.StringVar(value="-")
                self._stat_vals[channel][key] = var
                ctk.CTkLabel(table, textvariable=var, anchor="e").grid(row=row, column=col, padx=4, sticky="e")

        self._clear_btn = ctk.CTkButton(self, text="Сбросить выделение", command=self._emit_clear_selection)
        self._clear_btn.grid(row=14, column=0, padx=8, pady=(0, 8), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_image_info(self, image_data: ImageData) -> None:
        """Отображает метаданные загруженного изображения."""
        self._path_val.set(str(image_data.path))
        self._size_val.set(self._format_size(image_data.size_bytes))
        self._dims_val.set(f"{image_data.width} × {image_data.height} px")
        self._mode_val.set(f"{image_data.mode} ({image_data.source_format})")

    def update_cursor_info(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        """Обновляет информацию по курсору (координаты, RGBA, HEX)."""
        if x is None or y is None or rgba is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgba_val.set("—")
            self._cursor_hex_val.set("—")
            return
        self._cursor_xy_val.set(f"({x}, {y})")
        r, g, b, a = rgba
        self._cursor_rgba_val.set(f"RGBA: {r}, {g}, {b}, {a}")
        self._cursor_hex_val.set(f"HEX: {_rgba_to_hex(rgba)}")

    def set_selection_text(self, text: str) -> None:
        self._selection_val.set(text)

    def set_stats(self, rows: Dict[str, Dict[str, str]]) -> None:
        """Заполняет таблицу статистики строками вида {канал: {показатель: текст}}."""
        for channel, values in rows.items():
            for key, text in values.items():
                self._stat_vals[channel][key].set(text)

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_clear_selection(self) -> None:
        if self.on_clear_selection:
            self.on_clear_selection()

    # ---- Helpers ----
    def _format_size(self, size_bytes: Optional[int]) -> str:
        if size_bytes is None:
            return "—"
        thresholds = [("Б", 1024), ("КБ", 1024**2), ("МБ", 1024**3), ("ГБ", 1024**4)]
        for label, limit in thresholds:
            if size_bytes < limit:
                if label == "Б":
                    return f"{size_bytes} {label}"
                value = size_bytes / (limit // 1024)
                return f"{value:.1f} {label}"
        value = size_bytes / (1024**4)
        return f"{value:.1f} ГБ"
