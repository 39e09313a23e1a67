"""Виджет просмотра изображений: масштабирование, панорамирование и выделение области.

Принципы:
- SRP: отвечает только за представление и интеракции с изображением.
- Геометрия выделения вынесена в `selection_service`; виджет лишь хранит точки протяжки.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

from rgb_inspector.models.pixel_model import Region
from rgb_inspector.services.selection_service import (
    ViewState,
    canvas_to_image,
    normalize_drag,
    region_to_canvas,
    selection_to_region,
)

SELECTION_TAG = "selection"


class ImageViewer(ctk.CTkFrame):
    """Канва с изображением и рамкой выделения (rubber band)."""
    def __init__(self, master: ctk.CTk | tk.Misc, min_zoom: int = 10, max_zoom: int = 400, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._min_scale = min_zoom / 100.0
        self._max_scale = max_zoom / 100.0

        self._image: Optional[Image.Image] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None

        self._scale_factor: float = 1.0
        self._fit_scale_factor: float = 1.0
        self._image_top_left: Optional[Tuple[int, int]] = None

        # panning state (right/middle button)
        self._is_panning: bool = False
        self._pan_start_canvas_xy: Optional[Tuple[int, int]] = None
        self._pan_start_top_left: Optional[Tuple[int, int]] = None

        # selection state (left button)
        self._is_selecting: bool = False
        self._selection_start: Optional[Tuple[int, int]] = None
        self._selection: Optional[Region] = None

        self.on_cursor_move: Optional[Callable[[Optional[int], Optional[int], Optional[Tuple[int, int, int, int]]], None]] = None
        self.on_zoom_change: Optional[Callable[[int], None]] = None
        self.on_selection: Optional[Callable[[Region], None]] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)
        self._canvas.bind("<Motion>", self._on_mouse_move)
        self._canvas.bind("<Leave>", self._on_mouse_leave)

        # Mouse wheel zoom (cross-platform)
        self._canvas.bind("<MouseWheel>", self._on_mouse_wheel)      # Windows/macOS
        self._canvas.bind("<Button-4>", self._on_mouse_wheel_linux)  # Linux scroll up
        self._canvas.bind("<Button-5>", self._on_mouse_wheel_linux)  # Linux scroll down

        # Rubber-band selection with left mouse drag
        self._canvas.bind("<ButtonPress-1>", self._on_select_start)
        self._canvas.bind("<B1-Motion>", self._on_select_move)
        self._canvas.bind("<ButtonRelease-1>", self._on_select_end)

        # Panning with middle/right mouse drag
        for button in (2, 3):
            self._canvas.bind(f"<ButtonPress-{button}>", self._on_pan_start)
            self._canvas.bind(f"<B{button}-Motion>", self._on_pan_move)
            self._canvas.bind(f"<ButtonRelease-{button}>", self._on_pan_end)

    # ---- Public API ----
    def set_image(self, image: Image.Image) -> None:
        """Устанавливает изображение, сбрасывает выделение и состояние зума/панорамирования."""
        self._image = image if image.mode == "RGBA" else image.convert("RGBA")
        self._selection = None
        self._compute_fit_scale()
        self._scale_factor = self._fit_scale_factor
        self._image_top_left = None  # reset to center
        self._render_image()

    def clear_selection(self) -> None:
        """Убирает рамку выделения."""
        self._selection = None
        self._is_selecting = False
        self._canvas.delete(SELECTION_TAG)

    def get_view_state(self) -> ViewState:
        """Масштаб и положение изображения на канве."""
        ox, oy = self._image_top_left or (0, 0)
        return ViewState(scale=self._scale_factor, offset_x=ox, offset_y=oy)

    def set_zoom_to_fit(self) -> None:
        """Масштабирует изображение так, чтобы оно целиком помещалось в доступную область."""
        self._compute_fit_scale()
        self._scale_factor = self._fit_scale_factor
        self._image_top_left = None  # reset to center
        self._render_image()

    def set_zoom_percent(self, zoom_percent: int) -> None:
        """Устанавливает масштаб в процентах (в пределах из конфигурации)."""
        self._scale_factor = self._clamp_scale(zoom_percent / 100.0)
        self._render_image()

    def get_zoom_percent(self) -> int:
        """Возвращает текущий масштаб в процентах."""
        return int(round(self._scale_factor * 100))

    # ---- Internals ----
    def _clamp_scale(self, scale: float) -> float:
        return max(self._min_scale, min(self._max_scale, scale))

    def _on_canvas_resize(self, _event: tk.Event) -> None:
        if self._image is None:
            return
        self._compute_fit_scale()
        # do not force fit scale if user zoomed manually, but rerender to center
        self._render_image()

    def _render_image(self) -> None:
        self._canvas.delete("all")
        if self._image is None:
            return

        canvas_w = int(self._canvas.winfo_width())
        canvas_h = int(self._canvas.winfo_height())

        img_w, img_h = self._image.size
        scaled_w = max(1, int(img_w * self._scale_factor))
        scaled_h = max(1, int(img_h * self._scale_factor))
        # NEAREST: при увеличении видны отдельные пиксели, удобно для выделения
        resized = self._image.resize((scaled_w, scaled_h), Image.Resampling.NEAREST)

        # compute allowed top-left range
        if scaled_w <= canvas_w:
            min_x = max_x = (canvas_w - scaled_w) // 2
        else:
            min_x = canvas_w - scaled_w
            max_x = 0
        if scaled_h <= canvas_h:
            min_y = max_y = (canvas_h - scaled_h) // 2
        else:
            min_y = canvas_h - scaled_h
            max_y = 0

        if self._image_top_left is None:
            x = (canvas_w - scaled_w) // 2 if scaled_w <= canvas_w else 0
            y = (canvas_h - scaled_h) // 2 if scaled_h <= canvas_h else 0
            self._image_top_left = (x, y)
        else:
            ox, oy = self._image_top_left
            x = max(min_x, min(max_x, ox))
            y = max(min_y, min(max_y, oy))
            self._image_top_left = (x, y)

        ox, oy = self._image_top_left
        self._tk_image = ImageTk.PhotoImage(resized)
        self._canvas.create_image(ox, oy, image=self._tk_image, anchor="nw")
        self._draw_selection()

    def _draw_selection(self) -> None:
        self._canvas.delete(SELECTION_TAG)
        if self._selection is None:
            return
        x0, y0, x1, y1 = region_to_canvas(self.get_view_state(), self._selection)
        self._draw_rubber_band(x0, y0, x1, y1)

    def _draw_rubber_band(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self._canvas.delete(SELECTION_TAG)
        # translucent fill via stipple; Tk canvas has no alpha
        self._canvas.create_rectangle(
            x0, y0, x1, y1, outline="red", width=2, fill="red", stipple="gray25", tags=SELECTION_TAG
        )

    def _compute_fit_scale(self) -> None:
        if self._image is None:
            self._fit_scale_factor = 1.0
            return
        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))
        img_w, img_h = self._image.size
        if img_w == 0 or img_h == 0:
            self._fit_scale_factor = 1.0
            return
        self._fit_scale_factor = self._clamp_scale(min(canvas_w / img_w, canvas_h / img_h))

    def _on_mouse_move(self, event: tk.Event) -> None:
        if self._image is None or self.on_cursor_move is None:
            return
        pixel = self._canvas_to_pixel(event.x, event.y)
        if pixel is None:
            self.on_cursor_move(None, None, None)
            return
        x, y = pixel
        self.on_cursor_move(x, y, self._image.getpixel((x, y)))

    def _on_mouse_leave(self, _event: tk.Event) -> None:
        if self.on_cursor_move:
            self.on_cursor_move(None, None, None)

    def _canvas_to_pixel(self, cx: int, cy: int) -> Optional[Tuple[int, int]]:
        if self._image is None or self._image_top_left is None:
            return None
        fx, fy = canvas_to_image(self.get_view_state(), cx, cy)
        if fx < 0 or fy < 0:
            return None
        x, y = int(fx), int(fy)
        img_w, img_h = self._image.size
        if x >= img_w or y >= img_h:
            return None
        return x, y

    def _get_canvas_bg(self) -> str:
        # CTk does not expose canvas theme, so pick neutral
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"

    # ---- Mouse wheel zoom ----
    def _on_mouse_wheel(self, event: tk.Event) -> None:
        if self._image is None:
            return
        delta = event.delta
        if delta == 0:
            return
        factor = 1.1 if delta > 0 else 1.0 / 1.1
        self._zoom_at_point(event.x, event.y, factor)

    def _on_mouse_wheel_linux(self, event: tk.Event) -> None:
        # On X11, Button-4 is up, Button-5 is down
        if self._image is None:
            return
        if getattr(event, "num", None) == 4:
            factor = 1.1
        else:
            factor = 1.0 / 1.1
        self._zoom_at_point(event.x, event.y, factor)

    def _zoom_at_point(self, cx: int, cy: int, factor: float) -> None:
        # anchor zoom under cursor; compute image coord before zoom
        if self._image_top_left is None or self._image is None:
            return
        old_scale = self._scale_factor
        new_scale = self._clamp_scale(old_scale * factor)
        if abs(new_scale - old_scale) < 1e-6:
            return

        ix, iy = canvas_to_image(self.get_view_state(), cx, cy)
        self._scale_factor = new_scale

        # compute new top-left so that (ix,iy) stays under (cx,cy)
        nx = int(round(cx - ix * new_scale))
        ny = int(round(cy - iy * new_scale))
        self._image_top_left = (nx, ny)
        self._render_image()

        if self.on_zoom_change:
            self.on_zoom_change(self.get_zoom_percent())

    # ---- Selection ----
    def _on_select_start(self, event: tk.Event) -> None:
        if self._image is None:
            return
        self._canvas.focus_set()
        self._is_selecting = True
        self._selection_start = (event.x, event.y)
        self._draw_rubber_band(event.x, event.y, event.x, event.y)

    def _on_select_move(self, event: tk.Event) -> None:
        if not self._is_selecting or self._selection_start is None:
            return
        x, y, w, h = normalize_drag(self._selection_start, (event.x, event.y))
        self._draw_rubber_band(x, y, x + w, y + h)

    def _on_select_end(self, event: tk.Event) -> None:
        if not self._is_selecting or self._selection_start is None or self._image is None:
            return
        self._is_selecting = False
        img_w, img_h = self._image.size
        region = selection_to_region(
            self.get_view_state(), self._selection_start, (event.x, event.y), img_w, img_h
        )
        self._selection_start = None
        self._selection = region
        # redraw snapped to whole pixels
        self._draw_selection()
        if self.on_selection:
            self.on_selection(region)

    # ---- Panning ----
    def _on_pan_start(self, event: tk.Event) -> None:
        if self._image_top_left is None:
            return
        self._is_panning = True
        self._pan_start_canvas_xy = (event.x, event.y)
        self._pan_start_top_left = self._image_top_left

    def _on_pan_move(self, event: tk.Event) -> None:
        if not self._is_panning or self._pan_start_canvas_xy is None or self._pan_start_top_left is None:
            return
        sx, sy = self._pan_start_canvas_xy
        ox, oy = self._pan_start_top_left
        self._image_top_left = (ox + event.x - sx, oy + event.y - sy)
        self._render_image()

    def _on_pan_end(self, _event: tk.Event) -> None:
        self._is_panning = False
        self._pan_start_canvas_xy = None
        self._pan_start_top_left = None
