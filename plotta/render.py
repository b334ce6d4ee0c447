from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Union
from zoneinfo import ZoneInfo

from plotta.backend import RasterBackend, SkiaBackend
from plotta.config import JPEG_QUALITY
from plotta.dates import DateFormatter, make_formatter
from plotta.errors import RenderIOError
from plotta.layout import Layout, compute_layout
from plotta.model import ChartSpec, XAxisConfig, YAxisConfig, validate
from plotta.scale import ValueScale
from plotta.series import draw_series
from plotta.theme import DEFAULT_THEME, ChartTheme
from plotta.ticks import LogStrideXTicks, Tick, XTickPlanner, plan_x_ticks, plan_y_ticks

logger = logging.getLogger(__name__)

JPEG_SUFFIXES = {".jpg", ".jpeg"}


class ChartRenderer:
  def __init__(
      self,
      theme: Optional[ChartTheme] = None,
      backend: Optional[RasterBackend] = None,
      x_ticks: Optional[XTickPlanner] = None,
      date_formatter: Optional[DateFormatter] = None,
      tz: Optional[ZoneInfo] = None,
  ):
    self.theme = theme or DEFAULT_THEME
    self.backend = backend or SkiaBackend(font_family=self.theme.font_family, line_width=self.theme.line_width)
    self.x_ticks = x_ticks or LogStrideXTicks()
    self.date_formatter = date_formatter or make_formatter(tz)

  def _draw_title(self, canvas: Any, layout: Layout, title: str):
    origin = layout.title_origin
    if origin is None:
      return
    x, y = origin
    self.backend.draw_text(canvas, x, y, self.theme.title_font_size, title, self.theme.fg_color)

  def _draw_y_axis(self, canvas: Any, layout: Layout, scale: ValueScale, axis: Optional[YAxisConfig]) -> List[Tick]:
    t = self.theme
    b = self.backend
    col = layout.y_axis_rect
    left, top, bottom = col.right(), col.top(), col.bottom()

    b.draw_line(canvas, left, top, left, bottom, t.fg_color)

    ticks = plan_y_ticks(scale, top, bottom, t.y_tick_count)
    label_h = b.measure_text_height(t.label_font_size)
    for tick in ticks:
      b.draw_line(canvas, left - t.tick_length, tick.pos, left, tick.pos, t.fg_color)
      w = b.measure_text_width(t.label_font_size, tick.label)
      lx = left - t.tick_length - t.y_label_pad - w
      b.draw_text(canvas, lx, tick.pos - label_h / 2.0, t.label_font_size, tick.label, t.fg_color)

    if axis is not None and axis.name:
      name_w = b.measure_text_width(t.label_font_size, axis.name)
      ny = (top + bottom) / 2.0 - name_w / 2.0
      b.draw_text_vertical(canvas, col.left(), ny, t.label_font_size, axis.name, t.fg_color)
    return ticks

  def _plan_x_ticks(self, layout: Layout, axis: Optional[XAxisConfig]) -> List[Tick]:
    if axis is None:
      return []
    row = layout.x_axis_rect
    return plan_x_ticks(axis, row.left(), row.right(), self.x_ticks, self.date_formatter)

  def _draw_x_axis(self, canvas: Any, layout: Layout, axis: Optional[XAxisConfig], ticks: List[Tick]):
    t = self.theme
    b = self.backend
    row = layout.x_axis_rect
    left, right, bottom = row.left(), row.right(), row.top()

    b.draw_line(canvas, left, bottom, right, bottom, t.fg_color)
    if axis is None:
      return

    label_h = b.measure_text_height(t.label_font_size)
    label_y = bottom + t.tick_length + t.element_spacing / 2.0
    lo = float(layout.margin)
    hi = float(layout.width - layout.margin)
    for tick in ticks:
      b.draw_line(canvas, tick.pos, bottom, tick.pos, bottom + t.tick_length, t.fg_color)
      w = b.measure_text_width(t.label_font_size, tick.label)
      # keep edge labels inside the canvas margins
      lx = min(max(tick.pos - w / 2.0, lo), hi - w)
      b.draw_text(canvas, lx, label_y, t.label_font_size, tick.label, t.fg_color)

    if axis.name:
      name_w = b.measure_text_width(t.label_font_size, axis.name)
      nx = (left + right) / 2.0 - name_w / 2.0
      b.draw_text(canvas, nx, label_y + label_h + t.element_spacing, t.label_font_size, axis.name, t.fg_color)

  def _render_canvas(self, spec: ChartSpec) -> Any:
    validate(spec)
    scale = ValueScale.from_series(spec.series, spec.y_axis)
    layout = compute_layout(spec, self.backend, self.theme)
    # labels are formatted up front so a bad label fails before anything is drawn
    x_ticks = self._plan_x_ticks(layout, spec.x_axis)

    canvas = self.backend.create_canvas(spec.width, spec.height)
    self.backend.fill_background(canvas, self.theme.bg_color)

    if spec.title:
      self._draw_title(canvas, layout, spec.title)
    y_ticks = self._draw_y_axis(canvas, layout, scale, spec.y_axis)
    self._draw_x_axis(canvas, layout, spec.x_axis, x_ticks)
    logger.debug("Scale [%g, %g], %d Y ticks, %d X ticks", scale.min, scale.max, len(y_ticks), len(x_ticks))

    draw_series(self.backend, canvas, layout.plot_rect, scale, spec.series, self.theme)
    return canvas

  def render_png(self, spec: ChartSpec) -> bytes:
    canvas = self._render_canvas(spec)
    return self.backend.encode(canvas, "png", 100)

  def render_jpeg(self, spec: ChartSpec, quality: int = JPEG_QUALITY) -> bytes:
    canvas = self._render_canvas(spec)
    return self.backend.encode(canvas, "jpeg", quality)

  def render(self, spec: ChartSpec, path: Union[str, os.PathLike]) -> None:
    out = Path(path)
    if out.suffix.lower() in JPEG_SUFFIXES:
      data = self.render_jpeg(spec)
    else:
      data = self.render_png(spec)
    write_atomic(out, data)
    logger.info("Wrote %dx%d chart to %s (%d bytes)", spec.width, spec.height, out, len(data))


def write_atomic(path: Path, data: bytes) -> None:
  tmp = path.with_name(path.name + ".tmp")
  try:
    tmp.write_bytes(data)
    os.replace(tmp, path)
  except OSError as exc:
    tmp.unlink(missing_ok=True)
    raise RenderIOError(f"Cannot write chart to {path}: {exc}") from exc


def render(spec: ChartSpec, path: Union[str, os.PathLike], renderer: Optional[ChartRenderer] = None) -> None:
  (renderer or ChartRenderer()).render(spec, path)
