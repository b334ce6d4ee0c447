from __future__ import annotations

import dataclasses
import logging
from typing import Optional, Protocol, Tuple

import skia

from plotta.errors import LayoutError
from plotta.model import ChartSpec
from plotta.theme import ChartTheme
from plotta.ticks import reserved_x_axis_height, reserved_y_axis_width

logger = logging.getLogger(__name__)


class TextMetrics(Protocol):
  def measure_text_width(self, font_size: float, text: str) -> float: ...

  def measure_text_height(self, font_size: float) -> float: ...


@dataclasses.dataclass(frozen=True)
class Layout:
  width: int
  height: int
  margin: int
  title_width: float
  title_height: float  # 0 when the chart has no title
  title_spacing: float
  y_axis_width: float
  x_axis_height: float

  @property
  def title_origin(self) -> Optional[Tuple[float, float]]:
    if self.title_height <= 0:
      return None
    return (self.width - self.title_width) / 2.0, float(self.margin)

  @property
  def plot_rect(self) -> skia.Rect:
    l = self.margin + self.y_axis_width
    t = self.margin + self.title_height + self.title_spacing
    r = self.width - self.margin
    b = self.height - self.margin - self.x_axis_height
    return skia.Rect.MakeLTRB(float(l), float(t), float(r), float(b))

  @property
  def y_axis_rect(self) -> skia.Rect:
    plot = self.plot_rect
    return skia.Rect.MakeLTRB(float(self.margin), plot.top(), plot.left(), plot.bottom())

  @property
  def x_axis_rect(self) -> skia.Rect:
    plot = self.plot_rect
    return skia.Rect.MakeLTRB(plot.left(), plot.bottom(), plot.right(), plot.bottom() + float(self.x_axis_height))


def compute_layout(spec: ChartSpec, metrics: TextMetrics, theme: ChartTheme) -> Layout:
  title_w = 0.0
  title_h = 0.0
  title_spacing = 0.0
  if spec.title:
    title_w = float(metrics.measure_text_width(theme.title_font_size, spec.title))
    title_h = float(metrics.measure_text_height(theme.title_font_size))
    title_spacing = float(theme.element_spacing)

  label_h = float(metrics.measure_text_height(theme.label_font_size))
  layout = Layout(
    width=spec.width,
    height=spec.height,
    margin=theme.outer_margin,
    title_width=title_w,
    title_height=title_h,
    title_spacing=title_spacing,
    y_axis_width=reserved_y_axis_width(spec.y_axis, label_h, theme),
    x_axis_height=reserved_x_axis_height(spec.x_axis, label_h, theme),
  )

  plot = layout.plot_rect
  if plot.width() <= 0 or plot.height() <= 0:
    raise LayoutError(
      f"Canvas {spec.width}x{spec.height} is too small: plot area would be "
      f"{plot.width():.0f}x{plot.height():.0f}"
    )
  logger.debug("Layout %dx%d: plot=(%.1f, %.1f, %.1f, %.1f)", spec.width, spec.height,
               plot.left(), plot.top(), plot.right(), plot.bottom())
  return layout
