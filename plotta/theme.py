from __future__ import annotations

import dataclasses
from typing import Tuple

from plotta.config import FONT_FAMILY
from plotta.utils import PALETTE_3, RGB, hex_to_rgb


@dataclasses.dataclass(frozen=True)
class ChartTheme:
  # Colors
  bg_color: RGB = (255, 255, 255)
  fg_color: RGB = (0, 0, 0)
  palette: Tuple[str, ...] = PALETTE_3

  # Fonts
  font_family: str = FONT_FAMILY
  title_font_size: float = 14.0
  label_font_size: float = 10.0

  # Line styles
  line_width: float = 1.0

  # Layout
  outer_margin: int = 10  # on every side of the canvas
  element_spacing: int = 10  # between stacked elements (title, labels, names)
  y_label_reserve_w: int = 48  # room for Y tick values left of the axis
  y_label_pad: float = 2.0  # gap between a Y label and its tick mark
  tick_length: float = 4.0

  # Ticks
  y_tick_count: int = 10

  def series_color(self, index: int) -> RGB:
    return hex_to_rgb(self.palette[index % len(self.palette)])


DEFAULT_THEME = ChartTheme()
