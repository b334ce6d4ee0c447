from __future__ import annotations

from typing import Any, Dict, Protocol

import skia

from plotta.config import FONT_FAMILY
from plotta.errors import RenderIOError
from plotta.utils import RGB

FORMATS = {
  "png": skia.kPNG,
  "jpeg": skia.kJPEG,
}


class RasterBackend(Protocol):
  """Drawing primitives used by the renderer. Text positions are the top-left of the text box."""

  def create_canvas(self, width: int, height: int) -> Any: ...

  def fill_background(self, canvas: Any, rgb: RGB) -> None: ...

  def draw_line(self, canvas: Any, x1: float, y1: float, x2: float, y2: float, rgb: RGB) -> None: ...

  def draw_text(self, canvas: Any, x: float, y: float, font_size: float, text: str, rgb: RGB) -> None: ...

  def draw_text_vertical(self, canvas: Any, x: float, y: float, font_size: float, text: str, rgb: RGB) -> None: ...

  def measure_text_width(self, font_size: float, text: str) -> float: ...

  def measure_text_height(self, font_size: float) -> float: ...

  def encode(self, canvas: Any, fmt: str = "png", quality: int = 100) -> bytes: ...


def _color(rgb: RGB) -> int:
  r, g, b = rgb
  return skia.ColorSetARGB(255, int(r), int(g), int(b))


class SkiaBackend:
  def __init__(self, font_family: str = FONT_FAMILY, line_width: float = 1.0, antialias: bool = True):
    self.font_family = font_family
    self.line_width = line_width
    self.antialias = antialias
    self._typeface = skia.Typeface(font_family)
    self._fonts: Dict[float, skia.Font] = {}

  def _font(self, font_size: float) -> skia.Font:
    font = self._fonts.get(font_size)
    if font is None:
      font = skia.Font(self._typeface, float(font_size))
      self._fonts[font_size] = font
    return font

  def create_canvas(self, width: int, height: int) -> skia.Surface:
    return skia.Surface(int(width), int(height))

  def fill_background(self, canvas: skia.Surface, rgb: RGB) -> None:
    canvas.getCanvas().clear(_color(rgb))

  def draw_line(self, canvas: skia.Surface, x1: float, y1: float, x2: float, y2: float, rgb: RGB) -> None:
    paint = skia.Paint(
      Style=skia.Paint.kStroke_Style,
      Color=_color(rgb),
      StrokeWidth=self.line_width,
      AntiAlias=self.antialias,
    )
    canvas.getCanvas().drawLine(float(x1), float(y1), float(x2), float(y2), paint)

  def _baseline_dy(self, font: skia.Font) -> float:
    # fAscent is negative (distance above the baseline)
    return -font.getMetrics().fAscent

  def draw_text(self, canvas: skia.Surface, x: float, y: float, font_size: float, text: str, rgb: RGB) -> None:
    font = self._font(font_size)
    paint = skia.Paint(AntiAlias=self.antialias, Color=_color(rgb))
    canvas.getCanvas().drawString(text, float(x), float(y) + self._baseline_dy(font), font, paint)

  def draw_text_vertical(self, canvas: skia.Surface, x: float, y: float, font_size: float, text: str,
                         rgb: RGB) -> None:
    # Text reads bottom-to-top; the rotated box spans [x, x + height] x [y, y + width]
    font = self._font(font_size)
    paint = skia.Paint(AntiAlias=self.antialias, Color=_color(rgb))
    c = canvas.getCanvas()
    c.save()
    try:
      c.translate(float(x), float(y) + font.measureText(text))
      c.rotate(-90.0)
      c.drawString(text, 0.0, self._baseline_dy(font), font, paint)
    finally:
      c.restore()

  def measure_text_width(self, font_size: float, text: str) -> float:
    return float(self._font(font_size).measureText(text))

  def measure_text_height(self, font_size: float) -> float:
    m = self._font(font_size).getMetrics()
    h = float(m.fDescent - m.fAscent)
    # typeface without metrics (no fonts installed) still needs a sane line height
    return h if h > 0 else float(font_size)

  def encode(self, canvas: skia.Surface, fmt: str = "png", quality: int = 100) -> bytes:
    encoded_fmt = FORMATS.get(fmt)
    if encoded_fmt is None:
      raise RenderIOError(f"Unsupported image format: {fmt}")
    image = canvas.makeImageSnapshot()
    data = image.encodeToData(encoded_fmt, int(quality))
    if data is None:
      raise RenderIOError(f"Failed to encode {image.width()}x{image.height()} image as {fmt}")
    return bytes(data)
