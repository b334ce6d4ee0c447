from typing import Any, Dict, List, Tuple

import pytest

from plotta.model import ChartSpec
from plotta.render import ChartRenderer
from plotta.theme import ChartTheme


class RecordingBackend:
  """In-memory backend: text is char_w px per character at size 10, lines are font_size tall."""

  def __init__(self, char_w: float = 6.0):
    self.char_w = char_w
    self.ops: List[Tuple[Any, ...]] = []

  def create_canvas(self, width: int, height: int) -> Dict[str, int]:
    self.ops.append(("canvas", width, height))
    return {"width": width, "height": height}

  def fill_background(self, canvas, rgb):
    self.ops.append(("fill", rgb))

  def draw_line(self, canvas, x1, y1, x2, y2, rgb):
    self.ops.append(("line", x1, y1, x2, y2, rgb))

  def draw_text(self, canvas, x, y, font_size, text, rgb):
    self.ops.append(("text", x, y, font_size, text, rgb))

  def draw_text_vertical(self, canvas, x, y, font_size, text, rgb):
    self.ops.append(("vtext", x, y, font_size, text, rgb))

  def measure_text_width(self, font_size: float, text: str) -> float:
    return self.char_w * len(text) * font_size / 10.0

  def measure_text_height(self, font_size: float) -> float:
    return float(font_size)

  def encode(self, canvas, fmt: str = "png", quality: int = 100) -> bytes:
    return repr((fmt, canvas, self.ops)).encode("utf-8")

  def lines(self, rgb=None) -> List[Tuple[Any, ...]]:
    return [op for op in self.ops if op[0] == "line" and (rgb is None or op[5] == rgb)]

  def texts(self) -> List[str]:
    return [op[4] for op in self.ops if op[0] in ("text", "vtext")]


@pytest.fixture
def backend() -> RecordingBackend:
  return RecordingBackend()


@pytest.fixture
def theme() -> ChartTheme:
  return ChartTheme()


@pytest.fixture
def renderer(backend, theme) -> ChartRenderer:
  return ChartRenderer(theme=theme, backend=backend)


@pytest.fixture
def demo_spec() -> ChartSpec:
  return (
    ChartSpec()
    .with_dimensions(800, 400)
    .with_title("Demo")
    .with_x_axis("letter", ["a", "b", "c", "d", "e"])
    .with_series([1, 2, 3, 4, 5])
    .with_series([5, 4, 3, 2, 1])
  )
