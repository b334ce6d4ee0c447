import struct

import numpy as np
import pytest
import skia

from plotta.backend import SkiaBackend
from plotta.errors import RenderIOError, ShapeMismatchError
from plotta.model import ChartSpec
from plotta.render import ChartRenderer, render

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _png_size(data: bytes):
  assert data[:8] == PNG_MAGIC
  # IHDR is always the first chunk
  return struct.unpack(">II", data[16:24])


@pytest.mark.parametrize("width, height", [(800, 400), (320, 240), (257, 161)])
def test_png_has_requested_size(demo_spec, width, height):
  data = ChartRenderer().render_png(demo_spec.with_dimensions(width, height))
  assert _png_size(data) == (width, height)


def test_render_to_file_is_deterministic(demo_spec, tmp_path):
  spec = demo_spec.with_y_axis("value").with_series([2, 2, 3, 3, 2])
  a = tmp_path / "a.png"
  b = tmp_path / "b.png"
  render(spec, a)
  render(spec, b)
  assert a.read_bytes() == b.read_bytes()
  assert _png_size(a.read_bytes()) == (800, 400)


def test_jpeg_output(demo_spec, tmp_path):
  out = tmp_path / "chart.jpeg"
  ChartRenderer().render(demo_spec, out)
  assert out.read_bytes()[:2] == b"\xff\xd8"


def test_background_is_white_and_lines_are_drawn(demo_spec):
  surface = ChartRenderer()._render_canvas(demo_spec)
  pixels = surface.makeImageSnapshot().toarray(colorType=skia.kRGBA_8888_ColorType)
  assert pixels.shape[:2] == (400, 800)
  r = pixels[:, :, 0].astype(np.int32)
  g = pixels[:, :, 1].astype(np.int32)
  b = pixels[:, :, 2].astype(np.int32)

  assert tuple(pixels[1, 1, :3]) == (255, 255, 255)
  assert tuple(pixels[-2, -2, :3]) == (255, 255, 255)
  assert np.any((b > 200) & (r < 100) & (g < 100))
  assert np.any((r > 200) & (b < 100) & (g < 100))


def test_shape_mismatch_writes_nothing(tmp_path):
  spec = ChartSpec(width=300, height=200).with_series([1, 2, 3, 4, 5]).with_series([1, 2, 3, 4])
  out = tmp_path / "chart.png"
  with pytest.raises(ShapeMismatchError):
    render(spec, out)
  assert not out.exists()


def test_unknown_format_is_render_io_error():
  backend = SkiaBackend()
  canvas = backend.create_canvas(10, 10)
  with pytest.raises(RenderIOError):
    backend.encode(canvas, "gif")


def test_text_metrics_are_positive():
  backend = SkiaBackend()
  assert backend.measure_text_height(10.0) > 0
  assert backend.measure_text_width(10.0, "") == 0
