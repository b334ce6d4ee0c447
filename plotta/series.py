from __future__ import annotations

from typing import Any, Sequence, Tuple

import numpy as np
import numpy.typing as npt
import skia

from plotta.backend import RasterBackend
from plotta.errors import EmptySeriesError
from plotta.scale import ValueScale
from plotta.theme import ChartTheme


def series_points(
    values: Sequence[float],
    rect: skia.Rect,
    scale: ValueScale,
) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
  n = len(values)
  if n < 2:
    raise EmptySeriesError(f"A series needs at least 2 points to draw a line, got {n}")
  segment_w = float(rect.width()) / (n - 1)
  xs = float(rect.left()) + np.arange(n, dtype=np.float64) * segment_w
  ys = scale.to_pixels(values, float(rect.top()), float(rect.bottom()))
  return xs, ys


def draw_series(
    backend: RasterBackend,
    canvas: Any,
    rect: skia.Rect,
    scale: ValueScale,
    series: Sequence[Sequence[float]],
    theme: ChartTheme,
) -> None:
  # Draw order is input order, later series paint over earlier ones
  for idx, values in enumerate(series):
    color = theme.series_color(idx)
    xs, ys = series_points(values, rect, scale)
    for i in range(1, xs.shape[0]):
      backend.draw_line(canvas, float(xs[i - 1]), float(ys[i - 1]), float(xs[i]), float(ys[i]), color)
