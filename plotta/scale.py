from __future__ import annotations

import dataclasses
from typing import Optional, Sequence

import numpy as np
import numpy.typing as npt

from plotta.errors import ConfigError, DegenerateScaleError
from plotta.model import YAxisConfig


@dataclasses.dataclass(frozen=True)
class ValueScale:
  min: float
  max: float
  sampled_min: float
  sampled_max: float

  @classmethod
  def from_series(cls, series: Sequence[Sequence[float]], y_axis: Optional[YAxisConfig] = None) -> ValueScale:
    if not series:
      raise ConfigError("Cannot compute a value scale without series")
    if any(len(s) == 0 for s in series):
      raise ConfigError("Cannot compute a value scale from an empty series")

    sampled_min = min(float(np.min(np.asarray(s, dtype=np.float64))) for s in series)
    sampled_max = max(float(np.max(np.asarray(s, dtype=np.float64))) for s in series)

    vmin = sampled_min
    vmax = sampled_max
    if y_axis is not None:
      if y_axis.min is not None:
        vmin = float(y_axis.min)
      if y_axis.max is not None:
        vmax = float(y_axis.max)

    if vmax == vmin:
      raise DegenerateScaleError(f"Value range collapses to a single value ({vmin:g})")
    if vmax < vmin:
      raise DegenerateScaleError(f"Value range is inverted: min={vmin:g} > max={vmax:g}")

    return cls(min=vmin, max=vmax, sampled_min=sampled_min, sampled_max=sampled_max)

  @property
  def span(self) -> float:
    return self.max - self.min

  def to_pixels(self, values: npt.ArrayLike, top: float, bottom: float) -> npt.NDArray[np.float64]:
    # larger values sit higher on the canvas, i.e. at a smaller y
    v = np.asarray(values, dtype=np.float64)
    pct = (v - self.min) / self.span
    return bottom - pct * (bottom - top)
