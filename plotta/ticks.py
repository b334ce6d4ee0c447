from __future__ import annotations

import dataclasses
import math
from typing import List, Optional, Protocol

import numpy as np

from plotta.dates import DateFormatter, format_timestamp
from plotta.errors import ConfigError, DegenerateAxisError
from plotta.model import Label, XAxisConfig, YAxisConfig
from plotta.scale import ValueScale
from plotta.theme import ChartTheme
from plotta.utils import fmt_number, fmt_numbers


@dataclasses.dataclass(frozen=True)
class Tick:
  pos: float  # pixel coordinate along the axis
  value: float  # data value (Y) or label index (X)
  label: str


class XTickPlanner(Protocol):
  def select(self, n_labels: int) -> List[int]:
    """Return the label indices that get a tick, in increasing order."""
    ...


class LogStrideXTicks:
  """
  Thins out X labels based on the order of magnitude of their count.

  With L labels the stride is 10^(floor(log10 L) - 1) (at least 1), which gives
  T = L // stride ticks; ticks are then taken every L // (T - 1) labels. Up to
  99 labels every label is kept, 1000 labels end up with 10 ticks.
  """

  def select(self, n_labels: int) -> List[int]:
    if n_labels < 1:
      raise DegenerateAxisError("X axis has no labels")
    # floor(log10(n)) for a positive int, without float rounding at powers of ten
    exp = len(str(n_labels)) - 1
    stride = 10 ** (exp - 1) if exp >= 1 else 1
    count = n_labels // stride
    if count < 2:
      raise DegenerateAxisError(f"X axis with {n_labels} label(s) yields {count} tick(s), need at least 2")
    offset = n_labels // (count - 1)
    return [min(i * offset, n_labels - 1) for i in range(count)]


def y_tick_values(scale: ValueScale, count: int) -> List[float]:
  step = scale.span / count
  return [scale.min + i * step for i in range(count)]


def plan_y_ticks(scale: ValueScale, top: float, bottom: float, count: int = 10) -> List[Tick]:
  values = y_tick_values(scale, count)
  ys = scale.to_pixels(values, top, bottom)
  labels = fmt_numbers(values)
  return [Tick(pos=float(y), value=v, label=label) for v, y, label in zip(values, ys, labels)]


def label_text(label: Label, date_format: Optional[str], date_formatter: DateFormatter = format_timestamp) -> str:
  if not date_format:
    return label if isinstance(label, str) else fmt_number(float(label))
  if isinstance(label, bool):
    raise ConfigError(f"Date-formatted X label must be a timestamp, got {label!r}")
  try:
    ts = float(label)
  except (TypeError, ValueError) as exc:
    raise ConfigError(f"Date-formatted X label must be a timestamp, got {label!r}") from exc
  if not math.isfinite(ts):
    raise ConfigError(f"Date-formatted X label must be a finite timestamp, got {label!r}")
  try:
    return date_formatter(ts, date_format)
  except (OverflowError, ValueError, OSError) as exc:
    raise ConfigError(f"Cannot format X label {label!r} with {date_format!r}: {exc}") from exc


def plan_x_ticks(
    axis: XAxisConfig,
    left: float,
    right: float,
    planner: Optional[XTickPlanner] = None,
    date_formatter: DateFormatter = format_timestamp,
) -> List[Tick]:
  planner = planner or LogStrideXTicks()
  indices = planner.select(len(axis.labels))
  if len(indices) < 2:
    raise DegenerateAxisError(f"X tick planner selected {len(indices)} tick(s), need at least 2")
  xs = np.linspace(left, right, num=len(indices), dtype=np.float64)
  return [
    Tick(pos=float(x), value=float(idx), label=label_text(axis.labels[idx], axis.date_format, date_formatter))
    for idx, x in zip(indices, xs)
  ]


def reserved_y_axis_width(axis: Optional[YAxisConfig], label_h: float, theme: ChartTheme) -> float:
  w = theme.y_label_reserve_w + theme.tick_length
  if axis is not None and axis.name:
    # rotated axis name reads bottom-to-top left of the tick labels
    w += label_h + theme.element_spacing
  return float(w)


def reserved_x_axis_height(axis: Optional[XAxisConfig], label_h: float, theme: ChartTheme) -> float:
  if axis is None:
    return 0.0
  h = theme.tick_length + label_h + theme.element_spacing
  if axis.name:
    h += label_h + theme.element_spacing
  return float(h)
