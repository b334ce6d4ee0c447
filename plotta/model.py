from __future__ import annotations

import dataclasses
import math
import numbers
import os
from typing import TYPE_CHECKING, Any, Iterable, Literal, Mapping, Optional, Tuple, Union

from plotta.errors import ConfigError, EmptySeriesError, ShapeMismatchError

if TYPE_CHECKING:
  from plotta.render import ChartRenderer

Label = Union[str, int, float]
Series = Tuple[float, ...]


@dataclasses.dataclass(frozen=True)
class XAxisConfig:
  name: str
  labels: Tuple[Label, ...]
  date_format: Optional[str] = None  # strftime pattern, labels are then unix timestamps
  kind: Literal["x"] = dataclasses.field(default="x", init=False)

  def __post_init__(self):
    object.__setattr__(self, "labels", tuple(self.labels))


@dataclasses.dataclass(frozen=True)
class YAxisConfig:
  name: str
  min: Optional[float] = None
  max: Optional[float] = None
  kind: Literal["y"] = dataclasses.field(default="y", init=False)


AxisConfig = Union[XAxisConfig, YAxisConfig]


def _as_series(values: Iterable[Any]) -> Series:
  try:
    return tuple(float(v) for v in values)
  except (TypeError, ValueError) as exc:
    raise ConfigError(f"Series values must be numeric: {exc}") from exc


def _opt_float(val: Any, field: str) -> Optional[float]:
  if val is None:
    return None
  try:
    return float(val)
  except (TypeError, ValueError) as exc:
    raise ConfigError(f"{field} must be numeric, got {val!r}") from exc


def _check_x_axis(axis: XAxisConfig) -> None:
  if axis.date_format is not None and not isinstance(axis.date_format, str):
    raise ConfigError(f"x_axis.date_format must be a string, got {axis.date_format!r}")
  for idx, label in enumerate(axis.labels):
    if isinstance(label, bool) or not isinstance(label, (str, numbers.Real)):
      raise ConfigError(f"X label {idx} must be a string or a number, got {label!r}")


@dataclasses.dataclass(frozen=True)
class ChartSpec:
  """
  Everything needed to draw one chart.

  Instances are immutable: the with_* methods return a new spec, so a partly
  configured spec can be shared and extended without affecting other users.
  Consistency is checked once, by validate(), when the chart is rendered.
  """
  width: int = 0
  height: int = 0
  title: Optional[str] = None
  x_axis: Optional[XAxisConfig] = None
  y_axis: Optional[YAxisConfig] = None
  series: Tuple[Series, ...] = ()

  def __post_init__(self):
    object.__setattr__(self, "series", tuple(_as_series(s) for s in self.series))

  def with_dimensions(self, width: int, height: int) -> ChartSpec:
    return dataclasses.replace(self, width=width, height=height)

  def with_title(self, title: str) -> ChartSpec:
    return dataclasses.replace(self, title=title)

  def with_x_axis(self, name: str, labels: Iterable[Label], date_format: Optional[str] = None) -> ChartSpec:
    return dataclasses.replace(self, x_axis=XAxisConfig(name=name, labels=tuple(labels), date_format=date_format))

  def with_y_axis(self, name: str, min: Optional[float] = None, max: Optional[float] = None) -> ChartSpec:
    return dataclasses.replace(self, y_axis=YAxisConfig(name=name, min=min, max=max))

  def with_series(self, values: Iterable[float]) -> ChartSpec:
    return dataclasses.replace(self, series=self.series + (_as_series(values),))

  def render(self, path: Union[str, os.PathLike], renderer: Optional[ChartRenderer] = None) -> None:
    from plotta.render import ChartRenderer
    (renderer or ChartRenderer()).render(self, path)

  @property
  def n_points(self) -> int:
    return len(self.series[0]) if self.series else 0

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> ChartSpec:
    if not isinstance(data, Mapping):
      raise ConfigError("Chart definition must be a mapping")
    try:
      width = int(data.get("width", 0))
      height = int(data.get("height", 0))
    except (TypeError, ValueError) as exc:
      raise ConfigError(f"width/height must be integers: {exc}") from exc

    title = data.get("title")
    if title is not None:
      title = str(title)

    x_axis = None
    xd = data.get("x_axis")
    if xd is not None:
      if not isinstance(xd, Mapping) or "labels" not in xd:
        raise ConfigError("x_axis must be a mapping with 'labels'")
      labels = xd["labels"]
      if isinstance(labels, (str, bytes)) or not isinstance(labels, Iterable):
        raise ConfigError("x_axis.labels must be a list")
      x_axis = XAxisConfig(name=str(xd.get("name", "")), labels=tuple(labels), date_format=xd.get("date_format"))
      _check_x_axis(x_axis)

    y_axis = None
    yd = data.get("y_axis")
    if yd is not None:
      if not isinstance(yd, Mapping):
        raise ConfigError("y_axis must be a mapping")
      y_axis = YAxisConfig(
        name=str(yd.get("name", "")),
        min=_opt_float(yd.get("min"), "y_axis.min"),
        max=_opt_float(yd.get("max"), "y_axis.max"),
      )

    raw_series = data.get("series", ())
    if isinstance(raw_series, (str, bytes)) or not isinstance(raw_series, Iterable):
      raise ConfigError("series must be a list of lists")
    series = []
    for s in raw_series:
      if isinstance(s, (str, bytes)) or not isinstance(s, Iterable):
        raise ConfigError("each series must be a list of numbers")
      series.append(_as_series(s))

    return cls(width=width, height=height, title=title, x_axis=x_axis, y_axis=y_axis, series=tuple(series))


def validate(spec: ChartSpec) -> None:
  """Check a spec before anything is drawn. Raises the first problem found."""
  if isinstance(spec.width, bool) or not isinstance(spec.width, int) or spec.width <= 0:
    raise ConfigError(f"width must be a positive integer, got {spec.width!r}")
  if isinstance(spec.height, bool) or not isinstance(spec.height, int) or spec.height <= 0:
    raise ConfigError(f"height must be a positive integer, got {spec.height!r}")

  if not spec.series:
    raise ConfigError("At least one series is required")
  for idx, s in enumerate(spec.series):
    if len(s) == 0:
      raise ConfigError(f"Series {idx} is empty")

  lengths = {len(s) for s in spec.series}
  if len(lengths) > 1:
    raise ShapeMismatchError(f"Series lengths differ: {[len(s) for s in spec.series]}")
  n = spec.n_points

  if spec.x_axis is not None:
    _check_x_axis(spec.x_axis)

  if spec.x_axis is not None and len(spec.x_axis.labels) != n:
    raise ShapeMismatchError(f"X axis has {len(spec.x_axis.labels)} labels for {n} points per series")

  if n < 2:
    raise EmptySeriesError(f"A series needs at least 2 points to draw a line, got {n}")

  for idx, s in enumerate(spec.series):
    if not all(math.isfinite(v) for v in s):
      raise ConfigError(f"Series {idx} contains non-finite values")

  if spec.y_axis is not None:
    for bound in (spec.y_axis.min, spec.y_axis.max):
      if bound is not None and not math.isfinite(bound):
        raise ConfigError(f"Y axis bounds must be finite, got {bound!r}")
