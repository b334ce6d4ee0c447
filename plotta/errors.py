from __future__ import annotations


class PlottaError(Exception):
  """Base class for every error raised while building or rendering a chart."""


class ConfigError(PlottaError, ValueError):
  pass


class ShapeMismatchError(PlottaError, ValueError):
  pass


class DegenerateScaleError(PlottaError, ValueError):
  pass


class DegenerateAxisError(PlottaError, ValueError):
  pass


class LayoutError(PlottaError, ValueError):
  pass


class EmptySeriesError(PlottaError, ValueError):
  pass


class RenderIOError(PlottaError, OSError):
  pass
