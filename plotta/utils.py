import math
from typing import List, Optional, Sequence, Tuple

RGB = Tuple[int, int, int]

# Series colors, assigned by position modulo the palette length
PALETTE_3 = ("0000ff", "ff0000", "00ff00")


def hex_to_rgb(color_hex: str) -> RGB:
  s = color_hex.lstrip("#")
  if len(s) != 6:
    raise ValueError(f"Expected a 6-digit hex color, got {color_hex!r}")
  return int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)


def fmt_number(value: float, precision: Optional[int] = None) -> str:
  """Plain text for a number; without a precision the shortest exact form is used."""
  if not math.isfinite(value):
    return str(value)
  # snap float noise around zero so the first tick never reads "-0"
  if abs(value) < 1e-12:
    value = 0.0
  if value.is_integer() and abs(value) < 1e15:
    return str(int(value))
  if precision is None:
    return repr(float(value))
  return f"{value:.{precision}g}"


def fmt_numbers(values: Sequence[float], min_precision: int = 6) -> List[str]:
  """
  Label a run of tick values with as few significant digits as keep them apart.

  Starts at min_precision and adds digits until distinct values get distinct
  labels, so 0.1-steps stay "0.3" rather than "0.30000000000000004" while
  ticks on a large offset such as 1000000.5, 1000001.5 are not collapsed.
  """
  n_distinct = len(set(values))
  labels: List[str] = []
  for precision in range(min_precision, 18):
    labels = [fmt_number(v, precision) for v in values]
    if len(set(labels)) == n_distinct:
      return labels
  return [fmt_number(v) for v in values]
