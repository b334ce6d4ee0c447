from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Load .env so config picks env vars
load_dotenv(find_dotenv(), override=False)

from plotta.config import IMG_HEIGHT, IMG_WIDTH
from plotta.errors import ConfigError, PlottaError
from plotta.logging_conf import setup_logging
from plotta.model import ChartSpec
from plotta.render import ChartRenderer

logger = logging.getLogger(__name__)


def _load_spec(path: Path) -> ChartSpec:
  try:
    data = json.loads(path.read_text(encoding="utf-8"))
  except (OSError, json.JSONDecodeError) as exc:
    raise PlottaError(f"Cannot read chart definition {path}: {exc}") from exc
  if not isinstance(data, dict):
    raise ConfigError(f"Chart definition in {path} must be a JSON object")
  data.setdefault("width", IMG_WIDTH)
  data.setdefault("height", IMG_HEIGHT)
  return ChartSpec.from_dict(data)


def main(argv=None) -> int:
  p = argparse.ArgumentParser(description="Render a line chart from a JSON definition to PNG or JPEG")
  p.add_argument("spec", type=Path, help="Chart definition (JSON: width, height, title, x_axis, y_axis, series)")
  p.add_argument("--width", type=int, help="Override image width")
  p.add_argument("--height", type=int, help="Override image height")
  p.add_argument("--title", help="Override chart title")
  p.add_argument("--out", type=Path, default=Path("chart.png"), help="Output file (.png, .jpg or .jpeg)")
  p.add_argument("--debug", action="store_true", help="Log layout and tick details")
  args = p.parse_args(argv)

  setup_logging(logging.DEBUG if args.debug else None)

  t0 = time.time()
  try:
    spec = _load_spec(args.spec)
    if args.width is not None or args.height is not None:
      spec = spec.with_dimensions(
        args.width if args.width is not None else spec.width,
        args.height if args.height is not None else spec.height,
      )
    if args.title is not None:
      spec = spec.with_title(args.title)
    t_load = time.time()

    ChartRenderer().render(spec, args.out)
  except PlottaError as exc:
    logger.error("Render failed: %s", exc)
    return 1
  t1 = time.time()

  print(
    "load={:.1f}ms render+encode={:.1f}ms total={:.1f}ms size={:.1f}KB".format(
      1000 * (t_load - t0),
      1000 * (t1 - t_load),
      1000 * (t1 - t0),
      args.out.stat().st_size / 1024.0,
    )
  )
  print(f"Wrote {args.out}")
  return 0


if __name__ == "__main__":
  raise SystemExit(main())
