import os


def _int(val: str, default: int) -> int:
  try:
    return int(val)
  except (TypeError, ValueError):
    return default


# Text rendering
FONT_FAMILY = os.getenv("PLOTTA_FONT_FAMILY", "DejaVu Sans")

# Zone used when X-axis labels are timestamps
DEFAULT_TZ = os.getenv("PLOTTA_TZ", "UTC")

# Encoding
JPEG_QUALITY = max(1, min(100, _int(os.getenv("PLOTTA_JPEG_QUALITY", "82"), 82)))

# CLI defaults
IMG_WIDTH = _int(os.getenv("PLOTTA_IMG_WIDTH", "800"), 800)
IMG_HEIGHT = _int(os.getenv("PLOTTA_IMG_HEIGHT", "400"), 400)

LOG_LEVEL = os.getenv("PLOTTA_LOG_LEVEL", "INFO").upper()
