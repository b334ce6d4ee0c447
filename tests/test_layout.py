import pytest

from plotta.errors import LayoutError
from plotta.layout import compute_layout
from plotta.model import ChartSpec
from plotta.theme import ChartTheme


def test_layout_regions_for_titled_chart_with_axes(backend, theme):
  spec = (
    ChartSpec()
    .with_dimensions(800, 400)
    .with_title("Demo")
    .with_x_axis("x", ["a", "b"])
    .with_y_axis("y")
    .with_series([1, 2])
  )
  layout = compute_layout(spec, backend, theme)

  # fake metrics: 6 px per char at size 10, text height == font size
  title_w = 6.0 * 4 * theme.title_font_size / 10.0
  assert layout.title_origin == ((800 - title_w) / 2.0, 10.0)

  y_w = theme.y_label_reserve_w + theme.tick_length + 10.0 + theme.element_spacing
  x_h = theme.tick_length + 2 * (10.0 + theme.element_spacing)
  plot = layout.plot_rect
  assert plot.left() == pytest.approx(10 + y_w)
  assert plot.top() == pytest.approx(10 + theme.title_font_size + theme.element_spacing)
  assert plot.right() == pytest.approx(790)
  assert plot.bottom() == pytest.approx(400 - 10 - x_h)

  y_rect = layout.y_axis_rect
  assert (y_rect.left(), y_rect.right()) == (10.0, plot.left())
  x_rect = layout.x_axis_rect
  assert x_rect.top() == plot.bottom()
  assert x_rect.bottom() == pytest.approx(390.0)


def test_layout_without_title_or_x_axis(backend, theme):
  spec = ChartSpec(width=300, height=200, series=((1.0, 2.0),))
  layout = compute_layout(spec, backend, theme)
  assert layout.title_origin is None
  plot = layout.plot_rect
  assert plot.top() == 10.0
  assert plot.bottom() == 190.0
  assert plot.left() == pytest.approx(10 + theme.y_label_reserve_w + theme.tick_length)


def test_title_is_centered(backend):
  theme = ChartTheme(title_font_size=10.0)
  spec = ChartSpec(width=200, height=200, title="abcdefghij", series=((1.0, 2.0),))
  x, _ = compute_layout(spec, backend, theme).title_origin
  assert x == pytest.approx((200 - 60) / 2.0)


@pytest.mark.parametrize("width, height", [(60, 400), (800, 40), (62, 30)])
def test_canvas_too_small_raises(backend, theme, width, height):
  spec = ChartSpec(width=width, height=height, title="t", series=((1.0, 2.0),)).with_x_axis("x", ["a", "b"])
  with pytest.raises(LayoutError):
    compute_layout(spec, backend, theme)


def test_margins_come_from_theme(backend):
  theme = ChartTheme(outer_margin=0, y_label_reserve_w=0, tick_length=0)
  spec = ChartSpec(width=100, height=50, series=((1.0, 2.0),))
  plot = compute_layout(spec, backend, theme).plot_rect
  assert (plot.left(), plot.top(), plot.right(), plot.bottom()) == (0.0, 0.0, 100.0, 50.0)
