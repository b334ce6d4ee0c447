import json

from plotta import cli_render_chart


def _write(tmp_path, data):
  p = tmp_path / "chart.json"
  p.write_text(json.dumps(data), encoding="utf-8")
  return p


def test_cli_renders_png(tmp_path, capsys):
  src = _write(tmp_path, {
    "title": "Demo",
    "x_axis": {"name": "letter", "labels": ["a", "b", "c"]},
    "series": [[1, 2, 3], [3, 2, 1]],
  })
  out = tmp_path / "out.png"
  rc = cli_render_chart.main([str(src), "--width", "320", "--height", "200", "--out", str(out)])
  assert rc == 0
  assert out.read_bytes()[:4] == b"\x89PNG"
  assert f"Wrote {out}" in capsys.readouterr().out


def test_cli_reports_invalid_chart(tmp_path):
  src = _write(tmp_path, {"width": 320, "height": 200, "series": [[1, 2, 3], [1, 2]]})
  out = tmp_path / "out.png"
  assert cli_render_chart.main([str(src), "--out", str(out)]) == 1
  assert not out.exists()


def test_cli_rejects_missing_file(tmp_path):
  assert cli_render_chart.main([str(tmp_path / "missing.json")]) == 1


def test_cli_reports_non_scalar_label(tmp_path):
  src = _write(tmp_path, {
    "width": 320,
    "height": 200,
    "x_axis": {"name": "x", "labels": [None, "b"]},
    "series": [[1, 2]],
  })
  out = tmp_path / "out.png"
  assert cli_render_chart.main([str(src), "--out", str(out)]) == 1
  assert not out.exists()


def test_cli_zero_width_override_is_rejected(tmp_path):
  src = _write(tmp_path, {"width": 320, "height": 200, "series": [[1, 2, 3]]})
  out = tmp_path / "out.png"
  assert cli_render_chart.main([str(src), "--width", "0", "--out", str(out)]) == 1
  assert not out.exists()
