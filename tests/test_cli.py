"""Tests for the CLI."""

from typer.testing import CliRunner

from animation_studio.cli import app

runner = CliRunner()


def test_inspect_at_last_frame():
    result = runner.invoke(app, ["inspect", "--frame", "29"])
    assert result.exit_code == 0
    assert "29 / 29 (100%)" in result.output
    assert "cubic-bezier(0.25, 0.1, 0.25, 1)" in result.output


def test_inspect_with_preset_and_speed():
    result = runner.invoke(app, ["inspect", "--preset", "linear", "--speed", "2", "--percent", "50"])
    assert result.exit_code == 0
    assert "cubic-bezier(0.00, 0.00, 1.00, 1.00)" in result.output
    assert "Progress dots" in result.output


def test_unknown_component():
    result = runner.invoke(app, ["inspect", "--component", "slider"])
    assert result.exit_code == 1
    assert "Unknown component" in result.output


def test_invalid_bezier():
    result = runner.invoke(app, ["inspect", "--bezier", "1,2"])
    assert result.exit_code == 1
    assert "four comma-separated values" in result.output


def test_render_writes_gif(tmp_path):
    path = tmp_path / "preview.gif"
    result = runner.invoke(app, ["render", "--output", str(path), "--max-frame", "2"])
    assert result.exit_code == 0
    assert path.read_bytes().startswith(b"GIF89")


def test_render_unsupported_format(tmp_path):
    result = runner.invoke(app, ["render", "--output", str(tmp_path / "preview.txt")])
    assert result.exit_code == 1
    assert "Unsupported output format" in result.output


def test_render_reports_unwritable_path(tmp_path):
    path = tmp_path / "missing" / "preview.webp"
    result = runner.invoke(app, ["render", "--output", str(path), "--max-frame", "1"])
    assert result.exit_code == 1
    assert "Failed to save file" in result.output
    assert not path.exists()
