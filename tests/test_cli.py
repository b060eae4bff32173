# tests/test_cli.py

"""
Tests for the twang CLI (render, patches, analyze).
"""

import json
from pathlib import Path

import pytest
import soundfile as sf
from click.testing import CliRunner

from twang.cli.main import cli
from twang.config import loaders
from twang.version import __version__


@pytest.fixture
def runner(tmp_path: Path, monkeypatch) -> CliRunner:
    """CliRunner working inside tmp_path with file logging and user config disabled."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(loaders, "USER_CONFIG_FILE", tmp_path / "no_user_config.toml")
    monkeypatch.setenv("TWANG_LOGGING_LOG_FILE_ENABLED", "false")
    return CliRunner()


def test_cli_help(runner: CliRunner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Commands:" in result.output
    for command in ("render", "patches", "analyze"):
        assert command in result.output

def test_cli_version(runner: CliRunner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert f"twang, version {__version__}" in result.output.lower()

def test_patches_command(runner: CliRunner):
    result = runner.invoke(cli, ["patches"])
    assert result.exit_code == 0, result.output
    assert "Patch" in result.output
    assert "voice" in result.output
    assert "square" in result.output

def test_render_command(runner: CliRunner, tmp_path: Path):
    out_file = tmp_path / "a4.wav"
    args = ["render", "--patch", "sine", "--frequency", "440", "--duration", "0.25",
            "--sample-rate", "8000", "--output", str(out_file)]
    result = runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Rendered 2000 samples" in result.output

    data, sr = sf.read(str(out_file), dtype="float64")
    assert sr == 8000
    assert data.shape == (2000,)

def test_render_uses_config_defaults(runner: CliRunner, tmp_path: Path):
    (tmp_path / "twang.toml").write_text(
        "[defaults]\nsample_rate = 4000\nduration = 0.5\npatch = 'triangle'\n"
    )
    result = runner.invoke(cli, ["render"])
    assert result.exit_code == 0, result.output

    out_file = tmp_path / "twang_output" / "triangle.wav"
    assert out_file.is_file()
    info = sf.info(str(out_file))
    assert info.samplerate == 4000
    assert info.frames == 2000

def test_render_passes_arguments_to_save(runner: CliRunner, tmp_path: Path, mocker):
    mock_save = mocker.patch("twang.cli.render_cmd.save_audio")
    out_file = tmp_path / "voice.flac"
    result = runner.invoke(cli, ["render", "-p", "voice", "-d", "0.1", "-r", "1000",
                                 "--subtype", "PCM_24", "-o", str(out_file)])
    assert result.exit_code == 0, result.output
    mock_save.assert_called_once()
    data, sr, path = mock_save.call_args.args
    assert data.shape == (100,)
    assert sr == 1000
    assert path == out_file
    assert mock_save.call_args.kwargs == {"subtype": "PCM_24"}

def test_render_rejects_unknown_patch(runner: CliRunner):
    result = runner.invoke(cli, ["render", "--patch", "kazoo"])
    assert result.exit_code != 0
    assert "kazoo" in result.output

def test_render_rejects_bad_extension(runner: CliRunner, tmp_path: Path):
    result = runner.invoke(cli, ["render", "-d", "0.01", "-o", str(tmp_path / "out.xyz")])
    assert result.exit_code == 2
    assert "Unsupported audio output extension" in result.output

def test_analyze_command(runner: CliRunner, tmp_path: Path):
    out_file = tmp_path / "tone.wav"
    render = runner.invoke(cli, ["render", "-p", "sine", "-f", "440", "-d", "0.5",
                                 "-r", "8000", "-o", str(out_file)])
    assert render.exit_code == 0, render.output

    result = runner.invoke(cli, ["analyze", str(out_file), "--format", "json"])
    assert result.exit_code == 0, result.output
    metrics = json.loads(result.stdout)
    assert metrics["sample_rate"] == 8000
    assert metrics["samples"] == 4000
    assert metrics["estimated_frequency_hz"] == pytest.approx(440.0, rel=0.02)

    table = runner.invoke(cli, ["analyze", str(out_file)])
    assert table.exit_code == 0
    assert "estimated_frequency_hz" in table.output

def test_analyze_missing_file(runner: CliRunner, tmp_path: Path):
    result = runner.invoke(cli, ["analyze", str(tmp_path / "missing.wav")])
    assert result.exit_code == 2

def test_quiet_and_verbose_flags(runner: CliRunner):
    assert runner.invoke(cli, ["-q", "patches"]).exit_code == 0
    assert runner.invoke(cli, ["-vv", "patches"]).exit_code == 0

def test_setup_failure_exits_with_error(runner: CliRunner, mocker):
    mocker.patch("twang.cli.base_cmd.load_configuration", side_effect=RuntimeError("boom"))
    result = runner.invoke(cli, ["patches"])
    assert result.exit_code == 1
