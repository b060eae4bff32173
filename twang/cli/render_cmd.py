# twang/cli/render_cmd.py

"""
CLI command rendering a named patch into an audio file.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from twang.core.audio.io import save_audio
from twang.core.patches import PATCHES, get_patch
from twang.core.synth import Synth
from .base_cmd import get_config

logger = logging.getLogger(__name__)


@click.command("render")
@click.option("-p", "--patch", type=click.Choice(sorted(PATCHES)), default=None,
              help="Patch to render. [default: from config, 'voice']")
@click.option("-f", "--frequency", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Fundamental frequency in Hz. [default: from config, 440]")
@click.option("-d", "--duration", type=click.FloatRange(min=0), default=None,
              help="Duration in seconds. [default: from config, 5]")
@click.option("-r", "--sample-rate", type=click.IntRange(min=1), default=None,
              help="Sample rate in Hz. [default: from config, 48000]")
@click.option("--subtype", type=str, default=None,
              help="soundfile subtype, e.g. PCM_16, PCM_24, FLOAT. [default: from config]")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Output audio file. Relative names go to the configured output directory. "
                   "[default: <patch>.wav]")
@click.pass_context
def render_cmd(
    ctx,
    patch: Optional[str],
    frequency: Optional[float],
    duration: Optional[float],
    sample_rate: Optional[int],
    subtype: Optional[str],
    output: Optional[str],
):
    """Render a synthesis patch to an audio file."""
    config = get_config(ctx)
    defaults = config.defaults
    patch = patch or defaults.patch
    frequency = frequency if frequency is not None else defaults.frequency
    duration = duration if duration is not None else defaults.duration
    sample_rate = sample_rate if sample_rate is not None else defaults.sample_rate
    subtype = subtype or defaults.subtype

    output_path = Path(output) if output else Path(f"{patch}.wav")
    if not output_path.is_absolute() and output_path.parent == Path("."):
        output_path = config.paths.output_dir / output_path

    logger.info(f"Rendering patch '{patch}' at {frequency} Hz for {duration}s ({sample_rate} Hz).")
    try:
        synth = Synth(get_patch(patch, frequency), sample_rate=sample_rate)
        data = synth.render_seconds(duration)
        save_audio(data, sample_rate, output_path, subtype=subtype)
    except KeyError as e:
        raise click.BadParameter(str(e.args[0]), param_hint="'--patch'")
    except ValueError as e:
        raise click.UsageError(f"Error during rendering: {e}")

    click.echo(f"Rendered {data.size} samples of '{patch}' to '{output_path}'.")
