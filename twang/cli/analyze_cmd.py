# twang/cli/analyze_cmd.py

"""
CLI command summarizing an audio file (level, clipping, pitch estimate).
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click
import numpy as np
from tabulate import tabulate

from twang.core.audio.features import summarize
from twang.core.audio.io import load_audio

logger = logging.getLogger(__name__)


@click.command("analyze")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--sr", type=click.IntRange(min=1), default=None,
              help="Resample to this rate before analysis. [default: native rate]")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table",
              show_default=True, help="Output format.")
def analyze_cmd(input_file: str, sr: Optional[int], output_format: str):
    """Print summary features of an audio file."""
    input_path = Path(input_file)
    try:
        data, sample_rate = load_audio(input_path, sr=sr, mono=True)
    except ValueError as e:
        raise click.UsageError(str(e))
    except Exception as e:
        logger.error(f"Could not load '{input_path}': {e}", exc_info=True)
        raise click.ClickException(f"Could not load '{input_path.name}': {e}")

    metrics = summarize(np.asarray(data, dtype=np.float64), sample_rate)

    if output_format == "json":
        click.echo(json.dumps(metrics, indent=2))
    else:
        click.echo(tabulate(metrics.items(), headers=["Metric", "Value"], floatfmt=".6g"))
