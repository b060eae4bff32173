# twang/cli/main.py

"""
Main entry point for the twang CLI application.
Uses Click for command-line interface handling.
"""

import logging

import click
from tabulate import tabulate

from twang.version import __version__
from twang.core.patches import list_patches
from .base_cmd import ConfigGroup, verbose_option, quiet_option
from .render_cmd import render_cmd
from .analyze_cmd import analyze_cmd

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


@click.group(context_settings=CONTEXT_SETTINGS, cls=ConfigGroup)
@click.version_option(__version__, '-V', '--version', package_name='twang', prog_name='twang')
@verbose_option
@quiet_option
@click.pass_context
def main_cli(ctx, verbose: int, quiet: bool):
    """
    twang: sample-by-sample waveform synthesis.

    Configuration is loaded from:
    Defaults -> ./twang.toml -> ~/.config/twang/twang.toml -> Env Vars (TWANG_*)

    Use -v for verbose output, -vv for debug output, -q for quiet mode.
    """
    logger.debug(f"twang CLI group invoked (verbose={verbose}, quiet={quiet}).")


@main_cli.command("patches")
def patches_cmd():
    """List the available synthesis patches."""
    click.echo(tabulate(list_patches(), headers=["Patch", "Description"]))


main_cli.add_command(render_cmd)
main_cli.add_command(analyze_cmd)

cli = main_cli

if __name__ == "__main__":
    cli()
