# twang/cli/base_cmd.py

"""
Base setup for CLI commands: configuration loading and logging initialization.
"""

import logging
import sys

import click

from twang.config import TwangConfig, load_configuration
from twang.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


class ConfigGroup(click.Group):
    """
    A custom Click Group that loads configuration and sets up logging before
    invoking the group or its subcommands. The configuration is passed on via
    ctx.obj['config'].
    """
    def invoke(self, ctx: click.Context):
        if ctx.obj is None:
            ctx.obj = {}

        try:
            if 'config' not in ctx.obj:
                config = load_configuration()
                ctx.obj['config'] = config
                verbosity = -1 if ctx.params.get('quiet') else ctx.params.get('verbose', 0)
                setup_logging(config, verbosity)
                logger.debug("Logging setup complete in ConfigGroup.")
            else:
                logger.debug("Configuration already loaded in context.")
        except Exception as e:
            logging.getLogger("twang.error").critical(f"Critical error during CLI setup: {e!r}", exc_info=True)
            print(f"CRITICAL SETUP ERROR: {e!r}", file=sys.stderr)
            ctx.exit(1)

        # Errors raised by the command itself propagate to Click.
        return super().invoke(ctx)


def get_config(ctx: click.Context) -> TwangConfig:
    """Returns the configuration loaded by ConfigGroup (defaults if absent)."""
    if isinstance(ctx.obj, dict) and 'config' in ctx.obj:
        return ctx.obj['config']
    logger.warning("Configuration not found in context; using defaults.")
    return TwangConfig()


# --- Common CLI Options ---
verbose_option = click.option(
    '-v', '--verbose',
    count=True,
    help="Increase verbosity level (-v for INFO, -vv for DEBUG)."
)
quiet_option = click.option(
    '-q', '--quiet',
    is_flag=True,
    default=False,
    help="Suppress all console output except critical errors."
)
