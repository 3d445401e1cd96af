"""
Command-line entry point.
"""

import click

from watermark_manager.config import Settings
from watermark_manager.log import setup_logging
from .session import InputCollector


@click.command(name="watermark-manager")
@click.pass_context
def main(ctx: click.Context):
    """Interactively add a text or image watermark to a picture in the images folder."""
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    collector = InputCollector(settings)
    ctx.exit(collector.run())
