"""GDP CLI - Command-line interface for Drive document projects."""

import logging
import os

import click
from dotenv import load_dotenv

from gdp import __version__

from .config_commands import config_group as config_module
from .project_commands import project as project_module
from .drive_commands import drive_group as drive_module
from .doc_commands import doc as doc_module


# Configure logging at the application level
if not logging.root.handlers:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO),
                        format='%(asctime)s - %(levelname)s - %(message)s')
# Suppress noisy INFO logs from googleapiclient
logging.getLogger('googleapiclient.discovery').setLevel(logging.WARNING)
logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__, prog_name='gdp')
@click.option('--token-file', default=None, type=click.Path(dir_okay=False),
              help='Authorized-user token JSON to use instead of the configured auth.')
@click.option('--adc', 'use_adc', is_flag=True,
              help='Use Application Default Credentials.')
@click.pass_context
def gdp(ctx, token_file, use_adc):
    """Google Drive Projects (GDP) CLI.

    Browse, create, and edit Drive-backed document projects.
    """
    obj = ctx.ensure_object(dict)
    obj["token_file"] = token_file
    obj["use_adc"] = use_adc


gdp.add_command(config_module, name='config')
gdp.add_command(project_module, name='project')
gdp.add_command(drive_module, name='drive')
gdp.add_command(doc_module, name='doc')


def main():
    """Entry point for the CLI."""
    load_dotenv()
    gdp()


if __name__ == "__main__":
    main()
