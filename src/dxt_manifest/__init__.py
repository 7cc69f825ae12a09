import sys
import click

from dxt_manifest.log import logger, set_log_level
from dxt_manifest.settings import ManifestSettings
from dxt_manifest.init_command import InitOutcome, init_extension
from dotenv import load_dotenv


@click.group()
def cli():
    """dxt-manifest - Create manifest.json files for DXT extensions"""
    pass


@cli.command()
@click.argument(
    'directory',
    type=click.Path(file_okay=False, dir_okay=True, exists=True),
    default='.',
    required=False
)
@click.option("-y", "--yes", "non_interactive", is_flag=True, default=False, help="Accept all defaults (non-interactive mode).")
@click.option("-f", "--force", is_flag=True, default=False, help="Overwrite an existing manifest.json without asking.")
def init(directory: str, non_interactive: bool, force: bool) -> None:
    """Create a new DXT extension manifest."""
    load_dotenv()
    settings = ManifestSettings()
    set_log_level(settings.LOG_LEVEL)

    try:
        outcome = init_extension(
            target_path=directory,
            non_interactive=non_interactive,
            force=force,
            settings=settings
        )
    except Exception as e:
        logger.exception(f"Failed to create manifest in {directory}: {e}")
        raise

    if outcome != InitOutcome.CREATED:
        sys.exit(1)


def main():
    cli()
