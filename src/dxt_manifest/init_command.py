from enum import Enum
from pathlib import Path
from typing import Optional

import click

from .builder import build_manifest
from .collector import FieldCollector
from .defaults import (
    default_author_info,
    default_basic_info,
    default_optional_fields,
    default_server_config,
    default_urls,
    default_visual_assets,
)
from .errors import ManifestExistsError, UserCancelled
from .prompter import ClickPrompter, Prompter
from .settings import ManifestSettings
from .utilities import read_project_descriptor, write_manifest
from . import sections
from .log import logger


class InitOutcome(str, Enum):
    CREATED = "created"
    CANCELLED = "cancelled"
    EXISTS = "exists"


def print_next_steps() -> None:
    click.echo("\nNext steps:")
    click.echo("1. Ensure all your production dependencies are in this directory")
    click.echo("2. Run 'dxt pack' to create your .dxt file")


def check_existing_manifest(manifest_path:Path, fields:FieldCollector, force:bool) -> None:
    if not manifest_path.exists() or force:
        return
    if not fields.interactive:
        raise ManifestExistsError(manifest_path.name)
    if not fields.confirm(f"{manifest_path.name} already exists. Overwrite?", default=False):
        raise UserCancelled()


def init_extension(
    target_path:str = ".",
    non_interactive:bool = False,
    force:bool = False,
    prompter:Optional[Prompter] = None,
    settings:Optional[ManifestSettings] = None,
) -> InitOutcome:
    settings = settings or ManifestSettings()
    resolved_path = Path(target_path).resolve()
    manifest_path = resolved_path / settings.MANIFEST_FILENAME
    interactive = not non_interactive
    fields = FieldCollector((prompter or ClickPrompter()) if interactive else None, interactive=interactive)

    try:
        check_existing_manifest(manifest_path, fields, force)
    except ManifestExistsError as e:
        logger.warning(f"Refusing to overwrite {manifest_path}")
        click.echo(e.message)
        return InitOutcome.EXISTS
    except UserCancelled:
        click.echo("Cancelled")
        return InitOutcome.CANCELLED

    if interactive:
        click.echo(f"This utility will help you create a {settings.MANIFEST_FILENAME} file for your DXT extension.")
        click.echo("Press ^C at any time to quit.\n")
    else:
        click.echo(f"Creating {settings.MANIFEST_FILENAME} with default values...")

    descriptor = read_project_descriptor(str(resolved_path), settings.DESCRIPTOR_FILENAME)
    try:
        if interactive:
            basic_info = sections.prompt_basic_info(fields, descriptor, str(resolved_path))
            long_description = sections.prompt_long_description(fields, basic_info.description)
            author_info = sections.prompt_author_info(fields, descriptor)
            urls = sections.prompt_urls(fields)
            visual_assets = sections.prompt_visual_assets(fields)
            server_config = sections.prompt_server_config(fields, descriptor)
            tools, tools_generated = sections.prompt_tools(fields)
            prompts, prompts_generated = sections.prompt_prompts(fields)
            compatibility = sections.prompt_compatibility(fields, server_config.server_type)
            user_config = sections.prompt_user_config(fields)
            optional_fields = sections.prompt_optional_fields(fields, descriptor)
        else:
            basic_info = default_basic_info(descriptor, str(resolved_path))
            long_description = None
            author_info = default_author_info(descriptor)
            urls = default_urls()
            visual_assets = default_visual_assets()
            server_config = default_server_config(descriptor)
            tools, tools_generated = [], False
            prompts, prompts_generated = [], False
            compatibility = None
            user_config = {}
            optional_fields = default_optional_fields(descriptor)
    except UserCancelled:
        logger.info("Manifest creation cancelled by the user")
        click.echo("\nCancelled")
        return InitOutcome.CANCELLED

    manifest = build_manifest(
        basic_info,
        long_description,
        author_info,
        urls,
        visual_assets,
        server_config,
        tools,
        tools_generated,
        prompts,
        prompts_generated,
        compatibility,
        user_config,
        optional_fields,
        dxt_version=settings.DXT_VERSION,
    )

    write_manifest(str(manifest_path), manifest, indent=settings.MANIFEST_INDENT)
    click.echo(f"\nCreated {settings.MANIFEST_FILENAME} at {manifest_path}")
    print_next_steps()
    return InitOutcome.CREATED
