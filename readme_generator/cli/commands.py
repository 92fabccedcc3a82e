"""CLI commands for the Drupal README Generator.

Provides the Click-based command group 'readme-gen' with subcommands
for generating a module README and for inspecting the scanned metadata.
"""

import logging
from pathlib import Path
from typing import Optional

import click
import yaml

from readme_generator import __version__
from readme_generator.generators.llm_client import create_client
from readme_generator.generators.prompt import build_prompt, serialize_record
from readme_generator.generators.readme_gen import ReadmeGenerator
from readme_generator.scanner.codebase import CodebaseScanner
from readme_generator.scanner.manifest import ManifestError
from readme_generator.scanner.structure import ModuleRecord
from readme_generator.utils.config import (
    AppConfig,
    ConfigurationError,
    default_model,
    load_config,
    resolve_provider,
)
from readme_generator.utils.logging import setup_logging

logger = logging.getLogger(__name__)

_MODULE_PATH = click.Path(exists=True, file_okay=False, dir_okay=True)


def _scan(module_path: str) -> ModuleRecord:
    """Scan a module, turning scan failures into CLI errors."""
    try:
        return CodebaseScanner(module_path).scan()
    except (yaml.YAMLError, ManifestError) as e:
        raise click.ClickException(f"Invalid module manifest: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Could not read module file: {e}") from e


@click.group()
@click.version_option(version=__version__, prog_name="readme-gen")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a config.yaml file.",
)
@click.pass_context
def readme_gen(ctx: click.Context, config_path: Optional[str]) -> None:
    """Drupal README Generator: write a module README.md with an LLM."""
    config = load_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )
    ctx.obj = config


@readme_gen.command("generate-readme")
@click.argument("module_path", type=_MODULE_PATH)
@click.option(
    "--output", "-o", type=click.Path(), default=None, help="Output file path."
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the prompt without calling the API.",
)
@click.pass_obj
def generate_readme(
    config: AppConfig, module_path: str, output: Optional[str], dry_run: bool
) -> None:
    """Generate a README.md file for a Drupal module.

    Scans the module for its manifest, files, functions, classes, hooks,
    controllers, forms and submodules, then asks the configured AI
    provider to write the README.
    """
    record = _scan(module_path)
    click.echo(
        f"Found {len(record.files)} files, {len(record.functions)} functions, "
        f"{len(record.classes)} classes"
    )

    if dry_run:
        request = build_prompt(record, default_model(config.api))
        click.echo(f"Model: {request.model or '(none)'}")
        click.echo(request.prompt)
        click.echo("Dry run complete. No API calls made.")
        return

    try:
        provider = resolve_provider(config.api)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    generator = ReadmeGenerator(create_client(provider), model=provider.model)
    result = generator.generate(record)
    if not result.ok:
        click.echo(f"Warning: {result.content}", err=True)

    output_path = Path(output) if output else Path(module_path) / config.output.filename
    output_path.write_text(result.content, encoding="utf-8")
    logger.info("Wrote %d chars to %s", len(result.content), output_path)
    click.echo(f"AI-generated README.md created at: {output_path}")


@readme_gen.command()
@click.argument("module_path", type=_MODULE_PATH)
def scan(module_path: str) -> None:
    """Print the scanned module metadata as JSON."""
    record = _scan(module_path)
    click.echo(serialize_record(record))
