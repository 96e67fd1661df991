"""Command-line interface for tauri-config."""

import os
import sys
from typing import Optional

import click
from pydantic import ValidationError

from . import __version__
from .common import SelectionCancelled, logger
from .elements import CompileTypes, WriteFile
from .elements.select import SCHEMA_CHANNELS
from .pipeline import Pipeline
from .validation import format_errors, load_config_file, validate_config

CONTEXT_SETTINGS = {
    'help_option_names': ['-h', '--help'],
    'max_content_width': 120
}

DEFAULT_PIPELINE = os.path.join(os.path.dirname(__file__), "pipelines", "extract.yaml")

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option('--log-level', envvar='TAURI_CONFIG_LOG_LEVEL', default='INFO', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False))
@click.option('--log-format', type=click.Choice(['color', 'simple', 'structured']), default='color',
              show_default=True, help='Log line format')
@click.option('--log-file', envvar='TAURI_CONFIG_LOG_FILE', type=click.Path(dir_okay=False),
              help='Also write log records to this file')
def cli(log_level: str, log_format: str, log_file: Optional[str]):
    """Extract pydantic validators from the Tauri configuration schema."""
    logger(level=log_level, format_type=log_format, output='both' if log_file else 'console',
           filename=log_file, reset=True)

@cli.command()
@click.option('--channel', envvar='TAURI_CONFIG_CHANNEL', type=click.Choice(list(SCHEMA_CHANNELS)),
              help='Schema channel to use without prompting')
@click.option('--schema', 'source', envvar='TAURI_CONFIG_SCHEMA', help='Schema URL or local path; skips the prompt')
@click.option('--output', '-o', envvar='TAURI_CONFIG_OUTPUT', type=click.Path(dir_okay=False),
              default='./tauri_schemas.py', show_default=True, help='Where to write the validators')
@click.option('--types-output', envvar='TAURI_CONFIG_TYPES_OUTPUT', type=click.Path(dir_okay=False),
              help='Also write the TypedDict declarations here')
@click.option('--pipeline', 'pipeline_file', type=click.Path(exists=True, dir_okay=False),
              default=DEFAULT_PIPELINE, help='Pipeline definition to run instead of the packaged one')
def extract(channel: Optional[str], source: Optional[str], output: str, types_output: Optional[str], pipeline_file: str):
    """Fetch the schema, generate validators and write them to OUTPUT."""
    click.echo("Welcome to the tauri config extractor!")

    pipeline = Pipeline.from_config(pipeline_file, expand_env=True)
    for element in pipeline.elements:
        if isinstance(element, WriteFile):
            element.configure(path=output)
        elif isinstance(element, CompileTypes) and types_output:
            element.configure(types_output=types_output)

    try:
        written = pipeline.run({'source': source, 'channel': channel})
    except SelectionCancelled as ex:
        raise click.Abort() from ex

    logger().info(f"Validators written to {written}")
    click.echo("Et voilà! 🥳")

@cli.command()
@click.argument('config_file', type=click.Path(exists=True, dir_okay=False))
def validate(config_file: str):
    """Validate a tauri.conf.json file against the bundled validators."""
    data = load_config_file(config_file)
    try:
        validate_config(data)
    except ValidationError as ex:
        for line in format_errors(ex):
            click.echo(line, err=True)
        click.echo(f"{config_file}: {ex.error_count()} validation error(s)", err=True)
        sys.exit(1)
    click.echo("OK")

if __name__ == '__main__':
    cli()
