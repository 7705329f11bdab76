"""CLI entry point for typst-templatr."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import click

from typst_templatr import __version__
from typst_templatr.l1_entities.config import TemplatrConfig
from typst_templatr.l1_entities.errors import TemplatrError
from typst_templatr.l2_use_cases.ports.config_store import ConfigStore
from typst_templatr.l3_interface_adapters.gateways.paths import DEFAULT_TEMPLATES_PATH, LOG_DIR
from typst_templatr.l3_interface_adapters.gateways.yaml_config_store import YamlConfigStore
from typst_templatr.l4_frameworks_and_drivers.container import DependencyContainer
from typst_templatr.l4_frameworks_and_drivers.logging_setup import setup_file_logging


def _fail(error: TemplatrError) -> NoReturn:
    click.echo(f'ERROR: {error}', err=True)
    sys.exit(1)


def _container(ctx: click.Context) -> DependencyContainer:
    """Load config and wire use cases; every command except init needs this."""
    store: ConfigStore = ctx.obj['store']
    try:
        return DependencyContainer(store.load(), Path.cwd())
    except TemplatrError as e:
        _fail(e)


@click.group()
@click.option('--debug', is_flag=True, help='Write a debug log to the user log directory.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, debug):
    """A tool to manage Typst templates."""
    if debug:
        setup_file_logging(LOG_DIR)
    ctx.ensure_object(dict)
    ctx.obj.setdefault('store', YamlConfigStore())


@cli.command()
@click.option(
    '--templates_path',
    'templates_path',
    default=DEFAULT_TEMPLATES_PATH,
    show_default=True,
    help='Directory holding the template library.',
)
@click.pass_context
def init(ctx, templates_path):
    """Create or overwrite the configuration file."""
    store: ConfigStore = ctx.obj['store']
    try:
        store.save(TemplatrConfig(templates_path=templates_path))
    except TemplatrError as e:
        _fail(e)
    click.echo('Config file created successfully.')


@cli.command('list')
@click.pass_context
def list_cmd(ctx):
    """List installed templates."""
    library = _container(ctx).library
    try:
        for name in library.list_templates():
            click.echo(f'- {name}')
    except TemplatrError as e:
        _fail(e)


@cli.command()
@click.argument('template_name')
@click.pass_context
def add(ctx, template_name):
    """Link an installed template into the current directory."""
    links = _container(ctx).project_links
    try:
        dest = links.add(template_name)
    except TemplatrError as e:
        _fail(e)
    click.echo(f"Template '{dest.name}' added.")


@cli.command()
@click.argument('template_name')
@click.pass_context
def remove(ctx, template_name):
    """Remove a template link from the current directory."""
    links = _container(ctx).project_links
    try:
        dest = links.remove(template_name)
    except TemplatrError as e:
        _fail(e)
    click.echo(f"Template '{dest.name}' removed.")


@cli.command()
@click.argument('template_path')
@click.option('--force', is_flag=True, help='Overwrite a template of the same name already in the library.')
@click.pass_context
def install(ctx, template_path, force):
    """Copy a template file into the library."""
    library = _container(ctx).library
    try:
        name = library.install(template_path, overwrite=force)
    except TemplatrError as e:
        _fail(e)
    click.echo(f"Template '{name}' installed.")


@cli.command()
@click.argument('template_name')
@click.pass_context
def uninstall(ctx, template_name):
    """Delete a template from the library."""
    library = _container(ctx).library
    try:
        name = library.uninstall(template_name)
    except TemplatrError as e:
        _fail(e)
    click.echo(f"Template '{name}' uninstalled.")
