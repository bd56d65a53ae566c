"""Registry management commands"""

import sys

import click

from ..utils.output import console, format_registry_list, print_error, print_success
from ...api.exceptions import ConfigError
from ...services import ConfigService


@click.group()
def registry():
    """Manage the registries components are published to"""
    pass


@registry.command('add')
@click.argument('url')
@click.pass_context
def add(ctx, url):
    """Add a registry at the end of the publish order

    Examples:
        component-publisher registry add https://registry.example.com/
    """
    service = ConfigService(ctx.obj.config_path)

    try:
        normalized = service.add_registry(url)
    except ConfigError as e:
        print_error(str(e))
        sys.exit(1)

    print_success(f"Registry added: {normalized}")


@registry.command('ls')
@click.pass_context
def list_registries(ctx):
    """List configured registries in publish order"""
    service = ConfigService(ctx.obj.config_path)

    try:
        registries = service.list_registries()
    except Exception as e:
        print_error(f"Failed to read {service.config_path}", e)
        sys.exit(1)

    format_registry_list(registries, str(service.config_path))


@registry.command('remove')
@click.argument('url')
@click.pass_context
def remove(ctx, url):
    """Remove a registry"""
    service = ConfigService(ctx.obj.config_path)

    try:
        service.remove_registry(url)
    except ConfigError as e:
        print_error(str(e))
        sys.exit(1)

    console.print(f"Registry removed: {url}")
