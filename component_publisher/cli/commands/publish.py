"""Publish command implementation"""

import sys
from pathlib import Path

import click
from rich.panel import Panel

from ..utils.output import console, format_publish_result, progress_logger
from ..utils.prompts import RichPrompter
from ...api import Publisher


@click.command()
@click.argument('component_path', type=click.Path(path_type=Path))
@click.option('--username', '-u', default=None,
              help='Registry username (prompted when a registry requires it)')
@click.option('--password', '-p', default=None,
              help='Registry password (prompted when a registry requires it)')
@click.option('--registry', '-r', 'registries', multiple=True,
              help='Registry to publish to, in order (overrides configuration)')
@click.option('--timeout', '-t', type=float, default=None,
              help='Upload timeout in seconds')
@click.pass_context
def publish(ctx, component_path, username, password, registries, timeout):
    """Publish a component to all configured registries

    The component is packaged into COMPONENT_PATH/_package, compressed to
    COMPONENT_PATH/package.tar.gz and uploaded to every registry in order.
    The compressed file is removed afterwards.

    Examples:
        # Publish using the configured registries
        component-publisher publish ./my-component

        # Provide credentials up front
        component-publisher publish ./my-component -u alice -p secret

        # Publish to specific registries
        component-publisher publish ./my-component -r https://a.example.com/ -r https://b.example.com/
    """
    try:
        publisher = Publisher(
            prompter=RichPrompter(console),
            registries=list(registries) if registries else None,
            config_path=ctx.obj.config_path,
            timeout=timeout,
            logger=progress_logger
        )

        result = publisher.publish(component_path, username=username, password=password)

        format_publish_result(result)

        if not result.success:
            sys.exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Publishing cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        error_panel = Panel(
            f"[red]An unexpected error occurred:[/red]\n\n{str(e)}\n\n"
            "[dim]This might be a bug. Please report it if the problem persists.[/dim]",
            title="[bold red]Unexpected Error[/bold red]",
            border_style="red"
        )
        console.print(error_panel)

        if ctx.obj.debug:
            console.print("\n[bold]Debug Information:[/bold]")
            console.print_exception()
        else:
            console.print("\n[dim]Run with --debug for more details[/dim]")

        sys.exit(1)
