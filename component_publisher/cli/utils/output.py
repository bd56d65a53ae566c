"""Output formatting utilities"""

import logging
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...constants import EMOJI_ERROR, EMOJI_SUCCESS, EMOJI_WARNING
from ...models import PublishResult

console = Console()

# Progress messages of a publish run go through this logger
PROGRESS_LOGGER_NAME = "component_publisher.progress"
progress_logger = logging.getLogger(PROGRESS_LOGGER_NAME)


def format_publish_result(result: PublishResult) -> None:
    """Format and display publish operation result"""
    if result.artifact:
        console.print(
            f"\n[bold]Component:[/bold] {result.artifact.name}@{result.artifact.version}"
        )

    if result.registries:
        table = Table(title="Registries", box=box.SIMPLE)
        table.add_column("#", style="dim", width=3)
        table.add_column("Registry", style="cyan")
        table.add_column("Status")
        table.add_column("Attempts", style="dim")

        attempted = {i: e for i, e in enumerate(result.endpoints)}
        for i, registry in enumerate(result.registries):
            endpoint = attempted.get(i)
            if endpoint is None:
                status = "[dim]skipped[/dim]"
                attempts = "-"
            elif endpoint.success:
                status = f"[green]{EMOJI_SUCCESS} published[/green]"
                attempts = str(endpoint.attempts)
            else:
                status = f"[red]{EMOJI_ERROR} failed[/red]"
                attempts = str(endpoint.attempts)
            table.add_row(str(i + 1), registry, status, attempts)

        console.print(table)

    if result.success:
        lines = [
            f"[green]{EMOJI_SUCCESS}[/green] Publishing completed successfully!",
            "",
            f"[bold]Registries:[/bold] {len(result.published)}",
        ]
        if not result.registries:
            lines.append("[dim]No registries configured, nothing uploaded[/dim]")
        if result.duration:
            lines.append(f"[bold]Duration:[/bold] {result.duration:.2f}s")

        console.print(Panel("\n".join(lines), title="Publish Result", border_style="green"))
    else:
        lines = [f"[red]{EMOJI_ERROR} Publishing failed:[/red]", "", escape(str(result.error))]
        if result.error is not None and result.error.error_code:
            lines.append("")
            lines.append(f"[dim]Error code: {result.error.error_code}[/dim]")

        console.print(Panel("\n".join(lines), title="[bold red]Publish Error[/bold red]",
                            border_style="red"))

        if result.published:
            console.print(
                f"[yellow]{EMOJI_WARNING} Already published to {len(result.published)} "
                f"registr{'y' if len(result.published) == 1 else 'ies'}[/yellow]"
            )


def format_registry_list(registries: List[str], config_path: Optional[str] = None) -> None:
    """Format and display configured registries"""
    if not registries:
        console.print("[yellow]No registries configured[/yellow]")
        return

    table = Table(title="Registries", box=box.SIMPLE)
    table.add_column("#", style="dim", width=3)
    table.add_column("URL", style="cyan")

    for i, registry in enumerate(registries, 1):
        table.add_row(str(i), registry)

    console.print(table)
    if config_path:
        console.print(f"[dim]Config: {config_path}[/dim]")


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]Success:[/green] {message}")
