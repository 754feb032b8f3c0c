"""Admin commands for configuration."""

import logging
import sys

from rich.console import Console

from ymd.config import create_default_config, get_config_path, load_settings

console = Console()
logger = logging.getLogger(__name__)


def init_command(force: bool = False) -> None:
    """Create the default configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'ymd init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        logger.debug("Wrote default config to %s", config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    settings = load_settings(config_path)
    console.print(f"[dim]Zone: {settings.zone}[/dim]")
    console.print(f"[dim]Week starts on: {settings.week_start.name.title()}[/dim]")
