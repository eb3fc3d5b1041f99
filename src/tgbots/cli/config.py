"""CLI: tgbots config set-token|set-username|show|clear"""

import click
from rich.console import Console

from tgbots import config as settings

console = Console()


@click.group()
def config():
    """Saved bot settings."""


@config.command("set-token")
@click.argument("token")
def config_set_token(token: str):
    """Save the bot token to the config file."""
    if ":" not in token:
        console.print("[red]That does not look like a bot token (expected <id>:<secret>).[/red]")
        raise SystemExit(1)
    cfg = settings.load_config()
    settings.save_config({**cfg, "token": token})
    console.print(f"[green]Token saved for bot {token.split(':', 1)[0]}.[/green]")


@config.command("set-username")
@click.argument("username")
def config_set_username(username: str):
    """Save the bot username."""
    cfg = settings.load_config()
    settings.save_config({**cfg, "username": username.lstrip("@")})
    console.print(f"[green]Username set to @{username.lstrip('@')}.[/green]")


@config.command("show")
def config_show():
    """Show the saved settings (token masked)."""
    cfg = settings.load_config()
    if not cfg:
        console.print("[yellow]No saved settings.[/yellow]")
        return
    for key, value in cfg.items():
        if key == "token":
            value = value.split(":", 1)[0] + ":***"
        console.print(f"{key}: {value}")


@config.command("clear")
def config_clear():
    """Remove all saved settings."""
    settings.save_config({})
    console.print("[green]Settings cleared.[/green]")
