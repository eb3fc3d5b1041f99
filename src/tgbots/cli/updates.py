"""CLI: tgbots updates"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from tgbots.errors import TelegramBotsError
from tgbots.updates import iter_updates

console = Console()


def _get_bot():
    from tgbots.cli.main import _get_bot
    return _get_bot()


def _fail(exc: TelegramBotsError) -> None:
    from tgbots.cli.main import _fail
    _fail(exc)


def _summary(update) -> str:
    item = update.item
    message = update.message
    if message is not None:
        return message.text or message.caption or ""
    if hasattr(item, "query"):
        return item.query
    return getattr(item, "data", None) or ""


@click.command("updates")
@click.option("--offset", type=int, default=None)
@click.option("--limit", type=int, default=None)
@click.option("--json-output", "--json", is_flag=True)
def updates_cmd(offset: Optional[int], limit: Optional[int], json_output: bool):
    """Fetch pending updates (confirms them on the server)."""
    bot = _get_bot()
    try:
        updates = list(iter_updates(bot, offset=offset, limit=limit))
    except TelegramBotsError as e:
        _fail(e)
    finally:
        bot.close()

    if json_output:
        click.echo(json.dumps(
            [{"update_id": u.id, "type": u.type.value, u.type.value: u.payload} for u in updates],
            indent=2,
        ))
        return

    table = Table(title=f"Updates ({len(updates)})")
    table.add_column("ID", style="bold")
    table.add_column("Type")
    table.add_column("From")
    table.add_column("Content")
    for u in updates:
        sender = u.item.from_user
        table.add_row(
            str(u.id),
            u.type.value,
            (sender.username or sender.full_name) if sender else "",
            _summary(u),
        )
    console.print(table)
