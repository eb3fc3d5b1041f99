"""CLI: tgbots send, tgbots forward"""

import json
from typing import Optional

import click
from rich.console import Console

from tgbots.errors import TelegramBotsError
from tgbots.request import ParseMode

console = Console()


def _get_bot():
    from tgbots.cli.main import _get_bot
    return _get_bot()


def _fail(exc: TelegramBotsError) -> None:
    from tgbots.cli.main import _fail
    _fail(exc)


@click.command("send")
@click.argument("chat_id")
@click.argument("text")
@click.option("--parse-mode", type=click.Choice([m.value for m in ParseMode]), default=None)
@click.option("--silent", is_flag=True, help="Send without notification")
@click.option("--no-preview", is_flag=True, help="Disable link previews")
@click.option("--reply-to", type=int, default=None, help="Message id to reply to")
@click.option("--json-output", "--json", is_flag=True)
def send_cmd(
    chat_id: str, text: str, parse_mode: Optional[str], silent: bool,
    no_preview: bool, reply_to: Optional[int], json_output: bool,
):
    """Send a text message."""
    bot = _get_bot()
    try:
        request = bot.send_message(chat_id, text)
        if parse_mode:
            request.set_parse_mode(parse_mode)
        if silent:
            request.set_notification(False)
        if no_preview:
            request.set_web_page_preview(False)
        if reply_to is not None:
            request.reply_to(reply_to)
        result = request.send().result
    except TelegramBotsError as e:
        _fail(e)
    finally:
        bot.close()
    if json_output:
        click.echo(json.dumps(result, indent=2))
        return
    console.print(f"[green]Sent message {result.get('message_id')} to {chat_id}.[/green]")


@click.command("forward")
@click.argument("chat_id")
@click.argument("from_chat_id")
@click.argument("message_id", type=int)
@click.option("--silent", is_flag=True, help="Forward without notification")
def forward_cmd(chat_id: str, from_chat_id: str, message_id: int, silent: bool):
    """Forward a message between chats."""
    bot = _get_bot()
    try:
        request = bot.forward_message(chat_id, from_chat_id, message_id)
        if silent:
            request.set_notification(False)
        result = request.send().result
    except TelegramBotsError as e:
        _fail(e)
    finally:
        bot.close()
    console.print(f"[green]Forwarded as message {result.get('message_id')}.[/green]")
