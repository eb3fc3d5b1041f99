"""
tgbots CLI: `tgbots` command.

Commands:
  tgbots config set-token <token>   Save the bot token
  tgbots me                         Show the bot account
  tgbots send <chat> <text>         Send a text message
  tgbots forward <chat> <from> <id> Forward a message
  tgbots updates                    Fetch pending updates
  tgbots file-url <file-id>         Resolve a download URL
"""

import json
import logging

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install tgbots[cli]")

from tgbots.bot import Bot
from tgbots.config import TOKEN_ENV, load_config, resolve_token
from tgbots.errors import TelegramBotsError

console = Console()


def _get_bot() -> Bot:
    token = resolve_token()
    if not token:
        console.print(f"[red]No bot token. Set {TOKEN_ENV} or run `tgbots config set-token`.[/red]")
        raise SystemExit(1)
    cfg = load_config()
    kwargs = {"username": cfg.get("username")}
    if cfg.get("base_url"):
        kwargs["base_url"] = cfg["base_url"]
    return Bot(token, **kwargs)


def _fail(exc: TelegramBotsError) -> None:
    console.print(f"[red]{exc.code}: {exc}[/red]")
    raise SystemExit(1)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP calls")
def main(verbose: bool):
    """tgbots CLI: talk to the Telegram Bot API."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command("me")
@click.option("--json-output", "--json", is_flag=True)
def me_cmd(json_output: bool):
    """Show the bot account behind the token."""
    bot = _get_bot()
    try:
        result = bot.get_me().send().result
    except TelegramBotsError as e:
        _fail(e)
    finally:
        bot.close()
    if json_output:
        click.echo(json.dumps(result, indent=2))
        return
    console.print(f"[green]@{result.get('username')}[/green] {result.get('first_name', '')} (ID: {result.get('id')})")


@main.command("file-url")
@click.argument("file_id")
def file_url_cmd(file_id: str):
    """Resolve a file_id into a download URL."""
    bot = _get_bot()
    try:
        result = bot.get_file(file_id).send().result
    except TelegramBotsError as e:
        _fail(e)
    finally:
        bot.close()
    click.echo(bot.file_url(result["file_path"]))


# Register subcommands from separate modules
from tgbots.cli.config import config
from tgbots.cli.messages import send_cmd, forward_cmd
from tgbots.cli.updates import updates_cmd

main.add_command(config)
main.add_command(send_cmd)
main.add_command(forward_cmd)
main.add_command(updates_cmd)


if __name__ == "__main__":
    main()
