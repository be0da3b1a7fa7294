import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from zoomphone.client import PhoneClient
from zoomphone.config import get_config
from zoomphone.exceptions import ZoomPhoneError
from zoomphone.models.accounts import AccountSettingsQuery
from zoomphone.models.base import PaginationOptions
from zoomphone.models.blocked_list import ListBlockedListRequest

console = Console()
app = typer.Typer(
    name='zoomphone',
    help='Query the Zoom Phone API from the command line',
    no_args_is_help=True,
)

ConfigOption = Annotated[
    str | None,
    typer.Option('--config', '-c', help='Path to configuration file (YAML)'),
]
VerboseOption = Annotated[
    bool, typer.Option('--verbose', '-v', help='Log HTTP requests to stderr')
]


def _client(config_path: str | None, verbose: bool) -> PhoneClient:
    config = get_config(config_path)
    logging.basicConfig(level=logging.DEBUG if verbose else config.log_level.upper())
    return PhoneClient.from_config(config)


@app.command('account-settings')
def account_settings(
    setting_type: Annotated[
        str | None,
        typer.Option(
            '--setting-type', '-s', help='Comma separated setting names, e.g. sms,voicemail'
        ),
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print account-level phone settings as JSON."""
    try:
        client = _client(config, verbose)
        settings = client.phone.accounts.get_account_settings(
            AccountSettingsQuery(setting_type=setting_type)
        )
    except ZoomPhoneError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)

    console.print_json(json.dumps(settings.model_dump(mode='json', exclude_none=True)))


@app.command('blocked-list')
def blocked_list(
    page_size: Annotated[
        int | None, typer.Option('--page-size', help='Entries per page')
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Walk every page of the account's blocked list and print it as a table."""
    table = Table('ID', 'Phone number', 'Match', 'Block type', 'Status', 'Comment')
    request = ListBlockedListRequest(pagination=PaginationOptions(page_size=page_size))

    try:
        client = _client(config, verbose)
        for entry in client.paginate(client.phone.blocked_list.list_blocked_list, request).items():
            table.add_row(
                entry.id,
                entry.phone_number or '',
                entry.match_type or '',
                entry.block_type or '',
                entry.status or '',
                entry.comment or '',
            )
    except ZoomPhoneError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)

    console.print(table)


@app.command()
def version() -> None:
    """Show the version of zoomphone."""
    from zoomphone import __version__

    console.print(f'zoomphone version: {__version__}')


if __name__ == '__main__':
    app()
