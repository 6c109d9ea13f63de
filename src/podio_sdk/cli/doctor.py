"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from podio_sdk.client import PodioClient
from podio_sdk.core.config import AppSettings, write_user_env_vars
from podio_sdk.core.errors import PodioError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Authenticated round trip against a cheap read endpoint."""

    try:
        async with PodioClient(settings) as podio:
            totals = await podio.contacts.get_contact_totals()
    except PodioError as exc:
        status = getattr(exc, "status_code", None)
        return False, f"HTTP {status}" if status else str(exc)
    user_count = totals.user.count if totals.user else 0
    return True, f"{user_count} user contacts"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="podio-sdk Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)
    if settings.access_token:
        table.add_row("Access token", "OK", "Configured")
        ok_api, detail_api = asyncio.run(_check_api(settings))
        table.add_row("API round trip", "OK" if ok_api else "FAIL", detail_api)
    else:
        table.add_row("Access token", "MISSING", "Run `podio-sdk doctor set-token`")

    _console.print(table)


@app.command(name="set-token")
def set_token(
    token: str = typer.Option(..., prompt="Access token", hide_input=True),
    base_url: str | None = typer.Option(None, help="Override the API base URL."),
) -> None:
    """Store the access token (and optional base URL) in the user config .env."""

    token = token.strip()
    if not token:
        raise typer.BadParameter("token is required")

    env_path = write_user_env_vars(
        {
            "PODIO_ACCESS_TOKEN": token,
            "PODIO_API_BASE_URL": base_url.strip() if base_url else None,
        }
    )
    _console.print(f"[green]Saved config to:[/green] {env_path}")
