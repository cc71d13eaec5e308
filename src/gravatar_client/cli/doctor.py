"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from gravatar_client.adapters.http_client import build_client
from gravatar_client.adapters.image_saver import supported_formats
from gravatar_client.core.config import ENV_PREFIX, AppSettings, get_user_env_file, write_user_env_vars
from gravatar_client.core.errors import UnsupportedAlgorithmError
from gravatar_client.core.hashing import MD5, SHA256, resolve_algorithm

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

TOKEN_ENV_VAR = f"{ENV_PREFIX}API_TOKEN"


def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.head(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


def _check_algorithms() -> tuple[bool, str]:
    try:
        for name in (MD5, SHA256):
            resolve_algorithm(name)
    except UnsupportedAlgorithmError as exc:
        return False, str(exc)
    return True, "md5, sha256"


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity checks."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="gravatar-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.api_token:
        table.add_row("API token", "OK", "Authenticated profile requests enabled")
    else:
        table.add_row("API token", "OPTIONAL", f"No token set -> reduced, rate-limited profiles ({TOKEN_ENV_VAR})")
    table.add_row("User config", "OK", str(get_user_env_file()))
    table.add_row("Profiles API", "OK", f"{settings.profile_api_host}:{settings.profile_api_port}")
    if settings.allowed_image_domains:
        table.add_row("Default image domains", "OK", ", ".join(settings.allowed_image_domains))

    ok_hash, detail_hash = _check_algorithms()
    table.add_row("Hash algorithms", "OK" if ok_hash else "FAIL", detail_hash)

    formats = supported_formats()
    ok_png = "png" in formats
    table.add_row("Pillow PNG writer", "OK" if ok_png else "FAIL", f"{len(formats)} writable formats")

    ok_http = True
    if not offline:
        ok_http, detail_http = _check_http("https://www.gravatar.com/avatar/", settings)
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print("\n[yellow]Note:[/yellow] check your proxy/firewall settings or raise the timeout.")
    if not (ok_hash and ok_png and ok_http):
        raise typer.Exit(code=1)


@app.command(name="setup-token")
def setup_token() -> None:
    """Interactive Profiles API token setup (stored in the user config .env).

    Avoids manual .env editing for packaged installs.
    """

    token = typer.prompt("Gravatar API token", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("token is required")
    if not token.isascii():
        raise typer.BadParameter("token must be ASCII")

    env_path = write_user_env_vars({TOKEN_ENV_VAR: token})
    _console.print(f"[green]Saved API token to:[/green] {env_path}")
