"""gravatar-client CLI (Typer + Rich).

Commands:
- `avatar-url` / `qr-url`: render request URLs without any network I/O.
- `save-avatar` / `save-qr`: fetch an image and write it to disk.
- `profile`: fetch a profile, show it as a table, optionally export JSON.
- `hash`: hex digest of a value.
- `doctor`: diagnostics and token setup.

Library errors (`GravatarError`) are reported as one red line and exit code 1.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gravatar_client.adapters.image_handler import ImageRequestHandler
from gravatar_client.adapters.json_exporter import export_profile_json
from gravatar_client.adapters.profile_handler import ProfileRequestHandler
from gravatar_client.cli import doctor
from gravatar_client.cli.ui_components import build_profile_table, build_results_table, print_banner
from gravatar_client.core.config import AppSettings
from gravatar_client.core.enums import Protocol
from gravatar_client.core.errors import GravatarError
from gravatar_client.core.hashing import SHA256, hash_hex
from gravatar_client.core.requests import AvatarRequest, ProfileRequest, QrCodeRequest
from gravatar_client.core.tokens import ProfileTokenProvider

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Gravatar avatars, QR codes and profiles from the command line.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@contextmanager
def _reporting_errors() -> Iterator[None]:
    try:
        yield
    except GravatarError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _is_email(target: str) -> bool:
    return "@" in target


def _image_handler(settings: AppSettings) -> ImageRequestHandler:
    return ImageRequestHandler(settings)


def _profile_handler(settings: AppSettings) -> ProfileRequestHandler:
    return ProfileRequestHandler(settings)


def _avatar_request(
    target: str,
    *,
    size: int | None = None,
    rating: str | None = None,
    default: str | None = None,
    default_url: str | None = None,
    force_default: bool = False,
    http: bool = False,
    jpg: bool = False,
    full_params: bool = False,
    allowed_domains: list[str] | None = None,
) -> AvatarRequest:
    request = AvatarRequest.from_email(target) if _is_email(target) else AvatarRequest.from_hash(target)
    if size is not None:
        request.set_size(size)
    if rating is not None:
        request.set_rating(rating.lower())
    if default is not None:
        request.set_default_image_type(default.lower())
    if default_url is not None:
        request.set_default_image_url(default_url, allowed_domains or None)
    return (
        request.set_force_default(force_default)
        .set_protocol(Protocol.from_bool(not http))
        .set_append_jpg_suffix(jpg)
        .set_use_full_url_parameters(full_params)
    )


def _qr_request(
    target: str,
    *,
    size: int | None = None,
    image_type: str | None = None,
    version: str | None = None,
) -> QrCodeRequest:
    request = QrCodeRequest.from_email(target) if _is_email(target) else QrCodeRequest.from_hash(target)
    if size is not None:
        request.set_size(size)
    if image_type is not None:
        request.set_image_type(image_type.lower())
    if version is not None:
        request.set_version(version.lower())
    return request


def _install_log_handler() -> None:
    """Attach one `RichHandler` to the library logger; repeated calls are no-ops."""

    logger = logging.getLogger("gravatar_client")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=_err_console, rich_tracebacks=True, show_path=False))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr."),
) -> None:
    if verbose:
        _install_log_handler()


@app.command("avatar-url")
def avatar_url(
    target: str = typer.Argument(..., help="Email address or avatar hash."),
    size: int | None = typer.Option(None, "--size", "-s", help="Size in pixels (1-2048)."),
    rating: str | None = typer.Option(None, "--rating", "-r", help="g, pg, r or x."),
    default: str | None = typer.Option(None, "--default", "-d", help="Built-in default image (404, mp, identicon, ...)."),
    default_url: str | None = typer.Option(None, "--default-url", help="Custom default image URL."),
    force_default: bool = typer.Option(False, "--force-default", help="Always serve the default image."),
    http: bool = typer.Option(False, "--http", help="Use http instead of https."),
    jpg: bool = typer.Option(False, "--jpg", help="Append .jpg to the hash."),
    full_params: bool = typer.Option(False, "--full-params", help="Use full parameter names (size=, rating=, ...)."),
) -> None:
    """Print the avatar URL for an email or hash."""

    settings = AppSettings()
    with _reporting_errors():
        request = _avatar_request(
            target,
            size=size,
            rating=rating,
            default=default,
            default_url=default_url,
            force_default=force_default,
            http=http,
            jpg=jpg,
            full_params=full_params,
            allowed_domains=settings.allowed_image_domains,
        )
        typer.echo(request.request_url)


@app.command("qr-url")
def qr_url(
    target: str = typer.Argument(..., help="Email address or SHA-256 hash."),
    size: int | None = typer.Option(None, "--size", "-s", help="Size in pixels (80-1024)."),
    image_type: str | None = typer.Option(None, "--type", "-t", help="blank, default, user or gravatar."),
    version: str | None = typer.Option(None, "--version", help="blank, 1 or 3."),
) -> None:
    """Print the QR-code URL for an email or hash."""

    with _reporting_errors():
        typer.echo(_qr_request(target, size=size, image_type=image_type, version=version).request_url)


@app.command("save-avatar")
def save_avatar(
    target: str = typer.Argument(..., help="Email address or avatar hash."),
    output: Path = typer.Argument(..., help="Destination file."),
    image_format: str = typer.Option("png", "--format", "-f", help="Any format Pillow can write."),
    size: int | None = typer.Option(None, "--size", "-s", help="Size in pixels (1-2048)."),
    default: str | None = typer.Option(None, "--default", "-d", help="Built-in default image."),
    default_url: str | None = typer.Option(None, "--default-url", help="Custom default image URL."),
) -> None:
    """Download an avatar and save it to OUTPUT."""

    settings = AppSettings()
    with _reporting_errors():
        request = _avatar_request(
            target,
            size=size,
            default=default,
            default_url=default_url,
            allowed_domains=settings.allowed_image_domains,
        )
        path = request.save_to(output, image_format, handler=_image_handler(settings))
    _console.print(f"[green]Saved avatar to:[/green] {path}")


@app.command("save-qr")
def save_qr(
    target: str = typer.Argument(..., help="Email address or SHA-256 hash."),
    output: Path = typer.Argument(..., help="Destination PNG file (must not exist)."),
    size: int | None = typer.Option(None, "--size", "-s", help="Size in pixels (80-1024)."),
    image_type: str | None = typer.Option(None, "--type", "-t", help="blank, default, user or gravatar."),
) -> None:
    """Download a QR code and save it as PNG."""

    settings = AppSettings()
    with _reporting_errors():
        request = _qr_request(target, size=size, image_type=image_type)
        path = request.save_to(output, handler=_image_handler(settings))
    _console.print(f"[green]Saved QR code to:[/green] {path}")


@app.command()
def profile(
    target: str = typer.Argument(..., help="Email address, SHA-256 hash or profile slug."),
    json_path: Path | None = typer.Option(None, "--json", help="Also export the profile as JSON."),
    token_env: str | None = typer.Option(None, "--token-env", help="Read the API token from this env variable."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
    stats: bool = typer.Option(False, "--stats", help="Show request success/failure counts."),
) -> None:
    """Fetch a profile and show it."""

    settings = AppSettings()
    with _reporting_errors():
        request = ProfileRequest.from_email(target) if _is_email(target) else ProfileRequest.from_hash_or_id(target)
        if token_env:
            request.set_token_provider(ProfileTokenProvider.from_env(token_env))
        elif settings.api_token:
            request.set_token_provider(ProfileTokenProvider.from_settings(settings))

        handler = _profile_handler(settings)
        try:
            result = request.get_profile(handler)
        finally:
            if stats:
                _console.print(
                    build_results_table(handler.authenticated_request_results, handler.unauthenticated_request_results)
                )

        if not no_banner:
            print_banner(_console)
        _console.print(build_profile_table(result))
        if json_path is not None:
            path = export_profile_json(profile=result, output_path=json_path)
            _console.print(f"[green]Saved profile to:[/green] {path}")


@app.command("hash")
def hash_value(
    value: str = typer.Argument(..., help="Text to digest (emails are not normalized here)."),
    algorithm: str = typer.Option(SHA256, "--algorithm", "-a", help="md5, sha1, sha256, ..."),
) -> None:
    """Print the hex digest of VALUE."""

    with _reporting_errors():
        typer.echo(hash_hex(algorithm, value))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
