"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Lets several commands reuse the same tables and panels.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gravatar_client.core.domain.models import Profile, ProfileRequestResult


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Why here:
    - Avoids circular imports (main <-> doctor).
    - Commands that emit machine-readable output simply never call it.
    """

    title = Text("gravatar-client", style="bold cyan")
    subtitle = Text("Avatars • QR codes • Profiles", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_profile_table(profile: Profile) -> Table:
    """Two-column table with the populated fields of `profile`."""

    table = Table(title=profile.display_name or profile.hash, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    rows = [
        ("Hash", profile.hash),
        ("Profile", profile.profile_url),
        ("Name", profile.full_name),
        ("Pronouns", profile.pronouns),
        ("Location", profile.location),
        ("Job title", profile.job_title),
        ("Company", profile.company),
        ("Timezone", profile.timezone),
        ("Avatar", profile.avatar_url),
        ("About", profile.description),
        ("Registered", profile.registration_date),
        ("Last edit", profile.last_profile_edit),
    ]
    for label, value in rows:
        if value:
            table.add_row(label, value)

    if profile.verified_accounts:
        accounts = ", ".join(a.service_label for a in profile.verified_accounts)
        table.add_row("Verified", accounts)
    if profile.languages:
        table.add_row("Languages", ", ".join(lang.name for lang in profile.languages))
    if profile.interests:
        table.add_row("Interests", ", ".join(i.name for i in profile.interests))
    for link in profile.links:
        table.add_row(link.label or "Link", link.url)
    return table


def build_results_table(
    authenticated: list[ProfileRequestResult],
    unauthenticated: list[ProfileRequestResult],
) -> Table:
    """Success/failure counts of the profile handler."""

    table = Table(title="Profile requests")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("OK", style="green")
    table.add_column("Failed", style="red")
    for kind, results in (("authenticated", authenticated), ("unauthenticated", unauthenticated)):
        ok = sum(1 for r in results if r.succeeded)
        table.add_row(kind, str(ok), str(len(results) - ok))
    return table
