"""Rich formatting utilities for the CLI.

Holds all Rich rendering (tables, panels) in a module that knows nothing
about persistence or store logic.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from contact_manager.domain.models.contact import Contact
from contact_manager.domain.models.preferences import Preferences

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Contacts") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


def warning_message(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]⚠️  {message}[/]")


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


def contacts_table(contacts: Sequence[Contact], title: str = "📇 Contacts") -> None:
    """Print contacts in insertion order, or a hint when there are none."""
    if not contacts:
        console.print("[dim]No contacts.[/]")
        return

    table = Table(title=title, show_header=True, border_style="blue")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Address")

    for contact in contacts:
        table.add_row(
            str(contact.id),
            escape(contact.name),
            escape(contact.phone_number),
            escape(contact.email),
            escape(contact.address),
        )

    console.print(table)


def contact_panel(contact: Contact, title: str = "👤 Contact") -> None:
    """Print a single contact with every field."""
    console.print(
        Panel(
            f"ID: [dim]{contact.id}[/]\n"
            f"Name: [cyan]{escape(contact.name)}[/]\n"
            f"Phone: {escape(contact.phone_number)}\n"
            f"Email: {escape(contact.email)}\n"
            f"Address: {escape(contact.address)}",
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Preferences
# ---------------------------------------------------------------------------


def preferences_panel(preferences: Preferences) -> None:
    """Print the font size and a swatch of the background color."""
    color = preferences.background_color
    swatch = color.to_hex()[:7]
    console.print(
        Panel(
            f"Font size: [cyan]{preferences.font_size:g}[/]\n"
            f"Background: [cyan]{color.to_hex()}[/] [on {swatch}]      [/]",
            title="⚙️  Preferences",
            border_style="blue",
        )
    )
