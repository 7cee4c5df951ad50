"""Thin CLI wrapper — Typer commands that delegate to the stores.

All store access goes through the Container (bootstrap.py).
No direct imports from infrastructure/ here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional
from uuid import UUID

import typer
from rich.logging import RichHandler

from contact_manager.application.contact_store import ContactStore
from contact_manager.application.preference_store import PreferenceStore
from contact_manager.domain.errors import ConfigurationError, ContactNotFoundError
from contact_manager.domain.models.preferences import FONT_SIZE_MAX, FONT_SIZE_MIN, Color
from contact_manager.presentation.cli.formatters import (
    contact_panel,
    contacts_table,
    error_message,
    preferences_panel,
    success_panel,
    warning_message,
)

app = typer.Typer(
    name="contacts",
    help="📇 Personal contact list manager",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for preference commands
prefs_app = typer.Typer(
    name="prefs",
    help="⚙️  Show or change display preferences",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(prefs_app, name="prefs")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _contact_store(ctx: typer.Context) -> ContactStore:
    return ctx.obj.contact_store


def _preference_store(ctx: typer.Context) -> PreferenceStore:
    return ctx.obj.preference_store


def _report_write(store: ContactStore | PreferenceStore) -> None:
    if store.last_error is not None:
        warning_message(f"Change kept in memory but not saved: {store.last_error}")


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
    data_dir: Annotated[
        Optional[Path],
        typer.Option("--data-dir", help="Directory holding contacts.json"),
    ] = None,
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config-dir", help="Directory holding preferences.json"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log diagnostics to the terminal")
    ] = False,
) -> None:
    """Manage contacts and display preferences stored in your user directories."""
    from contact_manager.bootstrap import Container

    _configure_logging(verbose)
    try:
        ctx.obj = Container(config_path=config, data_dir=data_dir, config_dir=config_dir)
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# contacts add / edit / delete
# ---------------------------------------------------------------------------


@app.command()
def add(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Contact name")],
    phone: Annotated[str, typer.Option("--phone", "-p", help="Phone number")] = "",
    email: Annotated[str, typer.Option("--email", "-e", help="Email address")] = "",
    address: Annotated[str, typer.Option("--address", "-a", help="Postal address")] = "",
) -> None:
    """Add a new contact."""
    store = _contact_store(ctx)
    contact = store.add(name, phone, email, address)
    _report_write(store)
    success_panel(f"✅ Contact added: [bold green]{contact.id}[/]")


@app.command()
def edit(
    ctx: typer.Context,
    contact_id: Annotated[UUID, typer.Argument(help="ID of the contact to edit")],
    name: Annotated[Optional[str], typer.Option("--name", "-n", help="New name")] = None,
    phone: Annotated[Optional[str], typer.Option("--phone", "-p", help="New phone")] = None,
    email: Annotated[Optional[str], typer.Option("--email", "-e", help="New email")] = None,
    address: Annotated[
        Optional[str], typer.Option("--address", "-a", help="New address")
    ] = None,
) -> None:
    """Edit a contact; fields that are not given keep their value."""
    store = _contact_store(ctx)
    try:
        current = store.get(contact_id)
    except ContactNotFoundError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    store.edit(
        contact_id,
        current.name if name is None else name,
        current.phone_number if phone is None else phone,
        current.email if email is None else email,
        current.address if address is None else address,
    )
    _report_write(store)
    contact_panel(store.get(contact_id), title="✏️  Contact updated")


@app.command()
def delete(
    ctx: typer.Context,
    contact_id: Annotated[UUID, typer.Argument(help="ID of the contact to delete")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")] = False,
) -> None:
    """Delete a contact."""
    store = _contact_store(ctx)
    try:
        contact = store.get(contact_id)
    except ContactNotFoundError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    if not yes and not typer.confirm(f"Delete {contact.name}?"):
        raise typer.Abort()

    store.delete(contact_id)
    _report_write(store)
    success_panel(f"🗑️  Contact deleted: [bold]{contact_id}[/]")


# ---------------------------------------------------------------------------
# contacts list / search / show
# ---------------------------------------------------------------------------


@app.command("list")
def list_contacts(ctx: typer.Context) -> None:
    """List every contact in the order it was added."""
    contacts_table(_contact_store(ctx).contacts)


@app.command()
def search(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Part of a name (case-insensitive)")],
) -> None:
    """Search contacts by name."""
    contacts_table(_contact_store(ctx).search(query), title=f"🔎 Results for '{query}'")


@app.command()
def show(
    ctx: typer.Context,
    contact_id: Annotated[UUID, typer.Argument(help="ID of the contact")],
) -> None:
    """Show every field of one contact."""
    try:
        contact = _contact_store(ctx).get(contact_id)
    except ContactNotFoundError as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    contact_panel(contact)


# ---------------------------------------------------------------------------
# contacts prefs show / font-size / background
# ---------------------------------------------------------------------------


@prefs_app.command("show")
def prefs_show(ctx: typer.Context) -> None:
    """Show the current display preferences."""
    preferences_panel(_preference_store(ctx).preferences)


@prefs_app.command("font-size")
def prefs_font_size(
    ctx: typer.Context,
    size: Annotated[
        int,
        typer.Argument(min=FONT_SIZE_MIN, max=FONT_SIZE_MAX, help="Font size in points"),
    ],
) -> None:
    """Change the font size."""
    store = _preference_store(ctx)
    store.set_font_size(size)
    _report_write(store)
    preferences_panel(store.preferences)


@prefs_app.command("background")
def prefs_background(
    ctx: typer.Context,
    color: Annotated[str, typer.Argument(help="Color as #RRGGBB or #RRGGBBAA")],
) -> None:
    """Change the background color."""
    try:
        parsed = Color.from_hex(color)
    except ValueError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    store = _preference_store(ctx)
    store.set_background_color(parsed)
    _report_write(store)
    preferences_panel(store.preferences)


if __name__ == "__main__":
    app()
