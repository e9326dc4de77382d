"""Shared ``--token`` option for administrative CLI commands."""

from __future__ import annotations

import click

from freshcart.domain.exceptions import AuthorizationError
from freshcart.infrastructure.bootstrap import admin_guard

token_option = click.option(
    "--token",
    envvar="FRESHCART_TOKEN",
    default=None,
    help="Administrator token (or set FRESHCART_TOKEN).",
)


def require_admin(token: str | None) -> None:
    try:
        admin_guard().verify(token)
    except AuthorizationError as exc:
        raise click.ClickException(str(exc))
