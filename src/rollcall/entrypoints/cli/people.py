"""ROLLCALL people commands: the command-line view.

Each invocation bootstraps a store for ``ROLLCALL_STORE_URL`` (or
``--store-url``), wraps it in a `PersonListViewModel`, and renders the
view-model's state. Human-oriented notices go to **stderr**; data (tables,
JSON, new ids) goes to **stdout**.

Failure modes
- Store URL unset → ``ClickException`` with setup guidance.
- Store rejects a call → ``ClickException`` naming the failed operation.
- Invalid field values → ``BadParameter``.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click
import click_extra as clickx
import httpx
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import ArgumentError

from rollcall import config
from rollcall.bootstrap import bootstrap
from rollcall.domain.errors import InvalidPersonError
from rollcall.domain.person import Person
from rollcall.interfaces.errors import RemoteFailure
from rollcall.logging import log_store

from .helpers import sanitize_url, success, warn

if TYPE_CHECKING:
    from rollcall.viewmodels.person_list import PersonListViewModel

logger = logging.getLogger(__name__)

MISSING_STORE_URL_MSG = (
    "ROLLCALL_STORE_URL is not set.\n\n"
    "Point it at an HTTP API or a database before running this command, e.g.:\n"
    "  export ROLLCALL_STORE_URL='https://api.example.com/v1'\n"
    "  export ROLLCALL_STORE_URL='sqlite:///people.db'"
)

INVALID_STORE_URL_MSG = (
    "ROLLCALL_STORE_URL is neither a valid http(s) URL nor a valid SQLAlchemy "
    "database URL."
)


@contextmanager
def _remote_errors(action: str) -> Iterator[None]:
    """Turn a RemoteFailure raised inside the block into a ClickException."""
    try:
        yield
    except RemoteFailure as e:
        raise click.ClickException(f"Could not {action}: {e}") from e


def _view_model(ctx: click.Context) -> PersonListViewModel:
    return ctx.obj


def _describe(vm: PersonListViewModel) -> None:
    logger.debug(
        "people view: %d cached, loading=%s", len(vm.people), vm.is_loading
    )


@click.group(cls=clickx.ExtraGroup)
@click.option(
    "--store-url",
    envvar=config.STORE_URL_ENVVAR,
    show_envvar=True,
    help="HTTP API base URL or SQLAlchemy database URL of the people store.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    envvar=config.HTTP_TIMEOUT_ENVVAR,
    show_envvar=True,
    help="Per-request timeout in seconds for HTTP stores (default: none).",
)
@click.option(
    "--collection",
    default="people",
    show_default=True,
    help="Resource path of the people collection on HTTP stores.",
)
@click.pass_context
def people(
    ctx: click.Context, store_url: str | None, timeout: float | None, collection: str
) -> None:
    """Manage people in the configured store."""
    try:
        url = store_url or config.get_store_url()
    except config.StoreUrlNotSetError as e:
        raise click.ClickException(MISSING_STORE_URL_MSG) from e
    try:
        container = bootstrap(url, timeout=timeout, collection=collection)
    except (ArgumentError, httpx.InvalidURL) as e:
        raise click.ClickException(INVALID_STORE_URL_MSG) from e
    except config.InvalidTimeoutError as e:
        raise click.ClickException(str(e)) from e

    log_store(
        logger,
        kind=config.store_kind(url),
        url=sanitize_url(url),
        timeout=timeout,
        collection=collection,
    )
    vm = container.people
    vm.subscribe(lambda: _describe(vm))
    ctx.obj = vm
    ctx.call_on_close(container.close)


@people.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print people as JSON.")
@click.pass_context
def list_people(ctx: click.Context, as_json: bool) -> None:
    """List everyone in the store."""
    vm = _view_model(ctx)
    vm.refresh()
    if vm.last_error is not None:
        raise click.ClickException(f"Could not load people: {vm.last_error}")

    if as_json:
        rows = [{"id": p.id, **p.to_payload()} for p in vm.people]
        click.echo(json.dumps(rows, indent=2))
        return

    if not vm.people:
        warn("No people in the store.")
        return

    table = Table("ID", "Name", "Age", "Email")
    for person in vm.people:
        table.add_row(person.id, person.name, str(person.age), person.email or "")
    Console(color_system=None if ctx.color is False else "auto").print(table)


@people.command("add")
@click.argument("name")
@click.argument("age", type=int)
@click.option("--email", default=None, help="Email address.")
@click.pass_context
def add_person(ctx: click.Context, name: str, age: int, email: str | None) -> None:
    """Add a person; prints the id the store assigned."""
    try:
        person = Person(name=name, age=age, email=email or None)
    except InvalidPersonError as e:
        raise click.BadParameter(e.reason, param_hint=e.field) from e

    with _remote_errors("add person"):
        created = _view_model(ctx).add(person)

    success(f"Added {created.name} (id {created.id}).")
    click.echo(created.id)


@people.command("update")
@click.argument("person_id")
@click.option("--name", default=None, help="New name.")
@click.option("--age", type=int, default=None, help="New age.")
@click.option("--email", default=None, help="New email; pass '' to clear it.")
@click.pass_context
def update_person(
    ctx: click.Context,
    person_id: str,
    name: str | None,
    age: int | None,
    email: str | None,
) -> None:
    """Change fields of the person with PERSON_ID."""
    changes: dict[str, object] = {}
    if name is not None:
        changes["name"] = name
    if age is not None:
        changes["age"] = age
    if email is not None:
        changes["email"] = email or None
    if not changes:
        raise click.UsageError("Nothing to update; pass --name, --age or --email.")

    vm = _view_model(ctx)
    vm.refresh()
    if vm.last_error is not None:
        raise click.ClickException(f"Could not load people: {vm.last_error}")
    if (current := vm.find(person_id)) is None:
        raise click.ClickException(f"No person with id {person_id}.")

    try:
        updated = dataclasses.replace(current, **changes)
    except InvalidPersonError as e:
        raise click.BadParameter(e.reason, param_hint=e.field) from e

    with _remote_errors("update person"):
        vm.modify(updated)
    success(f"Updated {updated.name} (id {person_id}).")


@people.command("remove")
@click.argument("person_id")
@click.option("--force", is_flag=True, help="Remove without confirmation.")
@click.pass_context
def remove_person(ctx: click.Context, person_id: str, force: bool) -> None:
    """Remove the person with PERSON_ID (no error if already gone)."""
    if not force:
        click.confirm(f"Remove person {person_id}?", abort=True)
    with _remote_errors("remove person"):
        _view_model(ctx).remove(person_id)
    success(f"Removed {person_id}.")
