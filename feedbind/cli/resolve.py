"""Binding resolution and payload conversion commands."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from feedbind.config import (
    ConfigLoadError,
    EnvironmentNameResolver,
    FeedBindConfig,
    SettingsStore,
    TriggerEntryConfig,
    load_config,
)
from feedbind.exceptions import BindingError
from feedbind.triggers.change_feed import (
    ChangeFeedTriggerAttribute,
    ChangeFeedTriggerBindingProvider,
    TriggerBindingDescriptor,
    TriggerValueType,
    to_trigger_value,
    try_convert_to_document_list,
)

console = Console()


def build_provider(config: FeedBindConfig) -> ChangeFeedTriggerBindingProvider:
    """Wire the environment-backed name resolver and settings store for ``config``."""
    env_file = Path(config.env_file) if config.env_file else None
    resolver = EnvironmentNameResolver(env_file=env_file, settings=config.settings)
    return ChangeFeedTriggerBindingProvider(resolver, SettingsStore(config))


def resolve_entry(provider: ChangeFeedTriggerBindingProvider, entry: TriggerEntryConfig) -> TriggerBindingDescriptor:
    attribute = ChangeFeedTriggerAttribute.model_validate(entry.attribute)
    binding = provider.try_create(attribute, TriggerValueType(entry.value_type))
    return binding.descriptor


def _render(name: str, descriptor: TriggerBindingDescriptor) -> Table:
    table = Table(title=f"Trigger: {name}")
    table.add_column("Location")
    table.add_column("Endpoint")
    table.add_column("Database")
    table.add_column("Collection")
    for label, location in (
        ("monitored", descriptor.monitored_location),
        ("lease", descriptor.lease_location),
    ):
        table.add_row(
            label,
            str(location.connection.service_endpoint),
            location.database_name,
            location.collection_name,
        )
    table.caption = f"value type: {descriptor.trigger_value_type.value}"
    return table


def resolve_command(config: str | None = None, trigger: str | None = None) -> dict[str, TriggerBindingDescriptor]:
    """Resolve declared triggers and print their locations."""
    try:
        cfg = load_config(config_path=config)
    except (ConfigLoadError, ValidationError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(2) from exc

    entries = cfg.triggers
    if trigger:
        entry = cfg.trigger(trigger)
        if entry is None:
            console.print(f"[red]Error:[/red] trigger not declared: {trigger}")
            raise typer.Exit(2)
        entries = [entry]
    if not entries:
        console.print("[yellow]No triggers declared.[/yellow]")
        return {}

    provider = build_provider(cfg)
    resolved: dict[str, TriggerBindingDescriptor] = {}
    for entry in entries:
        try:
            descriptor = resolve_entry(provider, entry)
        except (BindingError, ValidationError) as exc:
            console.print(f"[red]Error:[/red] trigger '{entry.name}': {exc}")
            raise typer.Exit(1) from exc
        resolved[entry.name] = descriptor
        console.print(_render(entry.name, descriptor))
    return resolved


def convert_command(payload: str, value_type: str = TriggerValueType.DOCUMENT_LIST.value) -> object:
    """Normalize a JSON payload the way an invocation would."""
    try:
        target = TriggerValueType(value_type)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] unknown value type: {value_type}")
        raise typer.Exit(2) from exc
    documents, ok = try_convert_to_document_list(payload)
    if not ok or documents is None:
        console.print("[red]Payload is not a JSON array of documents.[/red]")
        raise typer.Exit(1)
    value = to_trigger_value(documents, target)
    rows = value if target is TriggerValueType.GENERIC_ARRAY else [doc.model_dump(mode="json") for doc in documents]
    console.print(f"Converted {len(documents)} document(s)")
    console.print_json(json.dumps(rows))
    return value
