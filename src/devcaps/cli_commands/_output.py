"""Shared CLI output formatters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from devcaps.core.policy import FIELD_POLICIES

if TYPE_CHECKING:
    from devcaps.core.models import Enhancement
    from devcaps.core.policy import WritePolicy

console = Console()


def print_enhancement(enhancement: Enhancement, *, as_json: bool = False) -> None:
    """Pretty-print an enhancement result."""
    if as_json:
        console.print_json(enhancement.model_dump_json())
        return

    table = Table(title="Capability Profile")
    table.add_column("Capability", style="cyan")
    table.add_column("Value")
    table.add_column("Policy", style="dim")

    for key in sorted(enhancement.capabilities):
        policy = FIELD_POLICIES.get(key)
        table.add_row(key, escape(enhancement.capabilities[key]), policy.value if policy else "-")

    console.print(table)
    console.print(f"  Detection time: {enhancement.detection_time_ms} ms")
    if enhancement.confidence is not None:
        console.print(f"  Confidence: {enhancement.confidence}")
    if enhancement.difference is not None:
        console.print(f"  Difference: {enhancement.difference}")
    console.print(f"  Detected properties: {len(enhancement.properties)}")


def print_fields_table(fields: dict[str, WritePolicy]) -> None:
    """Pretty-print capability keys with their write policy."""
    table = Table(title="Capability Fields")
    table.add_column("Capability", style="cyan")
    table.add_column("Policy")

    for key, policy in fields.items():
        table.add_row(key, policy.value)

    console.print(table)
