"""``devcaps fields`` — list capability keys and their write policies."""

from __future__ import annotations

import json

import click

from devcaps.cli_commands._output import console, print_fields_table
from devcaps.core.policy import FIELD_POLICIES, WritePolicy


@click.command("fields")
@click.option(
    "--policy",
    type=click.Choice([p.value for p in WritePolicy]),
    default=None,
    help="Show only keys governed by this policy.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def fields(policy: str | None, as_json: bool) -> None:
    """List every capability key the enhancer can write."""
    selected = {
        key: p for key, p in FIELD_POLICIES.items() if policy is None or p.value == policy
    }

    if as_json:
        console.print_json(json.dumps({key: p.value for key, p in selected.items()}))
        return

    print_fields_table(selected)
