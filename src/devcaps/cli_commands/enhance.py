"""``devcaps enhance`` — run the enhancer over a detection snapshot file."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape

from devcaps.cli_commands._output import console, print_enhancement
from devcaps.core.enhancer import CapabilityEnhancer
from devcaps.core.strings import InternTable
from devcaps.sdk.errors import SnapshotValidationError
from devcaps.sdk.loader import SnapshotLoader
from devcaps.sdk.models import TelemetrySettings
from devcaps.utils.telemetry import configure_telemetry


@click.command("enhance")
@click.argument("snapshot_file", type=click.Path(exists=True))
@click.option(
    "--no-browser-override",
    is_flag=True,
    help="Do not derive the 'browser' capability from detection data.",
)
@click.option("--telemetry", is_flag=True, help="Export the enhancement span (to stderr).")
@click.option("--otlp-endpoint", default=None, help="Also send spans to this OTLP collector.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def enhance(
    snapshot_file: str,
    no_browser_override: bool,
    telemetry: bool,
    otlp_endpoint: str | None,
    as_json: bool,
) -> None:
    """Build a capability profile from a detection snapshot.

    SNAPSHOT_FILE is a YAML or JSON file with ``properties`` and optional
    ``existing``, ``confidence``, ``difference``, ``settings`` and
    ``telemetry`` keys.
    """
    try:
        snapshot = SnapshotLoader(Path(snapshot_file)).load()
    except SnapshotValidationError as exc:
        console.print(f"[red]Error loading snapshot:[/red] {escape(str(exc))}")
        sys.exit(1)

    tracing = snapshot.telemetry or TelemetrySettings()
    if telemetry or otlp_endpoint:
        tracing = tracing.model_copy(
            update={"enabled": True, "otlp_endpoint": otlp_endpoint or tracing.otlp_endpoint}
        )
    if tracing.enabled:
        try:
            configure_telemetry(otlp_endpoint=tracing.otlp_endpoint)
        except ImportError as exc:
            console.print(f"[red]Telemetry unavailable:[/red] {escape(str(exc))}")
            sys.exit(1)

    settings = snapshot.settings
    if no_browser_override:
        settings = settings.model_copy(update={"override_browser": False})

    table = InternTable()
    enhancer = CapabilityEnhancer(table, settings)
    result = enhancer.enhance(snapshot.to_match_result(table), snapshot.existing)
    print_enhancement(result, as_json=as_json)
