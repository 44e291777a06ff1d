"""Color editing CLI commands.

These commands load the session history, apply one operation, save it and
print the resulting theme.
"""

import math
import sys

import click
from rich.table import Table

from ..color_engine import PresetRegistry, ThemeHistory
from ..utils.validation import ColorValidationError, require_hex
from .render import get_console, render_history, render_theme, swatch


def _load(ctx) -> ThemeHistory:
    return ctx.obj['store'].load()


def _save_and_show(ctx, history: ThemeHistory) -> None:
    ctx.obj['store'].save(history)
    render_theme(get_console(), history.theme, history)


def _report_invalid(error: ColorValidationError) -> None:
    console = get_console()
    console.print(f"[red]Error: {error}[/red]")
    for suggestion in error.suggestions:
        console.print(f"  [dim]• {suggestion}[/dim]")
    sys.exit(1)


@click.command()
@click.pass_context
def show(ctx):
    """Show the current colors and palette."""
    history = _load(ctx)
    render_theme(get_console(), history.theme, history)


@click.command(name="set")
@click.argument('hue', type=float)
@click.option('--saturation', '-s', type=float, default=100, show_default=True,
              help='Saturation 0-100 (clamped)')
@click.option('--lightness', '-l', type=float, default=50, show_default=True,
              help='Lightness 0-100 (clamped)')
@click.pass_context
def set_color(ctx, hue: float, saturation: float, lightness: float):
    """Set the primary color by HUE; the complementary color follows."""
    for name, value in (("hue", hue), ("saturation", saturation), ("lightness", lightness)):
        if not math.isfinite(value):
            get_console().print(f"[red]Error: {name} must be a finite number, got {value}[/red]")
            sys.exit(1)

    history = _load(ctx)
    history.update_primary_color(hue, saturation, lightness)
    _save_and_show(ctx, history)


@click.command(name="hex")
@click.argument('color')
@click.pass_context
def set_hex(ctx, color: str):
    """Set the primary color from a hex COLOR."""
    try:
        normalized = require_hex(color, "primary color")
    except ColorValidationError as e:
        _report_invalid(e)

    history = _load(ctx)
    history.update_primary_from_hex(normalized)
    _save_and_show(ctx, history)


@click.command()
@click.argument('color')
@click.pass_context
def complementary(ctx, color: str):
    """Override the complementary color with a hex COLOR."""
    try:
        normalized = require_hex(color, "complementary color")
    except ColorValidationError as e:
        _report_invalid(e)

    history = _load(ctx)
    history.update_complementary_from_hex(normalized)
    _save_and_show(ctx, history)


@click.command()
@click.pass_context
def undo(ctx):
    """Undo the last color change."""
    history = _load(ctx)
    if not history.undo():
        get_console().print("[dim]Nothing to undo.[/dim]")
        return
    _save_and_show(ctx, history)


@click.command()
@click.pass_context
def redo(ctx):
    """Redo the last undone color change."""
    history = _load(ctx)
    if not history.redo():
        get_console().print("[dim]Nothing to redo.[/dim]")
        return
    _save_and_show(ctx, history)


@click.command()
@click.pass_context
def reset(ctx):
    """Reset colors to the defaults and clear history."""
    history = _load(ctx)
    history.reset_colors()
    _save_and_show(ctx, history)


@click.command(name="history")
@click.pass_context
def show_history(ctx):
    """List the undo history."""
    render_history(get_console(), _load(ctx))


@click.group()
def preset():
    """Browse and apply preset brand colors."""
    pass


@preset.command(name="list")
@click.pass_context
def list_presets(ctx):
    """List available presets by category."""
    registry = PresetRegistry(ctx.obj['config'].data_dir)
    console = get_console()

    for category, presets in registry.get_presets_by_category().items():
        table = Table(title=category, show_header=True, header_style="bold")
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("Color")
        table.add_column("Description", style="dim")
        for item in presets:
            table.add_row(item.id, item.name, swatch(item.primary), item.description)
        console.print(table)


@preset.command(name="apply")
@click.argument('preset_id')
@click.pass_context
def apply_preset(ctx, preset_id: str):
    """Apply the preset PRESET_ID as the primary color."""
    registry = PresetRegistry(ctx.obj['config'].data_dir)
    found = registry.get_preset_by_id(preset_id)
    if found is None:
        console = get_console()
        console.print(f"[red]Error: Preset '{preset_id}' not found.[/red]")
        console.print("Use 'dresscode preset list' to see available presets.")
        sys.exit(1)

    history = _load(ctx)
    history.apply_preset(found.primary)
    get_console().print(f"[green]Applied preset '{found.name}'[/green]")
    _save_and_show(ctx, history)
