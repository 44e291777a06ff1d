"""Accessibility CLI commands: contrast checks, suggestions and reports."""

import sys
from typing import Optional

import click

from ..color_engine import (
    ButtonTextColor,
    ThemeMode,
    check_contrast,
    compliance_score,
    evaluate_theme,
    get_accessible_text_color,
    suggest_accessible_color,
    suggest_for_failures,
    text_tone_to_hex,
)
from ..utils.validation import ColorValidationError, require_hex
from .render import get_console, render_contrast, render_report, render_suggestion, swatch


def _require_colors(**named):
    """Normalize each named hex argument or exit with a message."""
    try:
        return [require_hex(value, name) for name, value in named.items()]
    except ColorValidationError as e:
        console = get_console()
        console.print(f"[red]Error: {e}[/red]")
        for suggestion in e.suggestions:
            console.print(f"  [dim]• {suggestion}[/dim]")
        sys.exit(1)


@click.command()
@click.argument('foreground')
@click.argument('background')
def contrast(foreground: str, background: str):
    """Show the WCAG contrast ratio of FOREGROUND on BACKGROUND."""
    fg, bg = _require_colors(foreground=foreground, background=background)
    render_contrast(get_console(), check_contrast(fg, bg))


@click.command()
@click.argument('background')
@click.argument('foreground')
@click.option('--target', type=float, default=None,
              help='Contrast ratio to reach (default from config, 4.5)')
@click.pass_context
def suggest(ctx, background: str, foreground: str, target: Optional[float]):
    """Suggest a BACKGROUND adjustment so FOREGROUND text is readable."""
    bg, fg = _require_colors(background=background, foreground=foreground)
    target_ratio = target if target is not None else ctx.obj['config'].suggestion_target_ratio
    console = get_console()

    suggestion = suggest_accessible_color(bg, fg, target_ratio)
    if suggestion is None:
        current = check_contrast(fg, bg)
        if current.contrast >= target_ratio:
            console.print(f"[green]Already meets {target_ratio:g}:1 "
                          f"({current.contrast:.2f}:1). No change needed.[/green]")
        else:
            console.print(f"[yellow]No lightness adjustment of {bg} reaches "
                          f"{target_ratio:g}:1 against {fg}.[/yellow]")
        return

    render_suggestion(console, suggestion)


@click.command(name="text-color")
@click.argument('background')
def text_color(background: str):
    """Pick dark or light text for BACKGROUND."""
    (bg,) = _require_colors(background=background)
    tone = get_accessible_text_color(bg)
    console = get_console()
    console.print(swatch(bg, f"{tone.value} text ({text_tone_to_hex(tone)})"))


@click.command()
@click.option('--mode', type=click.Choice([m.value for m in ThemeMode]), default=None,
              help='Surrounding UI mode (default from config)')
@click.option('--button-text', type=click.Choice([b.value for b in ButtonTextColor]),
              default=None, help='Button text color (default from config)')
@click.pass_context
def check(ctx, mode: Optional[str], button_text: Optional[str]):
    """Run accessibility checks against the current theme."""
    config = ctx.obj['config']
    history = ctx.obj['store'].load()

    checks = evaluate_theme(
        history.theme,
        mode or config.mode,
        button_text or config.button_text_color,
    )
    suggestions = suggest_for_failures(checks, config.suggestion_target_ratio)
    render_report(get_console(), checks, compliance_score(checks), suggestions)
