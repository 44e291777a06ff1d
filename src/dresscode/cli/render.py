"""Rich rendering helpers shared by the CLI commands."""

from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..color_engine import (
    PERCENTAGES,
    ColorSuggestion,
    ColorTheme,
    ComplianceScore,
    ContrastCheck,
    HSL,
    ThemeHistory,
    format_hsl,
    get_accessible_text_color,
    text_tone_to_hex,
)


def get_console() -> Console:
    return Console(highlight=False)


def swatch(hex_color: str, label: Optional[str] = None) -> Text:
    """Color block with readable text on top of it."""
    text_color = text_tone_to_hex(get_accessible_text_color(hex_color))
    return Text(f" {label or hex_color} ", style=f"{text_color} on {hex_color}")


def color_line(name: str, color: HSL) -> Text:
    hex_color = color.to_hex()
    return Text.assemble(
        (f"{name:<14}", "bold"),
        swatch(hex_color),
        "  ",
        (f"hsl({format_hsl(color)})", "cyan"),
    )


def render_theme(console: Console, theme: ColorTheme,
                 history: Optional[ThemeHistory] = None) -> None:
    """Print the working colors and their four ramps."""
    header = Text.assemble(
        color_line("Primary", theme.primary), "\n",
        color_line("Complementary", theme.complementary),
    )
    if history is not None:
        header.append(
            f"\n\nHistory {history.history_index + 1}/{len(history)}",
            style="dim",
        )
    console.print(Panel(header, title="[bold]Color Theme[/bold]", border_style="blue"))

    table = Table(title="Palette", show_header=True, header_style="bold")
    table.add_column("Step", justify="right")
    table.add_column("%", justify="right", style="dim")
    for name, _ in theme.ramps():
        table.add_column(name.replace("_", " ").title())

    for i, percentage in enumerate(PERCENTAGES):
        row = [str((i + 1) * 10), str(percentage)]
        row.extend(swatch(colors[i]) for _, colors in theme.ramps())
        table.add_row(*row)

    console.print(table)


def render_history(console: Console, history: ThemeHistory) -> None:
    table = Table(title="History", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Primary")
    table.add_column("Complementary")
    table.add_column("", width=2)

    for i, entry in enumerate(history.entries):
        marker = "◀" if i == history.history_index else ""
        table.add_row(
            str(i + 1),
            swatch(entry.primary.to_hex()),
            swatch(entry.complementary.to_hex()),
            marker,
        )

    console.print(table)


def status_text(check: ContrastCheck) -> Text:
    status = check.status
    style = {"AAA": "green bold", "AA": "yellow bold"}.get(status, "red bold")
    return Text(status, style=style)


def render_contrast(console: Console, check: ContrastCheck) -> None:
    console.print(Text.assemble(
        swatch(check.background, f"{check.foreground} on {check.background}"),
        "  ",
        (f"{check.contrast:.2f}:1", "bold"),
        "  ",
        status_text(check),
    ))
    console.print(Text.assemble(
        ("AA (4.5:1): ", "dim"), ("pass" if check.meets_aa else "fail"),
        ("   AAA (7:1): ", "dim"), ("pass" if check.meets_aaa else "fail"),
    ))


def render_suggestion(console: Console, suggestion: ColorSuggestion) -> None:
    console.print(Text.assemble(
        ("Suggestion: ", "bold"),
        suggestion.reason,
        "  ",
        swatch(suggestion.original),
        " → ",
        swatch(suggestion.suggested),
        (f"  (+{suggestion.improvement:.2f})", "green"),
    ))


def render_report(console: Console, checks: Sequence[ContrastCheck],
                  score: ComplianceScore,
                  suggestions: List[Tuple[ContrastCheck, ColorSuggestion]]) -> None:
    """Print the accessibility report for a theme."""
    table = Table(title="Accessibility", show_header=True, header_style="bold")
    table.add_column("Check")
    table.add_column("Type", style="dim")
    table.add_column("Sample")
    table.add_column("Ratio", justify="right")
    table.add_column("Status")

    for check in checks:
        table.add_row(
            check.label or "",
            check.check_type.value if check.check_type else "",
            swatch(check.background, check.foreground),
            f"{check.contrast:.2f}:1",
            status_text(check),
        )

    console.print(table)
    console.print(
        f"AA: {score.passing_aa}/{score.total} ({score.percentage_aa}%)   "
        f"AAA: {score.passing_aaa}/{score.total} ({score.percentage_aaa}%)"
    )

    for check, suggestion in suggestions:
        console.print(f"\n[bold]{check.label}[/bold]")
        render_suggestion(console, suggestion)
