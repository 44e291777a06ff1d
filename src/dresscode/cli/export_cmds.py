"""Theme export CLI command."""

import sys
from typing import Optional

import click

from ..services.export import ExportFormat, ExportManager
from .render import get_console


@click.command(name="export")
@click.option('--format', '-f', 'format_name',
              type=click.Choice([fmt.value for fmt in ExportFormat]), default=None,
              help='Export format (default from config)')
@click.option('--output', '-o', type=click.Path(dir_okay=False),
              help='Write to this file instead of stdout')
@click.option('--default-name', is_flag=True,
              help='Write to dresscode-theme.<ext> in the current directory')
@click.pass_context
def export_theme(ctx, format_name: Optional[str], output: Optional[str], default_name: bool):
    """Export the current theme as CSS, SCSS, Tailwind or JSON tokens."""
    config = ctx.obj['config']
    history = ctx.obj['store'].load()
    fmt = ExportFormat(format_name) if format_name else config.default_export_format

    manager = ExportManager()
    if default_name and not output:
        output = manager.default_filename(fmt)

    try:
        content = manager.export_theme(history.theme, fmt, config.design_settings(), output)
    except OSError as e:
        get_console().print(f"[red]Error writing export: {e}[/red]")
        sys.exit(1)

    if output:
        get_console().print(f"[green]✅ Exported {fmt.value} theme to {output}[/green]")
    else:
        click.echo(content, nl=False)
