"""DressCode command-line entry point."""

import logging
from pathlib import Path

import click

from ..config import Config
from ..storage import SessionStore
from .a11y_cmds import check, contrast, suggest, text_color
from .color_cmds import (
    complementary,
    preset,
    redo,
    reset,
    set_color,
    set_hex,
    show,
    show_history,
    undo,
)
from .export_cmds import export_theme

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level_name: str, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("dresscode").setLevel(level)


@click.group(invoke_without_command=True)
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config, verbose):
    """DressCode - brand colors, palettes and WCAG checks from the terminal."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    # Load configuration
    cfg = Config.reload(Path(config) if config else None)

    configure_logging(cfg.log_level, verbose)
    ctx.obj['config'] = cfg
    ctx.obj['store'] = SessionStore.from_config(cfg)

    if ctx.invoked_subcommand is None:
        ctx.invoke(show)


main.add_command(show)
main.add_command(set_color)
main.add_command(set_hex)
main.add_command(complementary)
main.add_command(undo)
main.add_command(redo)
main.add_command(reset)
main.add_command(show_history)
main.add_command(preset)
main.add_command(contrast)
main.add_command(suggest)
main.add_command(text_color)
main.add_command(check)
main.add_command(export_theme)


if __name__ == "__main__":
    main()
