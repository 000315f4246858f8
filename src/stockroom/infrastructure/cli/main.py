import logging
from dataclasses import replace
from pathlib import Path

import click

from stockroom.infrastructure.bootstrap import inventory_manager
from stockroom.infrastructure.cli.product_commands import (
    product_add,
    product_decrease,
    product_edit,
    product_increase,
    product_list,
    product_remove,
)
from stockroom.infrastructure.config import LOG_LEVELS, get_settings


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the product slot (env: STOCKROOM_DATA_DIR).",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging verbosity (env: STOCKROOM_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str | None) -> None:
    """Stockroom — single-user inventory tracker"""
    settings = get_settings()
    if data_dir is not None:
        settings = replace(settings, data_dir=data_dir)
    if log_level is not None:
        settings = replace(settings, log_level=log_level.upper())

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    manager = inventory_manager(settings)
    ctx.call_on_close(manager.close)
    ctx.obj = manager


# Register subcommands
cli.add_command(product_add)
cli.add_command(product_decrease)
cli.add_command(product_edit)
cli.add_command(product_increase)
cli.add_command(product_list)
cli.add_command(product_remove)
