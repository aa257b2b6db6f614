import logging
from pathlib import Path

import click

from retail.infrastructure.bootstrap import DEFAULT_AUDIT_LOG, build_session
from retail.infrastructure.cli.menu_commands import menu
from retail.infrastructure.cli.product_commands import product_list


@click.group(invoke_without_command=True)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_AUDIT_LOG,
    envvar="RETAIL_AUDIT_LOG",
    show_default=True,
    help="File that receives one audit line per checkout.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, log_file: Path, verbose: bool) -> None:
    """Retail Order Simulator

    Runs the interactive shopping menu when no command is given.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    ctx.obj = build_session(log_file)

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


# Register subcommands
cli.add_command(menu)
cli.add_command(product_list)
