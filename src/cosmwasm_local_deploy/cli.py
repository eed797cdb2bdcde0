"""Command line interface for cosmwasm-local-deploy."""

import logging
import sys
from typing import NoReturn

import click

from .chain import NodeCli
from .config import resolve_config
from .container import destroy_container
from .deployments import LocalDeployer
from .exceptions import DeployError, PreflightError
from .session import emit_session

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _abort(error: DeployError) -> NoReturn:
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, PreflightError) and error.hint:
        click.echo(error.hint, err=True)
    if error.output:
        click.echo(error.output, err=True)
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    envvar="LOG_LEVEL",
    default="INFO",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Verbosity of progress messages on stderr.",
)
@click.pass_context
def cli(ctx, log_level):
    """Start a local junod node, then build, store and instantiate the contract.

    All settings come from environment variables (CONTRACT_NAME, CONTRACT_WASM,
    CHAIN_ID, GAS, CONTAINER_NAME, ...). Without a subcommand, runs `deploy`.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        stream=sys.stderr,
    )
    try:
        ctx.obj = resolve_config()
    except DeployError as e:
        _abort(e)

    if ctx.invoked_subcommand is None:
        ctx.invoke(deploy)


@cli.command()
@click.pass_obj
def deploy(config):
    """Deploy the contract and print sourceable session helpers."""
    deployer = LocalDeployer(config)
    try:
        result = deployer.deploy(on_code_id=lambda code_id: click.echo(f"code_id={code_id}"))
    except DeployError as e:
        _abort(e)

    click.echo(f"addr={result.contract_address}")
    emit_session(config, result.contract_address)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.option("--contract", envvar="CONTRACT_ADDR", required=True, help="Contract address.")
@click.argument("message")
@click.argument("extra_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def execute(config, contract, message, extra_args):
    """Send MESSAGE to the contract; EXTRA_ARGS go to the node CLI (e.g. --from test-user)."""
    try:
        click.echo(NodeCli(config).execute(contract, message, extra_args), nl=False)
    except DeployError as e:
        _abort(e)


@cli.command()
@click.option("--contract", envvar="CONTRACT_ADDR", required=True, help="Contract address.")
@click.argument("message")
@click.pass_obj
def query(config, contract, message):
    """Run a read-only smart query against the contract."""
    try:
        click.echo(NodeCli(config).query_smart(contract, message), nl=False)
    except DeployError as e:
        _abort(e)


@cli.command()
@click.pass_obj
def destroy(config):
    """Stop and remove the local node container."""
    try:
        destroy_container(config.container_name)
    except DeployError as e:
        _abort(e)


def main():
    cli()


if __name__ == "__main__":
    main()
