"""Sourceable shell helpers for working with a deployed contract."""

import shlex

import click

from .types import DeploymentConfig

SESSION_TEMPLATE = """\

export CONTRACT_ADDR={address};

# {binary}_execute '{{MESSAGE}}' --from test-user[2]
{binary}_execute() {{
  MESSAGE=$1;
  shift;
  {docker_exec} {binary} tx wasm execute {address} "${{MESSAGE}}" {tx_args} "${{@}}";
}}

# {binary}_query '{{MESSAGE}}'
{binary}_query() {{
  MESSAGE=$1;
  shift;
  {docker_exec} {binary} query wasm contract-state smart {address} "${{MESSAGE}}" {query_args};
}}

{binary}_destroy() {{
  docker stop {container}
  docker rm {container}
}}
"""


def render_session(config: DeploymentConfig, contract_address: str) -> str:
    """
    Render the address export and the execute/query/destroy shell functions.

    Returns:
        Shell text meant to be sourced into an interactive shell
    """
    container = shlex.quote(config.container_name)
    return SESSION_TEMPLATE.format(
        address=shlex.quote(contract_address),
        binary=config.node_binary,
        container=container,
        docker_exec=f"docker exec -i {container}",
        tx_args=shlex.join(config.tx_args),
        query_args=shlex.join(config.query_args),
    )


def emit_session(config: DeploymentConfig, contract_address: str) -> None:
    """Print the session helpers to standard output."""
    click.echo(render_session(config, contract_address))
