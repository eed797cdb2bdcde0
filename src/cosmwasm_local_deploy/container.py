"""Local node container lifecycle for cosmwasm-local-deploy."""

import logging
from typing import Callable, Optional

from .commands import Runner, run_command
from .constants import NODE_PORTS, SETUP_SCRIPT, TEST_KEYS
from .exceptions import ContainerStartError
from .node import wait_for_node
from .types import DeploymentConfig

logger = logging.getLogger(__name__)


def container_running(name: str, run: Runner = run_command) -> bool:
    """
    Check whether a running container has exactly this name.

    Args:
        name: Container name
        run: Command runner

    Returns:
        True if found, False otherwise
    """
    result = run(["docker", "ps", "--filter", f"name=^/{name}$", "--format", "{{.Names}}"])
    return name in result.stdout.split()


def start_container(config: DeploymentConfig, run: Runner = run_command) -> str:
    """
    Start a detached node container seeded with the test accounts.

    Args:
        config: Deployment configuration
        run: Command runner

    Returns:
        Container id printed by docker

    Raises:
        ContainerStartError: If docker yields no container id
    """
    args = ["docker", "run", "-d", "--name", config.container_name]
    for port in NODE_PORTS:
        args += ["-p", f"{port}:{port}"]
    args += [
        "-e", f"GAS_LIMIT={config.gas_limit}",
        "-e", f"STAKE_TOKEN={config.stake_token}",
        "-e", "UNSAFE_CORS=true",
        config.container_image,
        SETUP_SCRIPT,
    ]
    args += [address for _, _, address in TEST_KEYS]

    result = run(args, check=False)
    container_id = result.stdout.strip()
    if result.returncode != 0 or not container_id:
        raise ContainerStartError("Error starting container, bailing", output=result.stderr)
    return container_id


def ensure_node_running(
    config: DeploymentConfig,
    run: Runner = run_command,
    wait: Optional[Callable[[DeploymentConfig], object]] = None,
) -> bool:
    """
    Make sure the named node container is running.

    An existing container is reused as-is. A new one is started and the
    chain is given time to bootstrap before returning.

    Args:
        config: Deployment configuration
        run: Command runner
        wait: Bootstrap wait (defaults to polling the node RPC)

    Returns:
        True if a container was started, False if an existing one was reused

    Raises:
        ContainerStartError: If the container cannot be started
        WaitTimeoutError: If the chain does not start producing blocks in time
    """
    if container_running(config.container_name, run):
        logger.info("# Using existing container '%s'", config.container_name)
        return False

    logger.info("# Starting container '%s'", config.container_name)
    container_id = start_container(config, run)
    logger.debug("Started container %s", container_id)

    logger.info("# Waiting up to %gs for chain to start", config.wait_timeout)
    if wait is None:
        wait_for_node(config.node_rpc_url, config.wait_timeout, config.poll_interval)
    else:
        wait(config)
    return True


def destroy_container(name: str, run: Runner = run_command) -> None:
    """Stop and remove the node container."""
    run(["docker", "stop", name])
    run(["docker", "rm", name])
    logger.info("# Removed container '%s'", name)
