"""Test key provisioning inside the node keyring."""

import json
import logging
from typing import List, Optional

from .commands import Runner, docker_exec, run_command
from .constants import TEST_KEYS, TEST_KEYS_ENV_FILE
from .exceptions import CommandError
from .types import DeploymentConfig

logger = logging.getLogger(__name__)


def list_keys(config: DeploymentConfig, run: Runner = run_command) -> List[str]:
    """
    List key names registered in the node's keyring.

    Raises:
        CommandError: If the node CLI fails or prints something other than JSON
    """
    args = docker_exec(
        config.container_name, "/bin/sh", "-c", f"{config.node_binary} keys list --output json"
    )
    result = run(args)
    try:
        entries = json.loads(result.stdout or "[]")
    except json.JSONDecodeError as e:
        raise CommandError(args, 0, result.stdout, result.stderr) from e
    # An empty keyring lists as null
    return [entry["name"] for entry in entries or []]


def _recover_command(config: DeploymentConfig, name: str, account: Optional[int]) -> str:
    command = (
        f"source {TEST_KEYS_ENV_FILE}; "
        f"echo $TEST_MNEMONIC | {config.node_binary} keys add {name} --recover"
    )
    if account is not None:
        command += f" --account {account}"
    return command


def ensure_test_keys(config: DeploymentConfig, run: Runner = run_command) -> List[str]:
    """
    Recover any missing well-known test key from the image's mnemonic.

    Not atomic against concurrent runs on the same container.

    Returns:
        Names of the keys that were created (empty when all existed)
    """
    existing = set(list_keys(config, run))
    created = []
    for name, account, address in TEST_KEYS:
        if name in existing:
            continue
        logger.info("# Creating %s key ( %s )", name, address)
        run(
            docker_exec(
                config.container_name, "/bin/sh", "-c", _recover_command(config, name, account)
            )
        )
        created.append(name)
    return created
