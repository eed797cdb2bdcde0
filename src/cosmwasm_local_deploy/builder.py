"""Contract build and staging via the optimizer image."""

import logging
from pathlib import Path

from .commands import Runner, run_command
from .constants import REGISTRY_CACHE_VOLUME
from .exceptions import BuildError, CommandError
from .paths import (
    get_build_cache_volume,
    get_built_artifact_path,
    get_container_artifact_path,
    get_contract_dir,
)
from .types import DeploymentConfig

logger = logging.getLogger(__name__)


def build_artifact(config: DeploymentConfig, run: Runner = run_command) -> Path:
    """
    Compile the contract with the pinned optimizer image.

    The optimizer's console output is only logged at debug level.

    Returns:
        Path of the produced artifacts/<contract_name>.wasm

    Raises:
        BuildError: If the optimizer fails or produces no artifact
    """
    contract_dir = get_contract_dir(config.contract_dir)
    logger.info("# Building %s in %s", config.contract_name, contract_dir)

    result = run(
        [
            "docker", "run", "--rm",
            "-v", f"{contract_dir}:/code",
            "--mount",
            f"type=volume,source={get_build_cache_volume(contract_dir)},target=/code/target",
            "--mount",
            f"type=volume,source={REGISTRY_CACHE_VOLUME},target=/usr/local/cargo/registry",
            config.optimizer_image,
        ],
        check=False,
    )
    logger.debug("Optimizer output:\n%s%s", result.stdout, result.stderr)
    if result.returncode != 0:
        raise BuildError(
            f"Optimizer exited with status {result.returncode}",
            output=(result.stdout + result.stderr).strip(),
        )

    artifact = get_built_artifact_path(contract_dir, config.contract_name)
    if not artifact.is_file():
        raise BuildError(f"Build produced no artifact at {artifact}")
    return artifact


def stage_artifact(config: DeploymentConfig, artifact: Path, run: Runner = run_command) -> str:
    """
    Copy the built wasm into the node container's filesystem root.

    Returns:
        Path of the wasm inside the container

    Raises:
        BuildError: If the copy fails
    """
    target = get_container_artifact_path(config.contract_name)
    try:
        run(["docker", "cp", str(artifact), f"{config.container_name}:{target}"])
    except CommandError as e:
        raise BuildError(f"Failed to copy {artifact} into {config.container_name}", output=e.output) from e
    return target


def build_and_stage(config: DeploymentConfig, run: Runner = run_command) -> str:
    """Build the contract and stage it in the node container."""
    artifact = build_artifact(config, run)
    return stage_artifact(config, artifact, run)
