"""Local precondition checks, run before any side effect."""

import shutil
from pathlib import Path
from typing import Iterable

from .exceptions import ArtifactNotFoundError, MissingToolError
from .types import DeploymentConfig

# Remediation hints shown alongside a failed check
TOOL_HINTS = {
    "docker": "Install Docker (https://docs.docker.com/get-docker/) and make sure the daemon is running",
}

REQUIRED_TOOLS = ("docker",)


def check_required_tools(tools: Iterable[str] = REQUIRED_TOOLS) -> None:
    """
    Verify required executables are on PATH.

    Raises:
        MissingToolError: For the first tool that is missing
    """
    for tool in tools:
        if shutil.which(tool) is None:
            raise MissingToolError(
                f"{tool} not found", hint=TOOL_HINTS.get(tool, f"Install {tool} and retry")
            )


def check_wasm_artifact(config: DeploymentConfig) -> Path:
    """
    Verify the contract wasm has been built.

    Returns:
        Path to the wasm file

    Raises:
        ArtifactNotFoundError: If the file does not exist
    """
    wasm_path = Path(config.wasm_path)
    if not wasm_path.is_file():
        raise ArtifactNotFoundError(
            f"Contract {config.wasm_path} not found", hint="Run 'cargo wasm' to build"
        )
    return wasm_path


def run_preflight(config: DeploymentConfig) -> None:
    """Run all precondition checks in order."""
    check_required_tools()
    check_wasm_artifact(config)
