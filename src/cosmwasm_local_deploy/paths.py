"""Path and volume-name helpers for cosmwasm-local-deploy."""

from pathlib import Path
from typing import Optional, Union

from .constants import ARTIFACTS_DIR, BUILD_CACHE_SUFFIX


def get_contract_dir(contract_dir: Union[Path, str], cwd: Optional[Path] = None) -> Path:
    """
    Resolve the contract source tree.

    Args:
        contract_dir: Configured directory, relative paths resolve against cwd
        cwd: Base directory (defaults to the current working directory)

    Returns:
        Absolute path of the contract source tree
    """
    base = Path.cwd() if cwd is None else Path(cwd)
    return (base / contract_dir).resolve()


def get_built_artifact_path(contract_dir: Path, contract_name: str) -> Path:
    """
    Get the path the optimizer writes the contract wasm to.

    Args:
        contract_dir: Contract source tree
        contract_name: Contract base name

    Returns:
        Path to <contract_dir>/artifacts/<contract_name>.wasm
    """
    return contract_dir / ARTIFACTS_DIR / f"{contract_name}.wasm"


def get_container_artifact_path(contract_name: str) -> str:
    """Path of the staged wasm inside the node container (filesystem root)."""
    return f"/{contract_name}.wasm"


def get_build_cache_volume(contract_dir: Path) -> str:
    """Name of the build-output cache volume, keyed by the source tree's base name."""
    return f"{contract_dir.name}{BUILD_CACHE_SUFFIX}"
