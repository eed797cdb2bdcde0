"""
cosmwasm-local-deploy: deploy a CosmWasm contract to a local junod container
"""

from importlib.metadata import PackageNotFoundError, version

from .config import resolve_config
from .deployments import LocalDeployer
from .exceptions import (
    ArtifactNotFoundError,
    BuildError,
    CodeIdNotFoundError,
    CommandError,
    ConfigError,
    ContainerStartError,
    ContractAddressNotFoundError,
    DeployError,
    MissingToolError,
    PreflightError,
    TransactionFailedError,
    WaitTimeoutError,
)
from .types import DeploymentConfig, DeploymentResult

try:
    __version__ = version("cosmwasm-local-deploy")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "LocalDeployer",
    "resolve_config",
    "DeploymentConfig",
    "DeploymentResult",
    "DeployError",
    "ConfigError",
    "PreflightError",
    "MissingToolError",
    "ArtifactNotFoundError",
    "CommandError",
    "ContainerStartError",
    "BuildError",
    "CodeIdNotFoundError",
    "ContractAddressNotFoundError",
    "TransactionFailedError",
    "WaitTimeoutError",
]
