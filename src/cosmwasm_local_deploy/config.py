"""Environment-driven configuration for cosmwasm-local-deploy."""

import os
from typing import Mapping, Optional

from .constants import CONTAINER_REPOSITORY, DEFAULTS, GAS_PRICE_AMOUNT
from .exceptions import ConfigError
from .types import DeploymentConfig


def _get(environ: Mapping[str, str], key: str) -> str:
    return environ.get(key, DEFAULTS[key])


def _get_seconds(environ: Mapping[str, str], key: str) -> float:
    value = _get(environ, key)
    try:
        seconds = float(value)
    except ValueError as e:
        raise ConfigError(f"{key} must be a number of seconds, got '{value}'") from e
    if seconds < 0:
        raise ConfigError(f"{key} must not be negative, got '{value}'")
    return seconds


def resolve_config(environ: Optional[Mapping[str, str]] = None) -> DeploymentConfig:
    """
    Resolve the deployment configuration from environment overrides.

    Each override is used verbatim when present; otherwise the default from
    constants.DEFAULTS applies. GAS_PRICES defaults to 0.1<FEE_TOKEN> and
    CONTAINER_IMAGE to the juno image at CONTAINER_TAG.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Frozen DeploymentConfig

    Raises:
        ConfigError: If WAIT_TIMEOUT or POLL_INTERVAL is not a non-negative number
    """
    if environ is None:
        environ = os.environ

    fee_token = _get(environ, "FEE_TOKEN")
    container_tag = _get(environ, "CONTAINER_TAG")

    return DeploymentConfig(
        contract_name=_get(environ, "CONTRACT_NAME"),
        wasm_path=_get(environ, "CONTRACT_WASM"),
        contract_dir=_get(environ, "CONTRACT_DIR"),
        instantiate_message=_get(environ, "CONTRACT_INSTANTIATE_MESSAGE"),
        chain_id=_get(environ, "CHAIN_ID"),
        fee_token=fee_token,
        gas=_get(environ, "GAS"),
        gas_adjustment=_get(environ, "GAS_ADJUSTMENT"),
        gas_prices=environ.get("GAS_PRICES", f"{GAS_PRICE_AMOUNT}{fee_token}"),
        gas_limit=_get(environ, "GAS_LIMIT"),
        stake_token=_get(environ, "STAKE_TOKEN"),
        container_tag=container_tag,
        container_image=environ.get(
            "CONTAINER_IMAGE", f"{CONTAINER_REPOSITORY}:{container_tag}"
        ),
        container_name=_get(environ, "CONTAINER_NAME"),
        node_binary=_get(environ, "NODE_BINARY"),
        optimizer_image=_get(environ, "OPTIMIZER_IMAGE"),
        node_rpc_url=_get(environ, "NODE_RPC_URL").rstrip("/"),
        wait_timeout=_get_seconds(environ, "WAIT_TIMEOUT"),
        poll_interval=_get_seconds(environ, "POLL_INTERVAL"),
    )
