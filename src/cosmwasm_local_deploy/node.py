"""Node status polling over the Tendermint RPC for cosmwasm-local-deploy."""

import logging
from typing import Optional

import requests

from .waiting import wait_until

logger = logging.getLogger(__name__)


def get_latest_block_height(rpc_url: str) -> int:
    """
    Get the latest block height reported by the node.

    Args:
        rpc_url: Tendermint RPC endpoint (e.g., http://localhost:26657)

    Returns:
        Latest block height

    Raises:
        KeyError: If the response is missing required fields
        TypeError: If a response field is null or has the wrong type
        ValueError: If RPC returns an error
        RuntimeError: If a network error occurs
    """
    try:
        response = requests.get(f"{rpc_url}/status", timeout=5)

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        # Check for RPC errors
        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        return int(result["result"]["sync_info"]["latest_block_height"])

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def _probe_height(rpc_url: str) -> Optional[int]:
    # The RPC server refuses connections until genesis completes
    try:
        return get_latest_block_height(rpc_url)
    except (RuntimeError, ValueError, KeyError, TypeError) as e:
        logger.debug("Node not ready: %s", e)
        return None


def wait_for_node(rpc_url: str, timeout: float, interval: float) -> int:
    """
    Wait until the node is producing blocks.

    The node counts as bootstrapped once it reports a positive height and
    that height has advanced at least once.

    Args:
        rpc_url: Tendermint RPC endpoint
        timeout: Maximum seconds to wait
        interval: Seconds between polls

    Returns:
        The advanced block height

    Raises:
        WaitTimeoutError: If the chain does not advance in time
    """
    first_height: Optional[int] = None

    def advanced() -> Optional[int]:
        nonlocal first_height
        height = _probe_height(rpc_url)
        if not height:
            return None
        if first_height is None:
            first_height = height
            return None
        return height if height > first_height else None

    height = wait_until(advanced, timeout, interval, f"chain at {rpc_url} to produce blocks")
    logger.info("# Chain is producing blocks (height %d)", height)
    return height
