"""Data types and dataclasses for cosmwasm-local-deploy."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class DeploymentConfig:
    """Resolved settings for one run. Built once, never mutated."""

    # Contract
    contract_name: str
    wasm_path: str
    contract_dir: str
    instantiate_message: str  # Opaque JSON payload

    # Chain
    chain_id: str
    fee_token: str
    gas: str  # "auto" or a fixed amount
    gas_adjustment: str
    gas_prices: str  # e.g., "0.1ujunox"
    gas_limit: str
    stake_token: str

    # Container
    container_tag: str
    container_image: str
    container_name: str

    # Tooling
    node_binary: str = "junod"
    optimizer_image: str = "cosmwasm/rust-optimizer:0.12.11"
    node_rpc_url: str = "http://localhost:26657"
    wait_timeout: float = 60.0
    poll_interval: float = 1.0

    @property
    def query_args(self) -> List[str]:
        """Arguments shared by every node CLI query."""
        return ["--chain-id", self.chain_id, "--output", "json"]

    @property
    def tx_args(self) -> List[str]:
        """Arguments shared by every node CLI transaction."""
        return [
            "--gas", self.gas,
            "--gas-adjustment", self.gas_adjustment,
            "--gas-prices", self.gas_prices,
            "-y",
            *self.query_args,
        ]


@dataclass
class TxEvent:
    """One event of a transaction log."""

    type: str
    attributes: List[Tuple[str, str]] = field(default_factory=list)

    def get(self, key: str) -> Optional[str]:
        """Return the value of the last attribute named ``key``."""
        for attr_key, value in reversed(self.attributes):
            if attr_key == key:
                return value
        return None


@dataclass
class TxResult:
    """Decoded node CLI transaction response."""

    txhash: str
    code: int
    raw_log: str
    events: List[TxEvent] = field(default_factory=list)


@dataclass
class DeploymentResult:
    """Outcome of a successful deployment."""

    code_id: str
    contract_address: str
    container_name: str
    container_created: bool  # False when an existing container was reused
