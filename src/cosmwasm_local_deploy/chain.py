"""Store, instantiate and query contracts through the node CLI."""

import logging
from typing import List, Optional, Sequence, Tuple

from .commands import Runner, docker_exec, run_command
from .constants import NULL_SENTINEL, VALIDATOR_KEY
from .exceptions import (
    CodeIdNotFoundError,
    ContractAddressNotFoundError,
    TransactionFailedError,
    WaitTimeoutError,
)
from .parsers import extract_code_id, latest_contract_address, parse_tx_result
from .paths import get_container_artifact_path
from .types import DeploymentConfig
from .waiting import wait_until

logger = logging.getLogger(__name__)


class NodeCli:
    """Runs the node binary inside the local container."""

    def __init__(self, config: DeploymentConfig, run: Runner = run_command):
        """
        Initialize the node CLI wrapper.

        Args:
            config: Deployment configuration
            run: Command runner
        """
        self.config = config
        self._run = run

    def _exec(self, *args: str) -> str:
        result = self._run(
            docker_exec(self.config.container_name, self.config.node_binary, *args)
        )
        return result.stdout

    def store_code(self) -> str:
        """
        Upload the staged wasm and wait for block inclusion.

        Returns:
            Raw transaction result
        """
        return self._exec(
            "tx", "wasm", "store", get_container_artifact_path(self.config.contract_name),
            "-b", "block", "--from", VALIDATOR_KEY,
            *self.config.tx_args,
        )

    def instantiate(self, code_id: str) -> str:
        """
        Instantiate stored code without an admin, labelled with the contract name.

        Returns:
            Raw transaction result
        """
        return self._exec(
            "tx", "wasm", "instantiate", code_id, self.config.instantiate_message,
            "--from", VALIDATOR_KEY, "--label", self.config.contract_name,
            "--no-admin", *self.config.tx_args,
        )

    def list_contracts_by_code(self, code_id: str) -> str:
        """Return the raw contract listing for code_id."""
        return self._exec(
            "query", "wasm", "list-contract-by-code", code_id, *self.config.query_args
        )

    def execute(self, contract_address: str, message: str, extra_args: Sequence[str] = ()) -> str:
        """Send an execute message to a contract."""
        return self._exec(
            "tx", "wasm", "execute", contract_address, message,
            *self.config.tx_args, *extra_args,
        )

    def query_smart(self, contract_address: str, message: str) -> str:
        """Run a read-only smart query against a contract."""
        return self._exec(
            "query", "wasm", "contract-state", "smart", contract_address, message,
            *self.config.query_args,
        )


def store_contract(cli: NodeCli) -> str:
    """
    Store the staged contract.

    Returns:
        Code id

    Raises:
        CodeIdNotFoundError: If the result carries no code id
    """
    store = cli.store_code()
    code_id = extract_code_id(store)
    if not code_id:
        raise CodeIdNotFoundError("Store transaction returned no code id", output=store)
    return code_id


def wait_for_contract(cli: NodeCli, code_id: str) -> Tuple[Optional[str], str]:
    """
    Poll the listing for code_id until a contract appears.

    Polling stops at the first non-empty listing, including one whose last
    entry is the null sentinel.

    Returns:
        Tuple of (address, listing) where address is the last listed entry,
        or None if none appeared before the timeout, and listing is the raw
        output of the final query
    """
    listings: List[str] = []

    def listed() -> Optional[str]:
        listings.append(cli.list_contracts_by_code(code_id))
        return latest_contract_address(listings[-1])

    try:
        address = wait_until(
            listed,
            cli.config.wait_timeout,
            cli.config.poll_interval,
            f"a contract under code id {code_id}",
        )
    except WaitTimeoutError as e:
        logger.debug("%s", e)
        return None, listings[-1]
    return address, listings[-1]


def instantiate_contract(cli: NodeCli, code_id: str) -> str:
    """
    Instantiate code_id and resolve the new contract's address.

    The most recent instantiation is the last element of the listing.

    Returns:
        Contract address

    Raises:
        TransactionFailedError: If the node rejects the instantiate transaction
        ContractAddressNotFoundError: If the listing yields the null sentinel
                                      or nothing is listed in time
    """
    instantiate = cli.instantiate(code_id)

    result = parse_tx_result(instantiate)
    if result is not None and result.code != 0:
        raise TransactionFailedError(
            f"Instantiate transaction failed with code {result.code}: {result.raw_log}",
            output=instantiate,
        )

    address, contracts = wait_for_contract(cli, code_id)
    if address is None or address == NULL_SENTINEL:
        raise ContractAddressNotFoundError(
            f"No contract listed for code id {code_id}",
            output=f"{instantiate.strip()}\n{contracts.strip()}",
        )
    return address
