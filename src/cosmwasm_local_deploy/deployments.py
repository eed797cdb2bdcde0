"""Main API for cosmwasm-local-deploy."""

import logging
from typing import Callable, Optional

from .builder import build_and_stage
from .chain import NodeCli, instantiate_contract, store_contract
from .commands import Runner, run_command
from .config import resolve_config
from .container import ensure_node_running
from .keys import ensure_test_keys
from .preflight import run_preflight
from .types import DeploymentConfig, DeploymentResult

logger = logging.getLogger(__name__)


class LocalDeployer:
    """Runs the local deployment sequence, aborting on the first failure."""

    def __init__(
        self,
        config: Optional[DeploymentConfig] = None,
        run: Runner = run_command,
        preflight: Callable[[DeploymentConfig], None] = run_preflight,
        wait_for_node: Optional[Callable[[DeploymentConfig], object]] = None,
    ):
        """
        Initialize the deployer.

        Args:
            config: Resolved configuration (defaults to resolve_config())
            run: Command runner used for every docker and node CLI call
            preflight: Precondition checks run before any side effect
            wait_for_node: Bootstrap wait for a newly started container
                          (defaults to polling the node RPC)
        """
        self.config = resolve_config() if config is None else config
        self._run = run
        self._preflight = preflight
        self._wait_for_node = wait_for_node
        self.cli = NodeCli(self.config, run)

    def deploy(self, on_code_id: Optional[Callable[[str], None]] = None) -> DeploymentResult:
        """
        Deploy the contract to the local node.

        Sequence: preflight, container, keys, build and stage, store,
        instantiate, resolve address. There is no retry and no rollback;
        containers and keys created before a failure stay in place.

        Args:
            on_code_id: Called with the code id as soon as it is known

        Returns:
            DeploymentResult

        Raises:
            DeployError: Any failure along the sequence
        """
        self._preflight(self.config)

        created = ensure_node_running(self.config, self._run, wait=self._wait_for_node)
        ensure_test_keys(self.config, self._run)
        build_and_stage(self.config, self._run)

        logger.info("# Storing contract ...")
        code_id = store_contract(self.cli)
        if on_code_id is not None:
            on_code_id(code_id)

        logger.info("# Instantiating contract ...")
        address = instantiate_contract(self.cli, code_id)

        return DeploymentResult(
            code_id=code_id,
            contract_address=address,
            container_name=self.config.container_name,
            container_created=created,
        )
