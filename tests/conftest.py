"""Shared pytest fixtures for cosmwasm-local-deploy tests."""

import dataclasses
import json
import subprocess
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

import pytest

from cosmwasm_local_deploy.config import resolve_config
from cosmwasm_local_deploy.constants import DEFAULTS
from cosmwasm_local_deploy.exceptions import CommandError
from cosmwasm_local_deploy.types import DeploymentConfig


class FakeRunner:
    """Stands in for run_command: records calls and returns canned output.

    Rules match when their tokens appear, space-joined, in the command line.
    The most recently added matching rule wins. A rule given a list of
    outputs returns them in turn and then keeps repeating the last one.
    """

    def __init__(self):
        self.calls: List[List[str]] = []
        self._rules: List[Tuple[Tuple[str, ...], List[Tuple[str, str, int]]]] = []

    def on(
        self,
        *tokens: str,
        stdout: Union[str, List[str]] = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> "FakeRunner":
        outputs = stdout if isinstance(stdout, list) else [stdout]
        self._rules.append((tokens, [(out, stderr, returncode) for out in outputs]))
        return self

    def __call__(self, args: Sequence[str], check: bool = True) -> subprocess.CompletedProcess:
        args = list(args)
        self.calls.append(args)

        stdout, stderr, returncode = "", "", 0
        for tokens, outputs in reversed(self._rules):
            if _contains(args, tokens):
                stdout, stderr, returncode = outputs.pop(0) if len(outputs) > 1 else outputs[0]
                break

        if check and returncode != 0:
            raise CommandError(args, returncode, stdout, stderr)
        return subprocess.CompletedProcess(args, returncode, stdout, stderr)

    def commands_with(self, *tokens: str) -> List[List[str]]:
        """Return recorded calls containing tokens."""
        return [call for call in self.calls if _contains(call, tokens)]


def _contains(args: List[str], tokens: Tuple[str, ...]) -> bool:
    # Shell snippets passed to `sh -c` are a single argument, so match on text
    return " ".join(tokens) in " ".join(args)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def store_response(fixtures_dir: Path) -> str:
    """Raw `tx wasm store` output with code id 3."""
    return (fixtures_dir / "store_response.json").read_text()


@pytest.fixture
def instantiate_response(fixtures_dir: Path) -> str:
    """Raw `tx wasm instantiate` output."""
    return (fixtures_dir / "instantiate_response.json").read_text()


@pytest.fixture
def contracts_listing(fixtures_dir: Path) -> str:
    """Raw contract listing holding addrA then addrB."""
    return (fixtures_dir / "contracts_listing.json").read_text()


@pytest.fixture
def keys_list(fixtures_dir: Path) -> str:
    """Raw `keys list --output json` with both test keys."""
    return (fixtures_dir / "keys_list.json").read_text()


@pytest.fixture
def contract_dir(tmp_path: Path) -> Path:
    """Contract source tree with a built optimizer artifact."""
    contract_dir = tmp_path / "cosmos-chess"
    (contract_dir / "artifacts").mkdir(parents=True)
    (contract_dir / "artifacts" / "cosmos_chess.wasm").write_bytes(b"\0asm\x01\0\0\0")
    return contract_dir


@pytest.fixture
def wasm_file(contract_dir: Path) -> Path:
    """Cargo-built wasm checked by preflight."""
    wasm = contract_dir / "target" / "wasm32-unknown-unknown" / "release" / "cosmos_chess.wasm"
    wasm.parent.mkdir(parents=True)
    wasm.write_bytes(b"\0asm\x01\0\0\0")
    return wasm


@pytest.fixture
def env(contract_dir: Path, wasm_file: Path) -> Dict[str, str]:
    """Environment overrides pointing at the temporary contract tree."""
    return {
        "CONTRACT_DIR": str(contract_dir),
        "CONTRACT_WASM": str(wasm_file),
        "WAIT_TIMEOUT": "5",
        "POLL_INTERVAL": "0",
    }


@pytest.fixture
def config(env: Dict[str, str]) -> DeploymentConfig:
    """Resolved configuration for the temporary contract tree."""
    return resolve_config(env)


@pytest.fixture
def impatient_config(config: DeploymentConfig) -> DeploymentConfig:
    """Configuration whose polls give up after a single attempt."""
    return dataclasses.replace(config, wait_timeout=0.0)


@pytest.fixture
def runner() -> FakeRunner:
    """Runner with no container running and an empty keyring."""
    return FakeRunner().on("keys", "list", stdout="[]")


@pytest.fixture
def node(
    runner: FakeRunner, store_response: str, instantiate_response: str, contracts_listing: str
) -> FakeRunner:
    """Runner answering a full deployment: store -> code id 3, listing [addrA, addrB]."""
    runner.on("docker", "run", "-d", stdout="f3c2a1b0e9d8\n")
    runner.on("tx", "wasm", "store", stdout=store_response)
    runner.on("tx", "wasm", "instantiate", stdout=instantiate_response)
    runner.on("list-contract-by-code", stdout=contracts_listing)
    return runner


@pytest.fixture
def empty_listing() -> str:
    """Contract listing before anything was instantiated."""
    return json.dumps({"contracts": [], "pagination": {"next_key": None, "total": "0"}})


# Variables read by the package besides the ones with plain defaults
EXTRA_ENV_KEYS = ("GAS_PRICES", "CONTAINER_IMAGE", "CONTRACT_ADDR", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    """Keep the developer's shell configuration out of every test."""
    for key in (*DEFAULTS, *EXTRA_ENV_KEYS):
        monkeypatch.delenv(key, raising=False)
