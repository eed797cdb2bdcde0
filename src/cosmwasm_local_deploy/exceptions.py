"""Custom exception classes for cosmwasm-local-deploy."""

from typing import Optional


class DeployError(Exception):
    """Base exception for local deployment errors."""

    def __init__(self, message: str, output: Optional[str] = None):
        super().__init__(message)
        # Raw text from the external tool, echoed to stderr for diagnosis
        self.output = output


class ConfigError(DeployError, ValueError):
    """Raised when an environment override cannot be used."""

    pass


class PreflightError(DeployError):
    """Raised when a local precondition fails before any side effect."""

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.hint = hint


class MissingToolError(PreflightError, FileNotFoundError):
    """Raised when a required executable is not on PATH."""

    pass


class ArtifactNotFoundError(PreflightError, FileNotFoundError):
    """Raised when the contract wasm file has not been built."""

    pass


class CommandError(DeployError, RuntimeError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, args, returncode: int, stdout: str = "", stderr: str = ""):
        command = " ".join(args)
        super().__init__(
            f"Command failed with exit status {returncode}: {command}",
            output="\n".join(part for part in (stdout.strip(), stderr.strip()) if part),
        )
        self.command = list(args)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class ContainerStartError(DeployError, RuntimeError):
    """Raised when starting the node container yields no container id."""

    pass


class BuildError(DeployError, RuntimeError):
    """Raised when the optimizer build or the artifact copy fails."""

    pass


class CodeIdNotFoundError(DeployError, ValueError):
    """Raised when a store transaction result carries no code id."""

    pass


class ContractAddressNotFoundError(DeployError, ValueError):
    """Raised when no contract address is listed for the stored code id."""

    pass


class WaitTimeoutError(DeployError, TimeoutError):
    """Raised when a bounded poll gives up."""

    pass


class TransactionFailedError(DeployError, RuntimeError):
    """Raised when the node rejects a transaction (non-zero result code)."""

    pass
