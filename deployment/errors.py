"""
Deployment errors.

Everything raised on purpose by this package derives from DeploymentError so
the entry point can tell expected failures from programming errors.
"""

from typing import Optional


class DeploymentError(Exception):
    """Base class for deployment errors."""


class ConfigError(DeploymentError):
    """Missing or malformed configuration value."""


class ArtifactNotFound(DeploymentError):
    """Compiled contract artifact is not on disk."""


class DeploymentNotFound(DeploymentError):
    """The registry has no record for the requested contract on this network."""


class NetworkError(DeploymentError):
    """RPC endpoint unreachable, RPC error reply, or a local-only call on a public network."""


class TopologyError(DeploymentError):
    """Deployment steps reference unknown, later, or duplicate steps."""


class TransactionFailed(DeploymentError):
    """A mined transaction reverted (receipt status != 1)."""

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        super().__init__(message)
        self.tx_hash = tx_hash


class DeploymentStepError(DeploymentError):
    """
    A topology step failed.

    The original exception is chained as __cause__ and its message is kept
    verbatim at the end of str(self).
    """

    def __init__(self, step: str, contract_name: str, original: BaseException):
        super().__init__(f"Deployment step '{step}' ({contract_name}) failed: {original}")
        self.step = step
        self.contract_name = contract_name
        self.original = original
