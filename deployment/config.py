import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import HARDHAT_DEV_PRIVATE_KEY, LOCAL_NETWORKS
from .errors import ConfigError


@dataclass
class DeploymentConfig:
    """Runtime settings for one deployment run"""
    network: str
    rpc_url: str
    private_key: str
    artifacts_dir: str
    deployments_dir: str
    tx_timeout: int = 300
    log_file: Optional[str] = "deploy.log"
    log_level: str = "INFO"


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def load_config() -> DeploymentConfig:
    """Loads the deployment settings from the environment (and a .env file if present)."""
    load_dotenv()

    network = os.getenv("DEPLOY_NETWORK", "localhost").strip()
    if not network:
        raise ConfigError("DEPLOY_NETWORK must not be empty")

    private_key = os.getenv("DEPLOYER_PRIVATE_KEY")
    if not private_key:
        if network not in LOCAL_NETWORKS:
            raise ConfigError(f"DEPLOYER_PRIVATE_KEY not found in environment (required for network '{network}')")
        private_key = HARDHAT_DEV_PRIVATE_KEY

    tx_timeout = _int_env("TX_TIMEOUT", "300")
    if tx_timeout <= 0:
        raise ConfigError(f"TX_TIMEOUT must be positive, got {tx_timeout}")

    return DeploymentConfig(
        network=network,
        rpc_url=os.getenv("RPC_URL", "http://127.0.0.1:8545"),
        private_key=private_key,
        artifacts_dir=os.getenv("ARTIFACTS_DIR", os.path.join("packages", "hardhat", "artifacts")),
        deployments_dir=os.getenv("DEPLOYMENTS_DIR", os.path.join("packages", "hardhat", "deployments")),
        tx_timeout=tx_timeout,
        # An empty DEPLOY_LOG_FILE disables the file handler
        log_file=os.getenv("DEPLOY_LOG_FILE", "deploy.log") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
