"""
Corn lending stack deployment

Deploys Corn, CornDEX, Lending and MovePrice in dependency order, then runs the
bootstrap policy matching the network. Exit status is 0 when every contract is
deployed (best-effort bootstrap failures on public networks included) and 1 on
any fatal error.
"""

import sys
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .bootstrap import ActionResult, select_policy
from .config import DeploymentConfig, load_config
from .network import NetworkContext, connect
from .registry import DeploymentRegistry
from .topology import CORN_TOPOLOGY, DeployedContract, resolve_topology

logger = logging.getLogger(__name__)


@dataclass
class DeploymentReport:
    network: str
    policy: str
    contracts: Dict[str, DeployedContract] = field(default_factory=dict)
    results: List[ActionResult] = field(default_factory=list)

    @property
    def failed_actions(self) -> List[ActionResult]:
        return [r for r in self.results if not r.succeeded]


def run_deployment(registry: Any, network: NetworkContext, deployer: Any) -> DeploymentReport:
    """
    Deploys the full topology, then bootstraps it.

    Topology failures propagate before any bootstrap action runs. Required
    bootstrap failures propagate as they were raised.
    """
    names = ', '.join(step.contract_name for step in CORN_TOPOLOGY)
    logger.info(f"Deploying {names} to '{network.name}' as {deployer.address}")
    contracts = resolve_topology(registry)

    policy = select_policy(network)
    logger.info(f"Configuring for {network.name} ({policy.name} bootstrap)...")

    results = policy.run(contracts, deployer)
    return DeploymentReport(network=network.name, policy=policy.name, contracts=contracts, results=results)


def configure_logging(config: DeploymentConfig) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        handlers.insert(0, logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


def _log_summary(report: DeploymentReport) -> None:
    logger.info(f"Deployment on '{report.network}' finished ({report.policy} bootstrap)")
    for contract in report.contracts.values():
        status = "deployed" if contract.newly_deployed else "reused"
        logger.info(f"  {contract.name}: {contract.address} ({status})")
    for result in report.results:
        if result.succeeded:
            logger.info(f"  ok: {result.description}")
        else:
            logger.warning(f"  FAILED: {result.description}: {result.error}")


def main() -> int:
    try:
        config = load_config()
    except Exception as e:
        # Logging is not configured yet
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(config)

    try:
        w3 = connect(config.rpc_url)
        network = NetworkContext(config.network, w3)
        deployer = w3.eth.account.from_key(config.private_key)
        registry = DeploymentRegistry(
            w3,
            network,
            deployer,
            artifacts_dir=config.artifacts_dir,
            deployments_dir=config.deployments_dir,
            tx_timeout=config.tx_timeout,
        )
        report = run_deployment(registry, network, deployer)
    except Exception as e:
        logger.error(f"Deployment aborted: {e}")
        return 1

    _log_summary(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
