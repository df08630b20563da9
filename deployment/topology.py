"""
Topology Resolver

The fixed chain of contract deployments. Each step's constructor arguments are
built by a function whose parameter names are the keys of earlier steps, so the
dependencies of a step can be read straight off its argument builder:

    DeploymentStep("lending", LENDING, lambda corn_dex, corn: [corn_dex.address, corn.address])

Steps run strictly in order. A step is only built once every step it names has
returned a mined address.
"""

import inspect
import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

from .constants import CORN, CORN_DEX, LENDING, MOVE_PRICE
from .errors import DeploymentStepError, TopologyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeployedContract:
    """A contract deployed (or reused) by the registry"""
    name: str
    address: str
    handle: Any
    newly_deployed: bool = False


def _no_args() -> List[Any]:
    return []


@dataclass(frozen=True)
class DeploymentStep:
    """One contract deployment and how to derive its constructor arguments"""
    key: str
    contract_name: str
    args_fn: Callable[..., List[Any]] = _no_args

    @property
    def dependencies(self) -> Tuple[str, ...]:
        return tuple(inspect.signature(self.args_fn).parameters)

    def build_args(self, deployed: Dict[str, DeployedContract]) -> List[Any]:
        missing = [dep for dep in self.dependencies if dep not in deployed]
        if missing:
            raise TopologyError(f"Step '{self.key}' needs {missing} which have not been deployed")
        return list(self.args_fn(*(deployed[dep] for dep in self.dependencies)))


def validate_topology(steps: Sequence[DeploymentStep]) -> None:
    """Rejects duplicate keys and any reference to a step that does not come earlier."""
    seen = set()
    for step in steps:
        if step.key in seen:
            raise TopologyError(f"Duplicate deployment step '{step.key}'")
        for dep in step.dependencies:
            if dep == step.key:
                raise TopologyError(f"Step '{step.key}' depends on itself")
            if dep not in seen:
                raise TopologyError(f"Step '{step.key}' depends on '{dep}', which is not an earlier step")
        seen.add(step.key)


def _corn_dex_args(corn):
    return [corn.address]


def _lending_args(corn_dex, corn):
    return [corn_dex.address, corn.address]


def _move_price_args(corn_dex, corn):
    return [corn_dex.address, corn.address]


CORN_TOPOLOGY = (
    DeploymentStep("corn", CORN),
    DeploymentStep("corn_dex", CORN_DEX, _corn_dex_args),
    DeploymentStep("lending", LENDING, _lending_args),
    DeploymentStep("move_price", MOVE_PRICE, _move_price_args),
)


def resolve_topology(registry, steps: Sequence[DeploymentStep] = CORN_TOPOLOGY) -> Dict[str, DeployedContract]:
    """
    Deploys every step in order through the registry.

    Args:
        registry: Object exposing deploy(name, args) -> DeployedContract
        steps: Deployment steps, earliest first

    Returns:
        Ordered mapping of step key to DeployedContract

    Raises:
        TopologyError: if the steps reference each other out of order
        DeploymentStepError: on the first step that fails; later steps never run
    """
    validate_topology(steps)

    deployed: Dict[str, DeployedContract] = OrderedDict()
    for step in steps:
        try:
            args = step.build_args(deployed)
            deployed[step.key] = registry.deploy(step.contract_name, args)
        except Exception as e:
            logger.error(f"Deployment of {step.contract_name} failed: {e}")
            raise DeploymentStepError(step.key, step.contract_name, e) from e

    return deployed
