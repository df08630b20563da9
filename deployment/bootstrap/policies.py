"""
Bootstrap policies.

LocalBootstrap brings a disposable chain to a full demo state and treats every
step as required. PublicBootstrap spends small amounts of real funds and never
lets a funding shortfall fail the run, since the contracts are already deployed
and linked by the time it starts.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..constants import (
    LOCAL_DEX_NATIVE_AMOUNT,
    LOCAL_DEX_TOKEN_AMOUNT,
    LOCAL_NATIVE_SEED,
    LOCAL_TOKEN_SEED,
    PUBLIC_DEX_NATIVE_AMOUNT,
    PUBLIC_DEX_TOKEN_AMOUNT,
    PUBLIC_LENDING_SEED,
)
from ..network import NetworkContext
from ..topology import DeployedContract
from .actions import ActionResult, BootstrapAction, Criticality, execute_actions


def _fmt(wei: int) -> str:
    """Formats a wei amount as whole units for log lines."""
    units = wei / 10 ** 18
    return f"{units:g}"


class BootstrapPolicy(ABC):
    name = "bootstrap"

    @abstractmethod
    def actions(self, contracts: Dict[str, DeployedContract], deployer: Any) -> List[BootstrapAction]:
        """Builds the ordered actions for a deployed contract set."""

    def run(self, contracts: Dict[str, DeployedContract], deployer: Any) -> List[ActionResult]:
        return execute_actions(self.actions(contracts, deployer))


class LocalBootstrap(BootstrapPolicy):
    name = "local"

    def __init__(self, network: NetworkContext):
        self.network = network

    def actions(self, contracts, deployer):
        corn = contracts["corn"].handle
        corn_dex = contracts["corn_dex"]
        lending = contracts["lending"]
        move_price = contracts["move_price"]
        required = Criticality.REQUIRED

        def init_dex():
            corn_dex.handle.transact("init", LOCAL_DEX_TOKEN_AMOUNT, value=LOCAL_DEX_NATIVE_AMOUNT)

        return [
            BootstrapAction(
                f"Set MovePrice native balance to {_fmt(LOCAL_NATIVE_SEED)} ETH",
                lambda: self.network.send("hardhat_setBalance", [move_price.address, hex(LOCAL_NATIVE_SEED)]),
                required,
            ),
            BootstrapAction(
                f"Mint {_fmt(LOCAL_TOKEN_SEED)} CORN to MovePrice",
                lambda: corn.transact("mintTo", move_price.address, LOCAL_TOKEN_SEED),
                required,
            ),
            BootstrapAction(
                f"Mint {_fmt(LOCAL_TOKEN_SEED)} CORN to Lending",
                lambda: corn.transact("mintTo", lending.address, LOCAL_TOKEN_SEED),
                required,
            ),
            BootstrapAction(
                f"Mint {_fmt(LOCAL_TOKEN_SEED)} CORN to deployer",
                lambda: corn.transact("mintTo", deployer.address, LOCAL_TOKEN_SEED),
                required,
            ),
            BootstrapAction(
                f"Approve CornDEX for {_fmt(LOCAL_DEX_TOKEN_AMOUNT)} CORN",
                lambda: corn.transact("approve", corn_dex.address, LOCAL_DEX_TOKEN_AMOUNT),
                required,
            ),
            BootstrapAction(
                f"Initialize CornDEX with {_fmt(LOCAL_DEX_TOKEN_AMOUNT)} CORN and "
                f"{_fmt(LOCAL_DEX_NATIVE_AMOUNT)} ETH",
                init_dex,
                required,
            ),
        ]


class PublicBootstrap(BootstrapPolicy):
    name = "public"

    def actions(self, contracts, deployer):
        corn = contracts["corn"].handle
        corn_dex = contracts["corn_dex"]
        lending = contracts["lending"]
        best_effort = Criticality.BEST_EFFORT

        def seed_dex():
            corn.transact("approve", corn_dex.address, PUBLIC_DEX_TOKEN_AMOUNT)
            corn_dex.handle.transact("init", PUBLIC_DEX_TOKEN_AMOUNT, value=PUBLIC_DEX_NATIVE_AMOUNT)

        return [
            BootstrapAction(
                f"Fund Lending with {_fmt(PUBLIC_LENDING_SEED)} CORN",
                lambda: corn.transact("transfer", lending.address, PUBLIC_LENDING_SEED),
                best_effort,
                failure_hint="Could not fund Lending contract, check deployer balance",
            ),
            BootstrapAction(
                f"Initialize CornDEX liquidity with {_fmt(PUBLIC_DEX_TOKEN_AMOUNT)} CORN and "
                f"{_fmt(PUBLIC_DEX_NATIVE_AMOUNT)} ETH",
                seed_dex,
                best_effort,
                failure_hint="DEX might already be initialized or insufficient funds",
            ),
        ]


def select_policy(network: NetworkContext) -> BootstrapPolicy:
    """Local bootstrap for ephemeral networks, public bootstrap for everything else."""
    if network.is_ephemeral:
        return LocalBootstrap(network)
    return PublicBootstrap()
