"""
In-memory stand-ins for the chain, used by the deployment tests.

FakeLedger tracks Corn balances, allowances, native balances and the CornDEX
reserves closely enough to check what the bootstrap policies leave behind.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from deployment.errors import TransactionFailed
from deployment.network import NetworkContext
from deployment.topology import DeployedContract

DEPLOYER = "0x" + "de" * 20


class FakeLedger:
    def __init__(self):
        self.tokens = {}
        self.allowances = {}
        self.native = {}
        self.dex_reserves = None
        self.calls = []

    def token_balance(self, address):
        return self.tokens.get(address, 0)


class FakeHandle:
    def __init__(self, ledger, name, address, signer):
        self.ledger = ledger
        self.name = name
        self.address = address
        self.signer = signer

    def transact(self, fn_name, *args, value=0):
        self.ledger.calls.append((self.name, fn_name, args, value))
        return getattr(self, f"_{fn_name}")(*args, value=value)

    # Corn
    def _mintTo(self, to, amount, value=0):
        self.ledger.tokens[to] = self.ledger.token_balance(to) + amount
        return {'status': 1}

    def _approve(self, spender, amount, value=0):
        self.ledger.allowances[(self.signer, spender)] = amount
        return {'status': 1}

    def _transfer(self, to, amount, value=0):
        if self.ledger.token_balance(self.signer) < amount:
            raise TransactionFailed("execution reverted: ERC20InsufficientBalance")
        self.ledger.tokens[self.signer] -= amount
        self.ledger.tokens[to] = self.ledger.token_balance(to) + amount
        return {'status': 1}

    # CornDEX
    def _init(self, token_amount, value=0):
        ledger = self.ledger
        if ledger.dex_reserves is not None:
            raise TransactionFailed("execution reverted: DEX: init - already has liquidity")
        if ledger.allowances.get((self.signer, self.address), 0) < token_amount:
            raise TransactionFailed("execution reverted: ERC20InsufficientAllowance")
        if ledger.token_balance(self.signer) < token_amount:
            raise TransactionFailed("execution reverted: ERC20InsufficientBalance")
        if ledger.native.get(self.signer, 0) < value:
            raise TransactionFailed("insufficient funds for gas * price + value")
        ledger.tokens[self.signer] -= token_amount
        ledger.tokens[self.address] = ledger.token_balance(self.address) + token_amount
        ledger.allowances[(self.signer, self.address)] -= token_amount
        ledger.native[self.signer] -= value
        ledger.dex_reserves = (value, token_amount)
        return {'status': 1}


class FakeRegistry:
    """Deploy-or-reuse registry keeping everything in memory"""

    def __init__(self, ledger, fail_on=None):
        self.ledger = ledger
        self.fail_on = fail_on
        self.records = {}
        self.deploy_calls = []
        self.new_deployments = 0

    def deploy(self, name, args):
        self.deploy_calls.append((name, list(args)))
        if name == self.fail_on:
            raise TransactionFailed(f"execution reverted: {name} constructor")
        if name not in self.records:
            self.new_deployments += 1
            address = "0x%040x" % (0xC0 + len(self.records))
            self.records[name] = address
            newly_deployed = True
        else:
            newly_deployed = False
        address = self.records[name]
        handle = FakeHandle(self.ledger, name, address, DEPLOYER)
        return DeployedContract(name=name, address=address, handle=handle, newly_deployed=newly_deployed)

    def get_deployed(self, name):
        address = self.records[name]
        return DeployedContract(name=name, address=address, handle=FakeHandle(self.ledger, name, address, DEPLOYER))


def make_network(name, ledger):
    """A real NetworkContext whose RPC provider applies hardhat_setBalance to the ledger."""
    w3 = MagicMock()

    def make_request(method, params):
        if method == "hardhat_setBalance":
            ledger.native[params[0]] = int(params[1], 16)
            return {'jsonrpc': '2.0', 'id': 1, 'result': True}
        return {'jsonrpc': '2.0', 'id': 1, 'error': {'code': -32601, 'message': f"Method {method} not found"}}

    w3.provider.make_request.side_effect = make_request
    return NetworkContext(name, w3)


@pytest.fixture
def ledger():
    return FakeLedger()


@pytest.fixture
def registry(ledger):
    return FakeRegistry(ledger)


@pytest.fixture
def deployer():
    return SimpleNamespace(address=DEPLOYER)


@pytest.fixture
def local_network(ledger):
    return make_network("localhost", ledger)


@pytest.fixture
def public_network(ledger):
    return make_network("sepolia", ledger)


@pytest.fixture
def make_registry(ledger):
    def _make(fail_on=None):
        return FakeRegistry(ledger, fail_on=fail_on)
    return _make


@pytest.fixture
def network_factory(ledger):
    def _make(name):
        return make_network(name, ledger)
    return _make
