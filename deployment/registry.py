"""
Deployment Registry

Deploys contracts from Hardhat artifacts and remembers them per network in
<deployments_dir>/<network>/<Name>.json, so a second run reuses what is
already on chain instead of deploying it again.
"""

import os
import json
import hashlib
import logging
from typing import Any, Dict, List, Optional

from web3 import Web3

from .errors import ArtifactNotFound, DeploymentNotFound
from .handles import ContractHandleAccessor
from .network import NetworkContext
from .topology import DeployedContract
from .transactions import send_transaction

logger = logging.getLogger(__name__)


def get_contract_artifact(artifacts_dir: str, name: str) -> Dict[str, Any]:
    """Loads a contract's ABI and bytecode from its Hardhat JSON artifact."""
    file_path = os.path.join(artifacts_dir, 'contracts', f'{name}.sol', f'{name}.json')
    try:
        with open(file_path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ArtifactNotFound(f"No artifact for {name} at {file_path}. Compile the contracts first.")
    return {'abi': data['abi'], 'bytecode': data['bytecode']}


def bytecode_hash(bytecode: str) -> str:
    return hashlib.sha256(bytecode.encode()).hexdigest()


class DeploymentRegistry:
    """Deploy-or-reuse store of the contracts deployed on one network"""

    def __init__(self, w3: Web3, network: NetworkContext, deployer: Any, artifacts_dir: str,
                 deployments_dir: str, accessor: Optional[ContractHandleAccessor] = None,
                 tx_timeout: int = 300):
        self.w3 = w3
        self.network = network
        self.deployer = deployer
        self.artifacts_dir = artifacts_dir
        self.deployments_dir = deployments_dir
        self.accessor = accessor or ContractHandleAccessor(w3, timeout=tx_timeout)
        self.tx_timeout = tx_timeout

    def _record_path(self, name: str) -> str:
        return os.path.join(self.deployments_dir, self.network.name, f'{name}.json')

    def _load_record(self, name: str) -> Optional[Dict[str, Any]]:
        path = self._record_path(name)
        if not os.path.exists(path):
            return None
        with open(path, 'r') as f:
            return json.load(f)

    def _save_record(self, name: str, record: Dict[str, Any]) -> None:
        path = self._record_path(name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            json.dump(record, f, indent=2)

    def _is_reusable(self, record: Dict[str, Any], args: List[Any], code_hash: str) -> bool:
        if record.get('chainId') != self.network.chain_id:
            return False
        if record.get('args') != args or record.get('bytecodeHash') != code_hash:
            return False
        # A restarted local node keeps our records but loses the code
        return len(self.w3.eth.get_code(Web3.to_checksum_address(record['address']))) > 0

    def _to_deployed(self, name: str, record: Dict[str, Any], newly_deployed: bool) -> DeployedContract:
        handle = self.accessor.get_handle(name, record['address'], record['abi'], self.deployer)
        return DeployedContract(name=name, address=record['address'], handle=handle,
                                newly_deployed=newly_deployed)

    def deploy(self, name: str, args: List[Any]) -> DeployedContract:
        """
        Deploys a contract, or returns the recorded one if it was deployed on
        this chain with the same bytecode and constructor arguments.
        """
        artifact = get_contract_artifact(self.artifacts_dir, name)
        # Normalise tuples and the like to what a JSON round trip gives back
        args = json.loads(json.dumps(list(args)))
        code_hash = bytecode_hash(artifact['bytecode'])

        record = self._load_record(name)
        if record is not None and self._is_reusable(record, args, code_hash):
            logger.info(f"reusing \"{name}\" at {record['address']}")
            return self._to_deployed(name, record, newly_deployed=False)

        factory = self.w3.eth.contract(abi=artifact['abi'], bytecode=artifact['bytecode'])
        receipt = send_transaction(self.w3, self.deployer, factory.constructor(*args), timeout=self.tx_timeout)
        tx_hash = Web3.to_hex(receipt['transactionHash'])
        address = Web3.to_checksum_address(receipt['contractAddress'])
        logger.info(f"deploying \"{name}\" (tx: {tx_hash})...: deployed at {address} with {receipt['gasUsed']} gas")

        record = {
            'address': address,
            'abi': artifact['abi'],
            'args': args,
            'transactionHash': tx_hash,
            'blockNumber': receipt['blockNumber'],
            'gasUsed': receipt['gasUsed'],
            'bytecodeHash': code_hash,
            'chainId': self.network.chain_id,
        }
        self._save_record(name, record)
        return self._to_deployed(name, record, newly_deployed=True)

    def get_deployed(self, name: str) -> DeployedContract:
        record = self._load_record(name)
        if record is None:
            raise DeploymentNotFound(f"No deployment of {name} recorded for network '{self.network.name}'")
        return self._to_deployed(name, record, newly_deployed=False)
