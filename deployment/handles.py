from typing import Any, List

from web3 import Web3

from .transactions import send_transaction


class ContractHandle:
    """A deployed contract bound to the account that signs its transactions"""

    def __init__(self, w3: Web3, contract: Any, signer: Any, timeout: int = 300, name: str = ""):
        self.name = name
        self.w3 = w3
        self.contract = contract
        self.signer = signer
        self.timeout = timeout

    @property
    def address(self) -> str:
        return self.contract.address

    def transact(self, fn_name: str, *args, value: int = 0):
        """Sends a state changing call and waits until it is mined."""
        function = getattr(self.contract.functions, fn_name)(*args)
        return send_transaction(self.w3, self.signer, function, value=value, timeout=self.timeout)

    def __repr__(self):
        return f"ContractHandle({self.name or '?'} at {self.address})"


class ContractHandleAccessor:
    """Wraps deployed addresses into signer-bound handles"""

    def __init__(self, w3: Web3, timeout: int = 300):
        self.w3 = w3
        self.timeout = timeout

    def get_handle(self, name: str, address: str, abi: List[Any], signer: Any) -> ContractHandle:
        contract = self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
        return ContractHandle(self.w3, contract, signer, timeout=self.timeout, name=name)
