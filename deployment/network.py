import logging
from typing import Any, List, Optional

from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from .constants import LOCAL_NETWORKS
from .errors import NetworkError

logger = logging.getLogger(__name__)


def connect(rpc_url: str) -> Web3:
    """Opens an HTTP connection to the RPC endpoint."""
    w3 = Web3(Web3.HTTPProvider(rpc_url))
    # PoA testnets put extra data in block headers
    w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    if not w3.is_connected():
        raise NetworkError(f"Could not connect to RPC URL: {rpc_url}")
    logger.info(f"Connected to blockchain at {rpc_url}")
    return w3


class NetworkContext:
    """The active network's identity plus a raw RPC control channel"""

    def __init__(self, name: str, w3: Optional[Web3] = None):
        self.name = name
        self.w3 = w3

    @property
    def is_ephemeral(self) -> bool:
        return self.name in LOCAL_NETWORKS

    @property
    def chain_id(self) -> int:
        if self.w3 is None:
            raise NetworkError(f"Network '{self.name}' has no RPC connection")
        return self.w3.eth.chain_id

    def send(self, rpc_method: str, params: List[Any]) -> Any:
        """
        Sends a raw JSON-RPC request. Only allowed on ephemeral networks, where
        node control methods such as hardhat_setBalance exist.
        """
        if not self.is_ephemeral:
            raise NetworkError(f"RPC control method {rpc_method} is not available on network '{self.name}'")
        if self.w3 is None:
            raise NetworkError(f"Network '{self.name}' has no RPC connection")

        response = self.w3.provider.make_request(rpc_method, params)
        if response.get('error'):
            raise NetworkError(f"{rpc_method} failed: {response['error']}")
        return response.get('result')

    def __repr__(self):
        return f"NetworkContext(name={self.name!r}, ephemeral={self.is_ephemeral})"
