import logging
from typing import Any

from web3 import Web3

from .errors import TransactionFailed

logger = logging.getLogger(__name__)


def send_transaction(w3: Web3, account: Any, function: Any, value: int = 0, timeout: int = 300):
    """
    Builds, signs and sends one transaction, then waits for it to be mined.

    Args:
        w3: Connected Web3 instance
        account: Local signing account (eth_account LocalAccount)
        function: Bound contract function or constructor exposing build_transaction()
        value: Native currency to attach, in wei
        timeout: Seconds to wait for the receipt

    Returns:
        The transaction receipt

    Raises:
        TransactionFailed: if the transaction was mined but reverted
    """
    tx = function.build_transaction({
        'from': account.address,
        'nonce': w3.eth.get_transaction_count(account.address, 'pending'),
        'gasPrice': w3.eth.gas_price,
        'value': value,
    })

    signed_tx = account.sign_transaction(tx)
    tx_hash = Web3.to_hex(w3.eth.send_raw_transaction(signed_tx.raw_transaction))
    logger.debug(f"Transaction sent: {tx_hash}")

    receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
    if receipt['status'] != 1:
        raise TransactionFailed(f"Transaction {tx_hash} reverted in block {receipt['blockNumber']}",
                                tx_hash=tx_hash)

    logger.debug(f"Transaction {tx_hash} confirmed in block {receipt['blockNumber']}")
    return receipt
