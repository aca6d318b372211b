import logging
from dataclasses import dataclass

from web3.types import TxReceipt

from maker_sdk.maker_rpc.utils.transaction_utils import estimate_gas, send_transaction

logger = logging.getLogger("maker_sdk.rpc.actions")


@dataclass
class RemoveOrderParams:
    """Data class to store order removal parameters."""

    order_id: int  # ID of the maker order to remove


def remove_order(config: dict, params: RemoveOrderParams) -> dict[str, TxReceipt]:
    """
    Removes a maker order from the order book.

    Args:
        config (dict): Configuration dictionary containing Web3 contract instances and the signing account. Check out config.py for more details.
        params (RemoveOrderParams): Removal parameters including the order ID.

    Returns:
        dict: Contains transaction receipt of the removal transaction.
    """
    order_book = config["w3contracts"]["order_book"]
    remove = order_book.functions.removeOrder(params.order_id)

    gas_estimate = estimate_gas(config, remove)

    tx_receipt = send_transaction(config, remove, gas_limit=gas_estimate)
    logger.info(f"Removed order {params.order_id}: {tx_receipt['transactionHash'].hex()}")

    return {
        "transaction_receipt": tx_receipt,
    }
