import logging
from dataclasses import dataclass

from eth_abi import encode
from web3 import Web3

from maker_sdk.maker_rpc.utils.transaction_utils import estimate_gas, send_transaction

logger = logging.getLogger("maker_sdk.rpc.actions")


@dataclass
class MakerOrderParams:
    """Data class to store maker order parameters."""

    maker: str  # Address of the maker placing the order
    price: int  # Price at which to go long/short (scaled by 10^18)
    amount: int  # Amount to go long/short (scaled by 10^18)
    is_buy: bool  # True for long, False for short


def encode_maker_order(params: MakerOrderParams) -> bytes:
    """ABI-encode a maker order as (maker address, amount, price, is buy)."""
    return encode(
        ["address", "uint256", "uint256", "bool"],
        [Web3.to_checksum_address(params.maker), params.amount, params.price, params.is_buy],
    )


def place_maker_order(config: dict, params: MakerOrderParams):
    """
    Places a maker order on the order book.

    Args:
        config (dict): Configuration dictionary containing Web3 contract instances and the signing account. Check out config.py for more details.
        params (MakerOrderParams): Maker order parameters including maker address, price, amount and side.

    Returns:
        dict: Contains transaction receipt and the encoded order data.
    """
    order_book = config["w3contracts"]["order_book"]

    # Order data needs to be encoded before being passed to the order book
    order_data = encode_maker_order(params)
    add_maker_order = order_book.functions.addMakerOrder(order_data)

    # Estimate gas, aborting if the order would be rejected
    gas_estimate = estimate_gas(config, add_maker_order)

    # Execute the transaction using the estimate as gas limit
    tx_receipt = send_transaction(config, add_maker_order, gas_limit=gas_estimate)
    logger.info(f"Transaction mined with hash: {tx_receipt['transactionHash'].hex()}")

    return {
        "transaction_receipt": tx_receipt,
        "order_data": order_data,
    }
