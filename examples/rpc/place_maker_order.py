"""
Place Maker Order - Add a buy order to the order book.

Requirements:
- RPC_ENDPOINT: JSON-RPC URL of the node
- ORDER_BOOK_ADDRESS, MARGIN_ADDRESS, PROTOCOL_VAULT_ADDRESS: Contract addresses
- MAKER_ADDRESS: Address of the maker
- PRIVATE_KEY: Private key of MAKER_ADDRESS

Usage:
    python -m examples.rpc.place_maker_order
"""

import logging

from maker_sdk.maker_rpc import MakerOrderParams, get_config, place_maker_order
from maker_sdk.maker_rpc.consts import DEMO_ORDER_AMOUNT, DEMO_ORDER_PRICE

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")


def main():
    """Place a 0.1 unit buy order at a price of 2."""

    # Load configuration
    config = get_config()
    account = config["w3account"]

    # Price and amount scaled by 10^18
    params = MakerOrderParams(
        maker=account.address,
        price=DEMO_ORDER_PRICE,
        amount=DEMO_ORDER_AMOUNT,
        is_buy=True,
    )

    place_maker_order(config, params)


if __name__ == "__main__":
    main()
