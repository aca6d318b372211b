"""
Remove Order - Remove a maker order from the order book.

Usage:
    python -m examples.rpc.remove_order
"""

import logging

from maker_sdk.maker_rpc import RemoveOrderParams, get_config, remove_order
from maker_sdk.maker_rpc.consts import DEMO_ORDER_ID

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")


def main():
    config = get_config()
    remove_order(config, RemoveOrderParams(order_id=DEMO_ORDER_ID))


if __name__ == "__main__":
    main()
