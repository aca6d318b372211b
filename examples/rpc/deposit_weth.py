"""
Deposit WETH - Deposit WETH margin into the protocol vault.

The protocol vault must already be approved to spend the WETH.

Usage:
    python -m examples.rpc.deposit_weth
"""

import logging

from maker_sdk.maker_rpc import DepositParams, deposit_weth, get_config
from maker_sdk.maker_rpc.consts import DEMO_MARGIN_AMOUNT

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")


def main():
    config = get_config()
    deposit_weth(config, DepositParams(amount=DEMO_MARGIN_AMOUNT))


if __name__ == "__main__":
    main()
