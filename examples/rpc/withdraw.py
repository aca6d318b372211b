"""
Withdraw - Withdraw margin from the protocol vault.

Usage:
    python -m examples.rpc.withdraw
"""

import logging

from maker_sdk.maker_rpc import WithdrawParams, get_config, withdraw
from maker_sdk.maker_rpc.consts import DEMO_MARGIN_AMOUNT

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")


def main():
    config = get_config()
    withdraw(config, WithdrawParams(amount=DEMO_MARGIN_AMOUNT))


if __name__ == "__main__":
    main()
