"""
Margin Account - Print the margin state of the configured account.

Usage:
    python -m examples.rpc.margin_account
"""

import logging

from maker_sdk.maker_rpc import get_config, get_margin_account

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger("margin_account")


def main():
    config = get_config()
    info = get_margin_account(config)

    logger.info(f"Margin account {info.user}")
    logger.info(f"  Status: {info.status}")
    logger.info(f"  Margin: {info.margin}")
    logger.info(f"  Margin ratio: {info.margin_ratio}")
    logger.info(f"  Position: {'long' if info.balance.is_buy else 'short'} {info.balance.position}")
    logger.info(f"  Underwater: {info.is_underwater}")
    logger.info(f"  Withdrawable: {info.withdrawable_amount}")


if __name__ == "__main__":
    main()
