"""
Deposit Other Token - Approve and deposit an alternate collateral token.

Requirements (in addition to the common ones):
- TOKEN_ADDRESS: ERC-20 token accepted by the protocol vault

Usage:
    python -m examples.rpc.deposit_other_token
"""

import logging
import os

from dotenv import load_dotenv

from maker_sdk.maker_rpc import OtherTokenDepositParams, deposit_other_token, get_config
from maker_sdk.maker_rpc.consts import DEMO_MARGIN_AMOUNT

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")


def main():
    """Deposit one token unit, approving the vault first if needed."""

    # Load environment variables from .env file
    load_dotenv()

    token_address = os.environ["TOKEN_ADDRESS"]

    config = get_config()
    deposit_other_token(config, OtherTokenDepositParams(token_address=token_address, amount=DEMO_MARGIN_AMOUNT))


if __name__ == "__main__":
    main()
