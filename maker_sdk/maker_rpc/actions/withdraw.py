import logging
from dataclasses import dataclass

from web3.types import TxReceipt

from maker_sdk.maker_rpc.utils.transaction_utils import estimate_gas, send_transaction

logger = logging.getLogger("maker_sdk.rpc.actions")


@dataclass
class WithdrawParams:
    """Data class to store withdrawal parameters."""

    amount: int  # Withdrawal amount (scaled by 10^18)


def withdraw(config: dict, params: WithdrawParams) -> dict[str, TxReceipt]:
    """
    Withdraws margin from the protocol vault.

    Args:
        config (dict): Configuration dictionary containing Web3 contract instances and the signing account. Check out config.py for more details.
        params (WithdrawParams): Withdrawal parameters including the amount.

    Returns:
        dict: Contains transaction receipt of the withdrawal transaction.
    """
    protocol_vault = config["w3contracts"]["protocol_vault"]
    withdrawal = protocol_vault.functions.withdraw(params.amount)

    gas_estimate = estimate_gas(config, withdrawal)

    tx_receipt = send_transaction(config, withdrawal, gas_limit=gas_estimate)
    logger.info(f"Withdrawn from protocol vault: {tx_receipt['transactionHash'].hex()}")

    return {
        "transaction_receipt": tx_receipt,
    }
