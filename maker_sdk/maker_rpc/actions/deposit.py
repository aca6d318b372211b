import logging
from dataclasses import dataclass
from typing import Optional

from web3 import Web3
from web3.types import TxReceipt

from maker_sdk.maker_rpc.config import get_erc20_contract
from maker_sdk.maker_rpc.utils.transaction_utils import estimate_gas, send_transaction

logger = logging.getLogger("maker_sdk.rpc.actions")


@dataclass
class DepositParams:
    """Data class to store WETH deposit parameters."""

    amount: int  # Deposit amount in WETH (scaled by 10^18)


@dataclass
class OtherTokenDepositParams:
    """Data class to store deposit parameters for an alternate collateral token."""

    token_address: str  # ERC-20 token accepted by the protocol vault
    amount: int  # Deposit amount (scaled by the token's decimals)


def deposit_weth(config: dict, params: DepositParams) -> dict[str, TxReceipt]:
    """
    Deposits WETH margin into the protocol vault.

    The vault must already be approved to spend the amount; this action
    does not check or create an allowance.

    Args:
        config (dict): Configuration dictionary containing Web3 contract instances and the signing account. Check out config.py for more details.
        params (DepositParams): Deposit parameters including the amount.

    Returns:
        dict: Contains transaction receipt of the deposit transaction.
    """
    protocol_vault = config["w3contracts"]["protocol_vault"]
    receive_deposit = protocol_vault.functions.receiveDepositWETH(params.amount)

    gas_estimate = estimate_gas(config, receive_deposit)

    tx_receipt = send_transaction(config, receive_deposit, gas_limit=gas_estimate)
    logger.info(f"Deposited WETH margin: {tx_receipt['transactionHash'].hex()}")
    logger.debug(f"Deposit receipt: {dict(tx_receipt)}")

    return {
        "transaction_receipt": tx_receipt,
    }


def ensure_allowance(config: dict, token_address: str, spender: str, amount: int) -> Optional[TxReceipt]:
    """Approve `spender` for `amount` of the token unless the current allowance already covers it.

    Returns:
        TxReceipt of the approval, or None when no approval was needed.
    """
    account = config["w3account"]
    token = get_erc20_contract(config, token_address)

    allowance = int(token.functions.allowance(account.address, spender).call())
    if allowance >= amount:
        logger.debug(f"Allowance {allowance} of {token_address} already covers {amount}")
        return None

    tx_receipt = send_transaction(config, token.functions.approve(spender, amount))
    logger.info(f"Approved {token_address} to {spender}: {tx_receipt['transactionHash'].hex()}")

    return tx_receipt


def deposit_other_token(config: dict, params: OtherTokenDepositParams):
    """
    Deposits margin in an alternate ERC-20 token into the protocol vault.

    Args:
        config (dict): Configuration dictionary containing Web3 contract instances and the signing account. Check out config.py for more details.
        params (OtherTokenDepositParams): Deposit parameters including token address and amount.

    Returns:
        dict: Contains the approval receipt (None if the allowance was sufficient) and the deposit receipt.
    """
    protocol_vault = config["w3contracts"]["protocol_vault"]
    token_address = Web3.to_checksum_address(params.token_address)

    # Make sure the vault can pull the tokens before depositing
    approval_receipt = ensure_allowance(config, token_address, protocol_vault.address, params.amount)

    # Token has to be on the vault's list of accepted collateral
    receive_deposit = protocol_vault.functions.receiveDepositInOtherToken(token_address, params.amount)

    gas_estimate = estimate_gas(config, receive_deposit)

    tx_receipt = send_transaction(config, receive_deposit, gas_limit=gas_estimate)
    logger.info(f"Deposited {token_address} margin: {tx_receipt['transactionHash'].hex()}")

    return {
        "approval_receipt": approval_receipt,
        "transaction_receipt": tx_receipt,
    }
