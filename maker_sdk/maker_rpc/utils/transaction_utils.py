"""Transaction utility functions for RPC actions."""

import logging
from typing import Any, Optional

from web3.contract.contract import ContractFunction
from web3.exceptions import ContractLogicError
from web3.types import TxReceipt

from maker_sdk.maker_rpc.exceptions import GasEstimationError, TransactionReceiptError
from maker_sdk.maker_rpc.types import TransactionType

logger = logging.getLogger("maker_sdk.rpc.transactions")


def get_transaction_count(config: dict[str, Any]) -> int:
    """Current transaction count of the configured account, used as the next nonce.

    Always queried from the node; never cached between transactions.
    """
    w3 = config["w3"]
    account = config["w3account"]
    return int(w3.eth.get_transaction_count(account.address))


def estimate_gas(config: dict[str, Any], contract_function: ContractFunction) -> int:
    """Simulate a contract call from the configured account.

    Raises:
        GasEstimationError: If the node returns no estimate or the call would revert
    """
    account = config["w3account"]

    try:
        gas = contract_function.estimate_gas({"from": account.address})
    except ContractLogicError as e:
        raise GasEstimationError("Estimate Gas Failed") from e

    if not gas:
        raise GasEstimationError("Estimate Gas Failed")

    logger.debug(f"Estimated {gas} gas for {contract_function.fn_name}")
    return int(gas)


def send_transaction(
    config: dict[str, Any],
    contract_function: ContractFunction,
    gas_limit: Optional[int] = None,
    tx_type: TransactionType = TransactionType.EIP1559,
) -> TxReceipt:
    """Sign, submit and wait for a contract transaction.

    Args:
        config: Configuration dictionary. Check out config.py for more details.
        contract_function: Bound contract call to submit
        gas_limit: Explicit gas limit, usually the result of estimate_gas
        tx_type: EIP-1559 (type 0x2) or legacy gas-price transaction

    Returns:
        TxReceipt: Receipt of the mined transaction

    Raises:
        TransactionReceiptError: If the transaction was mined but reverted
    """
    w3 = config["w3"]
    account = config["w3account"]

    tx_params: dict[str, Any] = {
        "from": account.address,
        "chainId": config["chain_id"],
    }
    if gas_limit:
        tx_params["gas"] = gas_limit
    if tx_type == TransactionType.EIP1559:
        tx_params["type"] = TransactionType.EIP1559.value
        tx_params.update(config.get("fee_overrides") or {})
    else:
        tx_params["gasPrice"] = w3.eth.gas_price

    # Fresh nonce, read right before the transaction is built
    tx_params["nonce"] = get_transaction_count(config)

    # Build the transaction
    tx = contract_function.build_transaction(tx_params)

    # Sign the transaction
    signed_tx = w3.eth.account.sign_transaction(tx, private_key=account.key)

    # Send the raw transaction
    tx_hash = w3.eth.send_raw_transaction(signed_tx.raw_transaction)
    logger.debug(f"Submitted {contract_function.fn_name} with nonce {tx_params['nonce']}: {tx_hash.hex()}")

    # Wait for the transaction receipt
    tx_receipt = w3.eth.wait_for_transaction_receipt(tx_hash)

    if tx_receipt["status"] == 0:
        raise TransactionReceiptError(
            f"Transaction {tx_receipt['transactionHash'].hex()} reverted ({contract_function.fn_name})"
        )

    return tx_receipt  # type: ignore[no-any-return]
