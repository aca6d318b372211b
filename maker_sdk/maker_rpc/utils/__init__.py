from maker_sdk.maker_rpc.utils.transaction_utils import estimate_gas, get_transaction_count, send_transaction

__all__ = [
    "estimate_gas",
    "get_transaction_count",
    "send_transaction",
]
