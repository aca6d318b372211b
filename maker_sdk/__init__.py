"""
Maker SDK - Python SDK for submitting maker orders and margin operations.

- maker_rpc: For sending order book, margin and protocol vault transactions over RPC
"""

from maker_sdk._version import SDK_VERSION
from maker_sdk.maker_rpc import (
    deposit_other_token,
    deposit_weth,
    get_config,
    get_margin_account,
    place_maker_order,
    remove_order,
    withdraw,
)

__all__ = [
    "SDK_VERSION",
    "deposit_other_token",
    "deposit_weth",
    "get_config",
    "get_margin_account",
    "place_maker_order",
    "remove_order",
    "withdraw",
]
