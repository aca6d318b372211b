from maker_sdk.maker_rpc.actions.deposit import (
    DepositParams,
    OtherTokenDepositParams,
    deposit_other_token,
    deposit_weth,
    ensure_allowance,
)
from maker_sdk.maker_rpc.actions.margin_account import MarginAccountInfo, MarginBalance, get_margin_account
from maker_sdk.maker_rpc.actions.place_maker_order import MakerOrderParams, encode_maker_order, place_maker_order
from maker_sdk.maker_rpc.actions.remove_order import RemoveOrderParams, remove_order
from maker_sdk.maker_rpc.actions.withdraw import WithdrawParams, withdraw

__all__ = [
    "DepositParams",
    "OtherTokenDepositParams",
    "deposit_other_token",
    "deposit_weth",
    "ensure_allowance",
    "MarginAccountInfo",
    "MarginBalance",
    "get_margin_account",
    "MakerOrderParams",
    "encode_maker_order",
    "place_maker_order",
    "RemoveOrderParams",
    "remove_order",
    "WithdrawParams",
    "withdraw",
]
