# Actions
from maker_sdk.maker_rpc.actions import (
    DepositParams,
    MakerOrderParams,
    MarginAccountInfo,
    MarginBalance,
    OtherTokenDepositParams,
    RemoveOrderParams,
    WithdrawParams,
    deposit_other_token,
    deposit_weth,
    encode_maker_order,
    ensure_allowance,
    get_margin_account,
    place_maker_order,
    remove_order,
    withdraw,
)

# Config
from maker_sdk.maker_rpc.config import (
    RpcSettings,
    derive_account,
    get_config,
    get_erc20_contract,
    load_contract_abis,
)

# Types
from maker_sdk.maker_rpc.types import OrderSide, TransactionType

__all__ = [
    # Actions - Parameter classes
    "DepositParams",
    "MakerOrderParams",
    "OtherTokenDepositParams",
    "RemoveOrderParams",
    "WithdrawParams",
    # Actions - Results
    "MarginAccountInfo",
    "MarginBalance",
    # Actions - Functions
    "deposit_other_token",
    "deposit_weth",
    "encode_maker_order",
    "ensure_allowance",
    "get_margin_account",
    "place_maker_order",
    "remove_order",
    "withdraw",
    # Config
    "RpcSettings",
    "derive_account",
    "get_config",
    "get_erc20_contract",
    "load_contract_abis",
    # Types
    "OrderSide",
    "TransactionType",
]
