"""Read-only views over a margin account."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class MarginBalance:
    """Settled balance of a margin account."""

    is_margin_positive: bool
    is_buy: bool  # Side of the open position
    margin: int  # Scaled by 10^18
    position: int  # Scaled by 10^18


@dataclass
class MarginAccountInfo:
    """Snapshot of a margin account as reported by the margin contract."""

    user: str
    margin: int
    balance: MarginBalance
    margin_ratio: int
    status: str
    is_underwater: bool
    withdrawable_amount: int


def get_margin_account(config: dict, user: Optional[str] = None) -> MarginAccountInfo:
    """
    Reads margin state for an address. No transaction is sent.

    Args:
        config (dict): Configuration dictionary containing Web3 contract instances and the signing account. Check out config.py for more details.
        user (str, optional): Address to inspect. Defaults to the configured account.

    Returns:
        MarginAccountInfo: Margin, balance, ratio, status and withdrawable amount.
    """
    margin = config["w3contracts"]["margin"]
    user = user or config["w3account"].address

    is_margin_positive, is_buy, balance_margin, position = margin.functions.getMarginBalance(user).call()

    return MarginAccountInfo(
        user=user,
        margin=int(margin.functions.getMargin(user).call()),
        balance=MarginBalance(
            is_margin_positive=bool(is_margin_positive),
            is_buy=bool(is_buy),
            margin=int(balance_margin),
            position=int(position),
        ),
        margin_ratio=int(margin.functions.getMarginRatio(user).call()),
        status=margin.functions.getAccountStatus(user).call(),
        is_underwater=bool(margin.functions.isUnderwater(user).call()),
        withdrawable_amount=int(margin.functions.checkWithdrawableAmount(user).call()),
    )
