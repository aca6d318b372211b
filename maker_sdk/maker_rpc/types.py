from enum import Enum, IntEnum


class TransactionType(IntEnum):
    Legacy = 0
    EIP1559 = 2


class OrderSide(Enum):
    Buy = "buy"
    Sell = "sell"

    @property
    def is_buy(self) -> bool:
        return self is OrderSide.Buy
