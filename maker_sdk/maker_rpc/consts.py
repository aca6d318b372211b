from decimal import Decimal

from web3 import Web3

# Polygon Mumbai, the London-hardfork chain the contracts are deployed on
DEFAULT_CHAIN_ID = 80001

# Demo values used by the example scripts
DEMO_ORDER_PRICE = Web3.to_wei(2, "ether")
DEMO_ORDER_AMOUNT = Web3.to_wei(Decimal("0.1"), "ether")
DEMO_ORDER_ID = 123
DEMO_MARGIN_AMOUNT = Web3.to_wei(1, "ether")
