from unittest.mock import MagicMock

import pytest
from eth_account import Account

from maker_sdk.maker_rpc import config as config_module
from maker_sdk.maker_rpc.config import load_contract_abis
from tests.helpers import (
    ENV,
    MARGIN_ADDRESS,
    ORDER_BOOK_ADDRESS,
    PRIVATE_KEY,
    PROTOCOL_VAULT_ADDRESS,
    FakeChain,
    make_function,
)


@pytest.fixture
def env(monkeypatch):
    """Populate a valid environment and keep any local .env file out of the way."""
    monkeypatch.setattr(config_module, "load_dotenv", lambda: None)
    for name in ("CHAIN_ID", "MAX_FEE_PER_GAS", "MAX_PRIORITY_FEE_PER_GAS"):
        monkeypatch.delenv(name, raising=False)
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    return monkeypatch


@pytest.fixture
def chain():
    return FakeChain()


@pytest.fixture
def order_book():
    contract = MagicMock()
    contract.address = ORDER_BOOK_ADDRESS
    contract.functions.addMakerOrder.return_value = make_function("addMakerOrder")
    contract.functions.removeOrder.return_value = make_function("removeOrder")
    return contract


@pytest.fixture
def protocol_vault():
    contract = MagicMock()
    contract.address = PROTOCOL_VAULT_ADDRESS
    contract.functions.receiveDepositWETH.return_value = make_function("receiveDepositWETH")
    contract.functions.receiveDepositInOtherToken.return_value = make_function("receiveDepositInOtherToken")
    contract.functions.withdraw.return_value = make_function("withdraw")
    return contract


@pytest.fixture
def margin():
    contract = MagicMock()
    contract.address = MARGIN_ADDRESS
    return contract


@pytest.fixture
def config(chain, order_book, protocol_vault, margin):
    return {
        "chain_id": 80001,
        "fee_overrides": {},
        "abis": load_contract_abis(),
        "w3": chain.w3,
        "w3account": Account.from_key(PRIVATE_KEY),
        "w3contracts": {
            "order_book": order_book,
            "margin": margin,
            "protocol_vault": protocol_vault,
        },
    }
