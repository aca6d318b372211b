"""Fake node and contract helpers shared by the test suite."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from eth_account import Account
from hexbytes import HexBytes

# First default account of local development nodes (Hardhat, Anvil)
PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
MAKER_ADDRESS = Account.from_key(PRIVATE_KEY).address

RPC_ENDPOINT = "http://localhost:8545"
ORDER_BOOK_ADDRESS = "0x" + "11" * 20
MARGIN_ADDRESS = "0x" + "22" * 20
PROTOCOL_VAULT_ADDRESS = "0x" + "33" * 20
TOKEN_ADDRESS = "0x" + "44" * 20

ENV = {
    "RPC_ENDPOINT": RPC_ENDPOINT,
    "ORDER_BOOK_ADDRESS": ORDER_BOOK_ADDRESS,
    "MARGIN_ADDRESS": MARGIN_ADDRESS,
    "PROTOCOL_VAULT_ADDRESS": PROTOCOL_VAULT_ADDRESS,
    "MAKER_ADDRESS": MAKER_ADDRESS,
    "PRIVATE_KEY": PRIVATE_KEY,
}


class FakeChain:
    """Stands in for a node: hands out nonces, records signed transactions, mines them instantly."""

    def __init__(self, transaction_count: int = 7):
        self.transaction_count = transaction_count
        self.receipt_status = 1
        self.sent: list[dict] = []
        self.signing_keys: list = []

        self.w3 = MagicMock()
        self.w3.eth.gas_price = 30 * 10**9
        self.w3.eth.get_transaction_count.side_effect = lambda address: self.transaction_count
        self.w3.eth.account.sign_transaction.side_effect = self._sign
        self.w3.eth.send_raw_transaction.side_effect = self._send
        self.w3.eth.wait_for_transaction_receipt.side_effect = self._receipt

    def _sign(self, tx, private_key):
        self.signing_keys.append(private_key)
        return SimpleNamespace(raw_transaction=tx)

    def _send(self, raw_transaction):
        self.sent.append(raw_transaction)
        self.transaction_count += 1
        return HexBytes(len(self.sent).to_bytes(32, "big"))

    def _receipt(self, tx_hash):
        return {"transactionHash": tx_hash, "status": self.receipt_status, "blockNumber": 1}

    @property
    def sent_calls(self) -> list[str]:
        return [tx["data"] for tx in self.sent]


def make_function(fn_name: str, gas: int = 50_000, call_result=None) -> MagicMock:
    """A bound contract call whose built transaction carries its name as data."""
    fn = MagicMock(name=fn_name)
    fn.fn_name = fn_name
    fn.estimate_gas.return_value = gas
    fn.call.return_value = call_result
    fn.build_transaction.side_effect = lambda params: {**params, "data": fn_name}
    return fn


