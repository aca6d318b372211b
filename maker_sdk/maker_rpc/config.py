"""Gathering configuration from environment variables and ABIs"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv
from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.contract import Contract

from maker_sdk.maker_rpc.consts import DEFAULT_CHAIN_ID
from maker_sdk.maker_rpc.exceptions import AddressMismatchError, ConfigurationError

logger = logging.getLogger("maker_sdk.rpc.config")


def _require_env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise ConfigurationError(f"{name} environment variable is required")
    return value


def _require_address(name: str) -> str:
    value = _require_env(name)
    if not Web3.is_address(value):
        raise ConfigurationError(f"{name} is not a valid address: {value}")
    return Web3.to_checksum_address(value)


def _optional_int(name: str) -> Optional[int]:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    try:
        return int(value, 0)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from e


@dataclass(frozen=True)
class RpcSettings:
    """Connection, contract and signer settings for RPC operations."""

    rpc_url: str
    order_book_address: str
    margin_address: str
    protocol_vault_address: str
    maker_address: str
    private_key: str
    chain_id: int = DEFAULT_CHAIN_ID
    max_fee_per_gas: Optional[int] = None  # wei, EIP-1559 only
    max_priority_fee_per_gas: Optional[int] = None  # wei, EIP-1559 only

    @classmethod
    def from_env(cls) -> "RpcSettings":
        """Create a settings instance from environment variables.

        Raises:
            ConfigurationError: If a required variable is missing or malformed
        """
        load_dotenv()

        rpc_url = _require_env("RPC_ENDPOINT")
        order_book_address = _require_address("ORDER_BOOK_ADDRESS")
        margin_address = _require_address("MARGIN_ADDRESS")
        protocol_vault_address = _require_address("PROTOCOL_VAULT_ADDRESS")
        maker_address = _require_address("MAKER_ADDRESS")
        private_key = _require_env("PRIVATE_KEY")

        chain_id = _optional_int("CHAIN_ID")

        return cls(
            rpc_url=rpc_url,
            order_book_address=order_book_address,
            margin_address=margin_address,
            protocol_vault_address=protocol_vault_address,
            maker_address=maker_address,
            private_key=private_key,
            chain_id=DEFAULT_CHAIN_ID if chain_id is None else chain_id,
            max_fee_per_gas=_optional_int("MAX_FEE_PER_GAS"),
            max_priority_fee_per_gas=_optional_int("MAX_PRIORITY_FEE_PER_GAS"),
        )

    @property
    def fee_overrides(self) -> dict[str, int]:
        """EIP-1559 fee fields to set explicitly instead of letting web3 fill them."""
        overrides = {}
        if self.max_fee_per_gas is not None:
            overrides["maxFeePerGas"] = self.max_fee_per_gas
        if self.max_priority_fee_per_gas is not None:
            overrides["maxPriorityFeePerGas"] = self.max_priority_fee_per_gas
        return overrides


def derive_account(settings: RpcSettings) -> LocalAccount:
    """Derive the signing account and check it against the configured maker address."""
    try:
        account = Account.from_key(settings.private_key)
    except Exception as e:  # pylint: disable=broad-exception-caught
        raise ConfigurationError("PRIVATE_KEY is not a valid private key") from e

    if account.address.lower() != settings.maker_address.lower():
        raise AddressMismatchError(
            f"PRIVATE_KEY derives {account.address} but MAKER_ADDRESS is {settings.maker_address}"
        )

    return account


def load_contract_abis() -> dict:
    """Load all contract ABIs from files."""
    # Get the directory where this file is located
    current_dir = os.path.dirname(os.path.abspath(__file__))
    abis_dir = os.path.join(current_dir, "abis")

    abis = {}

    with open(os.path.join(abis_dir, "OrderBook.json"), encoding="utf-8") as f:
        abis["order_book_abi"] = json.load(f)

    with open(os.path.join(abis_dir, "Margin.json"), encoding="utf-8") as f:
        abis["margin_abi"] = json.load(f)

    with open(os.path.join(abis_dir, "ProtocolVault.json"), encoding="utf-8") as f:
        abis["protocol_vault_abi"] = json.load(f)

    with open(os.path.join(abis_dir, "Erc20.json"), encoding="utf-8") as f:
        abis["erc20_abi"] = json.load(f)

    return abis


def _connect(rpc_url: str) -> Web3:
    return Web3(Web3.HTTPProvider(rpc_url))


def get_config(settings: Optional[RpcSettings] = None) -> dict[str, Any]:
    """Get complete configuration for RPC operations.

    All validation happens before the provider is created, so a bad
    environment never reaches the network.
    """
    if settings is None:
        settings = RpcSettings.from_env()

    w3account = derive_account(settings)
    abis = load_contract_abis()

    w3 = _connect(settings.rpc_url)
    w3.eth.default_account = w3account.address
    logger.info(f"Added account {w3account.address}")

    # Create contract instances
    w3order_book = w3.eth.contract(address=settings.order_book_address, abi=abis["order_book_abi"])
    w3margin = w3.eth.contract(address=settings.margin_address, abi=abis["margin_abi"])
    w3protocol_vault = w3.eth.contract(address=settings.protocol_vault_address, abi=abis["protocol_vault_abi"])

    return {
        "chain_id": settings.chain_id,
        "fee_overrides": settings.fee_overrides,
        "abis": abis,
        "w3": w3,
        "w3account": w3account,
        "w3contracts": {
            "order_book": w3order_book,
            "margin": w3margin,
            "protocol_vault": w3protocol_vault,
        },
    }


def get_erc20_contract(config: dict[str, Any], token_address: str) -> Contract:
    """Bind the generic ERC-20 ABI to a token address."""
    w3 = config["w3"]
    return w3.eth.contract(address=Web3.to_checksum_address(token_address), abi=config["abis"]["erc20_abi"])
