"""
Run Operation - Run a single order book or vault operation selected by name.

Amounts and prices are given in whole units and scaled by 10^18.

Usage:
    python -m examples.rpc.run_operation place-order --price 2 --amount 0.1 --side buy
    python -m examples.rpc.run_operation remove-order --order-id 123
    python -m examples.rpc.run_operation deposit-weth --amount 1
    python -m examples.rpc.run_operation deposit-token --token 0x... --amount 1
    python -m examples.rpc.run_operation withdraw --amount 1
    python -m examples.rpc.run_operation margin-account
"""

import argparse
import logging
from decimal import Decimal

from web3 import Web3

from maker_sdk.maker_rpc import (
    DepositParams,
    MakerOrderParams,
    OrderSide,
    OtherTokenDepositParams,
    RemoveOrderParams,
    WithdrawParams,
    deposit_other_token,
    deposit_weth,
    get_config,
    get_margin_account,
    place_maker_order,
    remove_order,
    withdraw,
)

logger = logging.getLogger("run_operation")


def _to_wei(value: str) -> int:
    return int(Web3.to_wei(Decimal(value), "ether"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Submit a single order book or protocol vault operation")
    subparsers = parser.add_subparsers(dest="operation", required=True)

    place = subparsers.add_parser("place-order", help="Add a maker order to the order book")
    place.add_argument("--price", type=str, default="2", help="Order price in whole units")
    place.add_argument("--amount", type=str, default="0.1", help="Order amount in whole units")
    place.add_argument("--side", type=str, default="buy", choices=[s.value for s in OrderSide])

    remove = subparsers.add_parser("remove-order", help="Remove a maker order")
    remove.add_argument("--order-id", type=int, required=True)

    weth = subparsers.add_parser("deposit-weth", help="Deposit WETH margin (vault must be approved)")
    weth.add_argument("--amount", type=str, default="1")

    token = subparsers.add_parser("deposit-token", help="Approve if needed and deposit another ERC-20")
    token.add_argument("--token", type=str, required=True, help="Token address")
    token.add_argument("--amount", type=str, default="1")

    out = subparsers.add_parser("withdraw", help="Withdraw margin from the protocol vault")
    out.add_argument("--amount", type=str, default="1")

    subparsers.add_parser("margin-account", help="Show the margin state of the configured account")

    return parser


def run(config: dict, args: argparse.Namespace):
    """Dispatch the parsed command to its action and return the action's result."""
    if args.operation == "place-order":
        params = MakerOrderParams(
            maker=config["w3account"].address,
            price=_to_wei(args.price),
            amount=_to_wei(args.amount),
            is_buy=OrderSide(args.side).is_buy,
        )
        return place_maker_order(config, params)
    if args.operation == "remove-order":
        return remove_order(config, RemoveOrderParams(order_id=args.order_id))
    if args.operation == "deposit-weth":
        return deposit_weth(config, DepositParams(amount=_to_wei(args.amount)))
    if args.operation == "deposit-token":
        return deposit_other_token(
            config, OtherTokenDepositParams(token_address=args.token, amount=_to_wei(args.amount))
        )
    if args.operation == "withdraw":
        return withdraw(config, WithdrawParams(amount=_to_wei(args.amount)))
    if args.operation == "margin-account":
        info = get_margin_account(config)
        logger.info(f"{info}")
        return info
    raise ValueError(f"Unknown operation: {args.operation}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    args = build_parser().parse_args()
    config = get_config()

    run(config, args)
    logger.info("Finished execution")


if __name__ == "__main__":
    main()
