import pytest

from examples.rpc import run_operation
from tests.helpers import MAKER_ADDRESS, TOKEN_ADDRESS


@pytest.fixture
def calls(monkeypatch):
    """Record the action each command dispatches to instead of sending anything."""
    recorded = []

    def recorder(name):
        def action(config, params=None):
            recorded.append((name, params))
            return {"transaction_receipt": None}

        return action

    for name in ("place_maker_order", "remove_order", "deposit_weth", "deposit_other_token", "withdraw"):
        monkeypatch.setattr(run_operation, name, recorder(name))
    monkeypatch.setattr(run_operation, "get_margin_account", recorder("get_margin_account"))
    return recorded


def _run(config, *argv):
    args = run_operation.build_parser().parse_args(list(argv))
    return run_operation.run(config, args)


def test_place_order_defaults(config, calls):
    _run(config, "place-order")

    ((name, params),) = calls
    assert name == "place_maker_order"
    assert params.maker == MAKER_ADDRESS
    assert params.price == 2 * 10**18
    assert params.amount == 10**17
    assert params.is_buy is True


def test_place_sell_order(config, calls):
    _run(config, "place-order", "--price", "1.5", "--amount", "3", "--side", "sell")

    ((_, params),) = calls
    assert params.price == 15 * 10**17
    assert params.amount == 3 * 10**18
    assert params.is_buy is False


def test_remove_order(config, calls):
    _run(config, "remove-order", "--order-id", "123")

    assert calls[0][0] == "remove_order"
    assert calls[0][1].order_id == 123


def test_deposit_token(config, calls):
    _run(config, "deposit-token", "--token", TOKEN_ADDRESS, "--amount", "2")

    ((name, params),) = calls
    assert name == "deposit_other_token"
    assert params.token_address == TOKEN_ADDRESS
    assert params.amount == 2 * 10**18


@pytest.mark.parametrize("command, action", [("deposit-weth", "deposit_weth"), ("withdraw", "withdraw")])
def test_margin_movements_default_to_one_unit(config, calls, command, action):
    _run(config, command)

    ((name, params),) = calls
    assert name == action
    assert params.amount == 10**18


def test_margin_account(config, calls):
    _run(config, "margin-account")

    assert calls == [("get_margin_account", None)]


def test_unknown_operation_is_rejected():
    with pytest.raises(SystemExit):
        run_operation.build_parser().parse_args(["liquidate"])
