from __future__ import annotations

import pytest

from addressso_client.errors import ConfigurationError
from addressso_client.routes import Route, lookup_route, make_url, resolve_path


def test_wallet_read_path() -> None:
    assert make_url("btc", "wallet", "read", wallet_id=5) == "coins/btc/wallets/5/"


@pytest.mark.parametrize(
    ("route", "kwargs", "expected"),
    [
        (Route.COINS_ALL, {}, "coins"),
        (Route.COINS_READ, {}, "coins/btc/"),
        (Route.WALLET_ALL, {}, "coins/btc/wallets/"),
        (Route.WALLET_CREATE, {}, "coins/btc/wallets/"),
        (Route.WALLET_SEND, {"wallet_id": 1}, "coins/btc/wallets/1/send/"),
        (Route.WALLET_PERMISSIONS, {"wallet_id": 2}, "coins/btc/wallets/2/permissions/"),
        (Route.WALLET_TRANSACTIONS, {"wallet_id": 3}, "coins/btc/wallets/3/transactions/"),
        (Route.ACCOUNT_ALL, {"wallet_id": 1}, "coins/btc/wallets/1/accounts/"),
        (Route.ACCOUNT_READ, {"wallet_id": 1, "account_id": 9}, "coins/btc/wallets/1/accounts/9/"),
        (Route.ACCOUNT_SEND, {"wallet_id": 1, "account_id": 9}, "coins/btc/wallets/1/accounts/9/send/"),
        (
            Route.ACCOUNT_TRANSACTIONS,
            {"wallet_id": 1, "account_id": 9},
            "coins/btc/wallets/1/accounts/9/transactions/",
        ),
    ],
)
def test_resolve_path_templates(route: Route, kwargs: dict, expected: str) -> None:
    assert resolve_path("btc", route, **kwargs) == expected


def test_archive_has_no_account_segment() -> None:
    assert resolve_path("eth", Route.ACCOUNT_ARCHIVE, wallet_id=4) == "coins/eth/wallets/4/accounts/archive/"
    assert resolve_path("eth", Route.ACCOUNT_ARCHIVE, wallet_id=4, account_id=8) == (
        "coins/eth/wallets/4/accounts/archive/"
    )


def test_resolve_is_pure() -> None:
    first = resolve_path("ltc", Route.ACCOUNT_READ, 1, 2)
    second = resolve_path("ltc", Route.ACCOUNT_READ, 1, 2)
    assert first == second == "coins/ltc/wallets/1/accounts/2/"


def test_unknown_route_raises() -> None:
    with pytest.raises(ConfigurationError):
        make_url("btc", "wallet", "explode", wallet_id=1)
    with pytest.raises(ConfigurationError):
        lookup_route("invoices", "all")


def test_missing_ids_raise() -> None:
    with pytest.raises(ConfigurationError):
        resolve_path("btc", Route.WALLET_READ)
    with pytest.raises(ConfigurationError):
        resolve_path("btc", Route.ACCOUNT_SEND, wallet_id=1)


def test_lookup_accepts_plural_resource_names() -> None:
    assert lookup_route("wallets", "all") is Route.WALLET_ALL
    assert lookup_route("coin", "read") is Route.COINS_READ
    assert Route.ACCOUNT_ARCHIVE.key == "account.archive"
