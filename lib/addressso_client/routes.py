from __future__ import annotations

from enum import Enum

from .errors import ConfigurationError

_COIN = "coins/{coin}/"
_WALLET = _COIN + "wallets/{wallet_id}/"
_ACCOUNT = _WALLET + "accounts/{account_id}/"


class Route(Enum):
    """Every (resource, action) pair the API exposes, with its path template."""

    COINS_ALL = ("coins", "all", "coins")
    COINS_READ = ("coins", "read", _COIN)

    WALLET_ALL = ("wallet", "all", _COIN + "wallets/")
    WALLET_CREATE = ("wallet", "create", _COIN + "wallets/")
    WALLET_READ = ("wallet", "read", _WALLET)
    WALLET_UPDATE = ("wallet", "update", _WALLET)
    WALLET_DELETE = ("wallet", "delete", _WALLET)
    WALLET_SEND = ("wallet", "send", _WALLET + "send/")
    WALLET_PERMISSIONS = ("wallet", "permissions", _WALLET + "permissions/")
    WALLET_TRANSACTIONS = ("wallet", "transactions", _WALLET + "transactions/")

    ACCOUNT_ALL = ("account", "all", _WALLET + "accounts/")
    ACCOUNT_CREATE = ("account", "create", _WALLET + "accounts/")
    ACCOUNT_READ = ("account", "read", _ACCOUNT)
    ACCOUNT_DELETE = ("account", "delete", _ACCOUNT)
    # bulk action, account ids travel in the body
    ACCOUNT_ARCHIVE = ("account", "archive", _WALLET + "accounts/archive/")
    ACCOUNT_SEND = ("account", "send", _ACCOUNT + "send/")
    ACCOUNT_TRANSACTIONS = ("account", "transactions", _ACCOUNT + "transactions/")

    def __init__(self, resource: str, action: str, template: str):
        self.resource = resource
        self.action = action
        self.template = template

    @property
    def key(self) -> str:
        return f"{self.resource}.{self.action}"

    @property
    def needs_wallet(self) -> bool:
        return "{wallet_id}" in self.template

    @property
    def needs_account(self) -> bool:
        return "{account_id}" in self.template


_BY_KEY: dict[tuple[str, str], Route] = {(r.resource, r.action): r for r in Route}


def lookup_route(resource: str, action: str) -> Route:
    res = (resource or "").strip().lower()
    # "coin"/"wallets"/"accounts" spellings are accepted for convenience
    res = {"coin": "coins", "wallets": "wallet", "accounts": "account"}.get(res, res)
    route = _BY_KEY.get((res, (action or "").strip().lower()))
    if route is None:
        raise ConfigurationError(f"unknown route: {resource}.{action}")
    return route


def resolve_path(
        coin: str,
        route: Route,
        wallet_id: int | None = None,
        account_id: int | None = None,
) -> str:
    if route.needs_wallet and wallet_id is None:
        raise ConfigurationError(f"{route.key} requires wallet_id")
    if route.needs_account and account_id is None:
        raise ConfigurationError(f"{route.key} requires account_id")
    return route.template.format(coin=coin, wallet_id=wallet_id, account_id=account_id)


def make_url(
        coin: str,
        resource: str,
        action: str,
        wallet_id: int | None = None,
        account_id: int | None = None,
) -> str:
    return resolve_path(coin, lookup_route(resource, action), wallet_id, account_id)
