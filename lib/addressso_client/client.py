from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Mapping

import httpx

from .config_types import ClientConfig
from .routes import Route, resolve_path
from .signing import filter_send_params
from .transport import Transport


class AddressClient:
    """Client for the address.so wallet API, bound to a single coin."""

    def __init__(self, cfg: ClientConfig, *, http_client: httpx.Client | None = None):
        self._cfg = cfg
        self._t = Transport(cfg, http_client)

    @property
    def coin(self) -> str:
        return self._cfg.coin

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "AddressClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def url_for(self, route: Route, wallet_id: int | None = None, account_id: int | None = None) -> str:
        return resolve_path(self._cfg.coin, route, wallet_id, account_id)

    def _request(
            self,
            method: str,
            route: Route,
            *,
            wallet_id: int | None = None,
            account_id: int | None = None,
            params: Mapping[str, Any] | None = None,
            sign: bool = False,
    ) -> Any:
        path = self.url_for(route, wallet_id, account_id)
        return self._t.request(method, path, params, sign=sign)

    # --- coins ---
    def get_coins(self) -> Any:
        return self._request("GET", Route.COINS_ALL)

    def get_coin(self) -> Any:
        return self._request("GET", Route.COINS_READ)

    # --- wallets ---
    def get_wallets(self) -> Any:
        return self._request("GET", Route.WALLET_ALL)

    def get_wallet(self, wallet_id: int) -> Any:
        return self._request("GET", Route.WALLET_READ, wallet_id=int(wallet_id))

    def create_wallet(self, label: str) -> Any:
        return self._request("POST", Route.WALLET_CREATE, params={"label": label})

    def update_wallet(self, wallet_id: int, label: str) -> Any:
        return self._request("PUT", Route.WALLET_UPDATE, wallet_id=int(wallet_id), params={"label": label})

    def delete_wallet(self, wallet_id: int) -> Any:
        """Delete a wallet. The server refuses unless its balance is zero."""
        return self._request("DELETE", Route.WALLET_DELETE, wallet_id=int(wallet_id))

    def get_wallet_transactions(self, wallet_id: int, limit: int = 100, tag: int | None = None) -> Any:
        params: dict[str, Any] = {"limit": int(limit)}
        if tag is not None:
            params["tag"] = int(tag)
        return self._request("GET", Route.WALLET_TRANSACTIONS, wallet_id=int(wallet_id), params=params)

    def send_from_wallet(
            self,
            wallet_id: int,
            amount: float | Decimal,
            recipient: str,
            payment_password: str,
            additional: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send funds from a wallet.

        ``additional`` may carry ``odd_address``, ``token_label`` (e.g. "erc20"),
        ``fee_priority`` (see :class:`FeePriority`) and ``tag`` (Ripple destination
        tag). Any other key is dropped before signing.
        """
        params = filter_send_params(amount, recipient, payment_password, additional)
        return self._request("POST", Route.WALLET_SEND, wallet_id=int(wallet_id), params=params, sign=True)

    def set_permissions(self, wallet_id: int, user_id: int, permissions: Iterable[str | int] = ()) -> Any:
        params = {"user_id": int(user_id), "permissions": [str(p) for p in permissions]}
        return self._request("POST", Route.WALLET_PERMISSIONS, wallet_id=int(wallet_id), params=params)

    def remove_all_permissions(self, wallet_id: int, user_id: int) -> Any:
        # "0" revokes every permission
        return self.set_permissions(wallet_id, user_id, ["0"])

    # --- accounts ---
    def get_accounts(self, wallet_id: int) -> Any:
        return self._request("GET", Route.ACCOUNT_ALL, wallet_id=int(wallet_id))

    def get_account(self, wallet_id: int, account_id: int) -> Any:
        return self._request("GET", Route.ACCOUNT_READ, wallet_id=int(wallet_id), account_id=int(account_id))

    def create_account(self, wallet_id: int) -> Any:
        return self._request("POST", Route.ACCOUNT_CREATE, wallet_id=int(wallet_id))

    def delete_account(self, wallet_id: int, account_id: int) -> Any:
        return self._request("DELETE", Route.ACCOUNT_DELETE, wallet_id=int(wallet_id), account_id=int(account_id))

    def archive_accounts(self, wallet_id: int, accounts: Iterable[int]) -> Any:
        params = {"accounts": [int(a) for a in accounts]}
        return self._request("DELETE", Route.ACCOUNT_ARCHIVE, wallet_id=int(wallet_id), params=params)

    def get_account_transactions(self, wallet_id: int, account_id: int, limit: int = 100) -> Any:
        return self._request(
            "GET",
            Route.ACCOUNT_TRANSACTIONS,
            wallet_id=int(wallet_id),
            account_id=int(account_id),
            params={"limit": int(limit)},
        )

    def send_from_account(
            self,
            wallet_id: int,
            account_id: int,
            amount: float | Decimal,
            recipient: str,
            payment_password: str,
            additional: Mapping[str, Any] | None = None,
    ) -> Any:
        params = filter_send_params(amount, recipient, payment_password, additional)
        return self._request(
            "POST",
            Route.ACCOUNT_SEND,
            wallet_id=int(wallet_id),
            account_id=int(account_id),
            params=params,
            sign=True,
        )
