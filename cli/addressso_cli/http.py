from __future__ import annotations

from addressso_client import AddressClient
from addressso_client.config_types import ClientConfig

from .config import AppConfig, normalize_coin


class MissingCredentials(RuntimeError):
    pass


def make_client(cfg: AppConfig, *, coin_override: str | None = None, require_secret: bool = False) -> AddressClient:
    coin = normalize_coin(coin_override) or cfg.coin
    if not cfg.auth.api_token:
        raise MissingCredentials("API token is not configured. Run: addressso settings set --api-token ...")
    if require_secret and not cfg.auth.secret_token:
        raise MissingCredentials("Secret token is not configured. Run: addressso settings set --secret-token ...")
    return AddressClient(
        ClientConfig(
            coin=coin,
            api_token=cfg.auth.api_token,
            secret_token=cfg.auth.secret_token,
            timeout_s=cfg.timeout,
        )
    )
