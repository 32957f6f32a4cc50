from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from typing import Any

import tomli_w
from platformdirs import user_config_dir

APP_NAME = "addressso"
CONFIG_FILENAME = "config.toml"
DEFAULT_COIN = "btc"
DEFAULT_TIMEOUT = 2

ENV_API_TOKEN = "ADDRESSSO_API_TOKEN"
ENV_SECRET_TOKEN = "ADDRESSSO_SECRET_TOKEN"
ENV_COIN = "ADDRESSSO_COIN"


@dataclass
class AuthConfig:
    api_token: str = ""
    secret_token: str = ""


@dataclass
class AppConfig:
    coin: str
    auth: AuthConfig
    timeout: int = DEFAULT_TIMEOUT


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(coin=DEFAULT_COIN, auth=AuthConfig(), timeout=DEFAULT_TIMEOUT)


def normalize_coin(raw: str | None) -> str:
    return (raw or "").strip().lower()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def _parse_timeout(value: Any, fallback: int) -> int:
    try:
        timeout = int(value)
    except (TypeError, ValueError):
        return fallback
    return timeout if timeout > 0 else fallback


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "coin": cfg.coin,
        "timeout": cfg.timeout,
        "auth": {
            "api_token": cfg.auth.api_token,
            "secret_token": cfg.auth.secret_token,
        },
    }


def _merge_section(cfg: AppConfig, data: dict[str, Any]) -> AppConfig:
    auth_raw = data.get("auth") if isinstance(data.get("auth"), dict) else {}
    coin = normalize_coin(str(data.get("coin") or "")) or cfg.coin
    return AppConfig(
        coin=coin,
        auth=AuthConfig(
            api_token=str(data.get("api_token") or auth_raw.get("api_token") or cfg.auth.api_token),
            secret_token=str(data.get("secret_token") or auth_raw.get("secret_token") or cfg.auth.secret_token),
        ),
        timeout=_parse_timeout(data.get("timeout"), cfg.timeout),
    )


def from_toml(data: dict[str, Any]) -> AppConfig:
    return _merge_section(default_config(), data)


def _read_toml() -> dict[str, Any] | None:
    try:
        with open(config_path(), "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return None


def apply_env(cfg: AppConfig) -> AppConfig:
    api_token = os.getenv(ENV_API_TOKEN, "").strip()
    secret_token = os.getenv(ENV_SECRET_TOKEN, "").strip()
    coin = normalize_coin(os.getenv(ENV_COIN))
    return replace(
        cfg,
        coin=coin or cfg.coin,
        auth=AuthConfig(
            api_token=api_token or cfg.auth.api_token,
            secret_token=secret_token or cfg.auth.secret_token,
        ),
    )


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    data = _read_toml()
    if not data:
        return cfg
    profiles_raw = data.get("profiles") or {}
    if not isinstance(profiles_raw, dict):
        return cfg
    prof = profiles_raw.get(profile)
    if not isinstance(prof, dict):
        return cfg
    return _merge_section(cfg, prof)


def load_config(profile: str | None = None, *, use_env: bool = True) -> AppConfig:
    """Load the config file, then the named profile, then environment overrides."""
    data = _read_toml()
    cfg = apply_profile(from_toml(data) if data else default_config(), profile)
    return apply_env(cfg) if use_env else cfg


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    data = _read_toml() or {}
    # profiles are edited by hand, keep them
    payload = to_toml(cfg)
    if isinstance(data.get("profiles"), dict):
        payload["profiles"] = data["profiles"]
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(payload).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
