from __future__ import annotations
from dataclasses import dataclass

BASE_URI = "https://api.address.so/api/"


@dataclass(frozen=True)
class ClientConfig:
    coin: str
    api_token: str
    secret_token: str
    timeout_s: int = 2
    base_url: str = BASE_URI
    user_agent: str = "addressso-client/0.1.0"
