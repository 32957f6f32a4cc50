from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from addressso_client import AddressClient, ClientConfig

API_TOKEN = "api-token"
SECRET = "s3cret"


class Recorder:
    """Collects requests sent through an httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response: httpx.Response | Exception = httpx.Response(200, json={"status": "ok"})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_form(self) -> dict[str, list[str]]:
        return parse_qs(self.last.content.decode("utf-8"), keep_blank_values=True)


def build_client(recorder: Recorder, *, coin: str = "btc") -> AddressClient:
    cfg = ClientConfig(coin=coin, api_token=API_TOKEN, secret_token=SECRET)
    http_client = httpx.Client(base_url=cfg.base_url, transport=httpx.MockTransport(recorder))
    return AddressClient(cfg, http_client=http_client)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(recorder: Recorder) -> AddressClient:
    return build_client(recorder)
