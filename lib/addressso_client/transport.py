from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from .config_types import ClientConfig
from .errors import RequestFailed, ResponseDecodeError
from .signing import SIGN_KEY, encode_form, form_pairs, sign_params

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Transport:
    def __init__(self, cfg: ClientConfig, client: httpx.Client | None = None):
        self._cfg = cfg
        self._headers = {
            "User-Agent": cfg.user_agent,
            "X-Api-Token": cfg.api_token,
            "Accept": "application/json",
        }
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                base_url=cfg.base_url,
                timeout=cfg.timeout_s,
                follow_redirects=True,
            )
        self._client = client

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def request(
            self,
            method: str,
            path: str,
            params: Mapping[str, Any] | None = None,
            *,
            sign: bool = False,
    ) -> Any:
        pairs = form_pairs(params or {})
        if sign:
            pairs.append((SIGN_KEY, sign_params(params or {}, self._cfg.secret_token)))

        headers = dict(self._headers)
        kwargs: dict[str, Any] = {}
        if method.upper() == "GET":
            if pairs:
                kwargs["params"] = pairs
        else:
            headers["Content-Type"] = FORM_CONTENT_TYPE
            kwargs["content"] = encode_form(pairs).encode("utf-8")

        logger.debug("%s %s%s", method, path, " (signed)" if sign else "")
        try:
            r = self._client.request(method, path, headers=headers, **kwargs)
        except httpx.RequestError as e:
            raise RequestFailed(method, path, e) from e

        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            details = r.text[:1000] if r.text else None
            raise RequestFailed(method, path, e, status_code=r.status_code, details=details) from e

        if r.status_code == 204:
            return None

        try:
            return r.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ResponseDecodeError(method, path, r.status_code, r.text[:1000]) from e
