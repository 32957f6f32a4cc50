"""Form encoding, request signing and send-parameter filtering.

The API verifies fund transfers with an HMAC-SHA512 over the form-encoded
parameters. The server side re-encodes the parameters the way PHP's
``http_build_query`` does, so the encoder below follows those rules rather
than ``urllib.parse.urlencode``.
"""
from __future__ import annotations

import hashlib
import hmac
import logging
from decimal import Decimal
from enum import IntEnum
from typing import Any, Iterable, Mapping
from urllib.parse import quote_plus

logger = logging.getLogger(__name__)

SEND_PARAMS_ALLOWED: tuple[str, ...] = (
    "amount",
    "recipient",
    "payment_password",
    "odd_address",
    "token_label",
    "fee_priority",
    "tag",
)

SIGN_KEY = "sign"


class FeePriority(IntEnum):
    NORMAL = 1
    MEDIUM = 2
    HIGH = 3


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, IntEnum):
        return str(int(value))
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _quote(text: str) -> str:
    # RFC 1738 as in PHP urlencode(): "~" is escaped too
    return quote_plus(text, safe="").replace("~", "%7E")


def form_pairs(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten a parameter mapping into ordered (key, value) string pairs.

    ``None`` values are dropped and list/tuple values expand into repeated
    ``key[]`` entries.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                if item is not None:
                    pairs.append((f"{key}[]", _scalar(item)))
            continue
        pairs.append((str(key), _scalar(value)))
    return pairs


def encode_form(params: Mapping[str, Any] | Iterable[tuple[str, str]]) -> str:
    pairs = form_pairs(params) if isinstance(params, Mapping) else list(params)
    return "&".join(f"{_quote(k)}={_quote(v)}" for k, v in pairs)


def signing_key(secret_token: str) -> str:
    return hashlib.sha512(secret_token.encode("utf-8")).hexdigest()


def sign_params(params: Mapping[str, Any], secret_token: str) -> str:
    ordered = {k: params[k] for k in sorted(params, key=str)}
    query = encode_form(ordered)
    key = signing_key(secret_token)
    return hmac.new(key.encode("ascii"), query.encode("utf-8"), hashlib.sha512).hexdigest()


def filter_send_params(
        amount: float | Decimal,
        recipient: str,
        payment_password: str,
        additional: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    params: dict[str, Any] = {
        "amount": amount,
        "recipient": recipient,
        "payment_password": payment_password,
    }
    if additional:
        overridden = sorted(k for k in additional if k in params)
        if overridden:
            logger.warning("additional send params override required fields: %s", ", ".join(overridden))
        params.update(additional)

    dropped = [str(k) for k in params if k not in SEND_PARAMS_ALLOWED]
    if dropped:
        logger.debug("dropping unsupported send params: %s", ", ".join(dropped))
    return {k: v for k, v in params.items() if k in SEND_PARAMS_ALLOWED}
