from __future__ import annotations

from decimal import Decimal

from addressso_client.signing import (
    SEND_PARAMS_ALLOWED,
    FeePriority,
    encode_form,
    filter_send_params,
    sign_params,
    signing_key,
)

SECRET = "s3cret"


def test_signing_key_is_hex_sha512_of_secret() -> None:
    assert signing_key(SECRET) == (
        "95c89addde506357ec5efd0ee41ac241efd6fb1009a7680c1501ea8170342b8c"
        "bf0f2d938b56295490f19f1fc5fa28d09b1584eaa09c9a6b2f777623299cd521"
    )


def test_sign_known_digest() -> None:
    params = {"amount": 0.1, "recipient": "abc", "payment_password": "pw"}
    assert sign_params(params, SECRET) == (
        "1f9f2c7bb6b000d9828c0d71d422f2bda21ae3060cd7288f0aa63a6893dca80f"
        "78e24a9a10a34e6293762de9d81861ae865fcfa3a0f7aef0eb15f1adb2606b52"
    )


def test_sign_encodes_like_form_body() -> None:
    params = {"recipient": "r~1", "amount": 1.5, "payment_password": "p@ss w"}
    assert sign_params(params, SECRET) == (
        "dc09bc6a6beb6f0ac69d648c4155ce408e95c2bee6f6629e64c959198050ef00"
        "c5dbbcddc7d2700bbf975252104134aae28c2f25912c980c7aa0ce730c7642a7"
    )


def test_sign_is_order_independent() -> None:
    a = {"amount": 0.5, "recipient": "x", "payment_password": "p", "tag": 7}
    b = {"tag": 7, "payment_password": "p", "recipient": "x", "amount": 0.5}
    assert sign_params(a, SECRET) == sign_params(b, SECRET)


def test_sign_changes_with_any_key_or_value() -> None:
    base = {"amount": 0.5, "recipient": "x", "payment_password": "p"}
    reference = sign_params(base, SECRET)
    assert sign_params({**base, "amount": 0.51}, SECRET) != reference
    assert sign_params({**base, "recipient": "y"}, SECRET) != reference
    renamed = {"amount": 0.5, "recipient_": "x", "payment_password": "p"}
    assert sign_params(renamed, SECRET) != reference
    assert sign_params(base, "other") != reference


def test_encode_form_scalars_and_lists() -> None:
    assert encode_form({"amount": 2.0, "flag": True, "off": False, "skip": None}) == "amount=2&flag=1&off=0"
    assert encode_form({"permissions": ["0"], "user_id": 7}) == "permissions%5B%5D=0&user_id=7"
    assert encode_form({"accounts": [3, 1]}) == "accounts%5B%5D=3&accounts%5B%5D=1"
    assert encode_form({"a": Decimal("0.10"), "p": FeePriority.HIGH}) == "a=0.10&p=3"
    assert encode_form({"q": "a b&c=d/é"}) == "q=a+b%26c%3Dd%2F%C3%A9"


def test_filter_keeps_allowed_in_merge_order() -> None:
    params = filter_send_params(
        0.1,
        "addr",
        "pw",
        {"tag": 39381, "bogus_field": "x", "fee_priority": FeePriority.MEDIUM},
    )
    assert list(params) == ["amount", "recipient", "payment_password", "tag", "fee_priority"]
    assert "bogus_field" not in params


def test_filter_drops_adversarial_keys() -> None:
    extra = {
        "__proto__": {"admin": True},
        "constructor": "x",
        "amount; DROP TABLE wallets": 1,
        "sign": "forged",
        "Tag": 1,
        "odd_address": "change",
        "token_label": "erc20",
    }
    params = filter_send_params(1, "r", "p", extra)
    assert set(params) <= set(SEND_PARAMS_ALLOWED)
    assert params["odd_address"] == "change"
    assert "sign" not in params


def test_filter_allows_override_of_required_fields(caplog) -> None:
    with caplog.at_level("WARNING", logger="addressso_client.signing"):
        params = filter_send_params(1, "r", "p", {"recipient": "other"})
    assert params["recipient"] == "other"
    assert "recipient" in caplog.text


def test_filter_without_additional() -> None:
    assert filter_send_params(0, "r", "p", None) == {"amount": 0, "recipient": "r", "payment_password": "p"}
