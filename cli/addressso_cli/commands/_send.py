from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

import typer

from .. import console


def parse_amount(raw: str) -> Decimal:
    try:
        amount = Decimal(raw.strip())
    except InvalidOperation:
        console.err(f"Invalid amount: {raw}")
        raise typer.Exit(code=2)
    if not amount.is_finite() or amount <= 0:
        console.err("Amount must be a positive number.")
        raise typer.Exit(code=2)
    return amount


def send_extras(
        *,
        fee_priority: int | None,
        tag: int | None,
        odd_address: str | None,
        token_label: str | None,
) -> dict[str, Any]:
    extras: dict[str, Any] = {}
    if fee_priority is not None:
        if fee_priority not in (1, 2, 3):
            console.err("--fee-priority must be 1 (normal), 2 (medium) or 3 (high).")
            raise typer.Exit(code=2)
        extras["fee_priority"] = fee_priority
    if tag is not None:
        extras["tag"] = tag
    if odd_address:
        extras["odd_address"] = odd_address
    if token_label:
        extras["token_label"] = token_label
    return extras


def confirm_send(amount: Decimal, coin: str | None, recipient: str, assume_yes: bool) -> None:
    if assume_yes:
        return
    label = coin or "configured coin"
    if not typer.confirm(f"Send {amount} ({label}) to {recipient}?", default=False):
        console.info("Aborted.")
        raise typer.Exit(code=1)
