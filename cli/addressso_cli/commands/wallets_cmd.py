from __future__ import annotations

import typer

from .. import console
from ._send import confirm_send, parse_amount, send_extras
from ._shared import COIN_OPTION_HELP, run_api, show

app = typer.Typer(help="Wallets of the configured coin.")


@app.command("list")
def list_wallets(
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api("list wallets", lambda c: c.get_wallets(), profile=profile, coin=coin)
    show(data, json_out=json_out, title="Wallets")


@app.command("show")
def show_wallet(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api("fetch wallet", lambda c: c.get_wallet(wallet_id), profile=profile, coin=coin)
    show(data, json_out=json_out, title=f"Wallet {wallet_id}")


@app.command("create")
def create_wallet(
        label: str = typer.Argument(..., help="Wallet label."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api("create wallet", lambda c: c.create_wallet(label), profile=profile, coin=coin)
    show(data, json_out=json_out, title="Wallet created")


@app.command("rename")
def rename_wallet(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        label: str = typer.Argument(..., help="New label."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api("update wallet", lambda c: c.update_wallet(wallet_id, label), profile=profile, coin=coin)
    show(data, json_out=json_out, title=f"Wallet {wallet_id}")


@app.command("delete")
def delete_wallet(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
):
    if not yes and not typer.confirm(f"Delete wallet {wallet_id}?", default=False):
        console.info("Aborted.")
        raise typer.Exit(code=1)
    run_api("delete wallet", lambda c: c.delete_wallet(wallet_id), profile=profile, coin=coin)
    console.ok(f"Wallet {wallet_id} deleted.")


@app.command("transactions")
def wallet_transactions(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        limit: int = typer.Option(100, "--limit", help="Max transactions to return."),
        tag: int | None = typer.Option(None, "--tag", help="Filter by destination tag."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api(
        "list wallet transactions",
        lambda c: c.get_wallet_transactions(wallet_id, limit=limit, tag=tag),
        profile=profile,
        coin=coin,
    )
    show(data, json_out=json_out, title=f"Wallet {wallet_id} transactions")


@app.command("send")
def send_from_wallet(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        amount: str = typer.Option(..., "--amount", help="Amount to send."),
        recipient: str = typer.Option(..., "--to", help="Recipient address."),
        payment_password: str = typer.Option(
            ..., "--password", prompt="Payment password", hide_input=True, help="Payment password."
        ),
        fee_priority: int | None = typer.Option(None, "--fee-priority", help="1 normal, 2 medium, 3 high."),
        tag: int | None = typer.Option(None, "--tag", help="Destination tag (Ripple)."),
        odd_address: str | None = typer.Option(None, "--odd-address", help="Change address."),
        token_label: str | None = typer.Option(None, "--token-label", help="Token standard, e.g. erc20."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    value = parse_amount(amount)
    extras = send_extras(fee_priority=fee_priority, tag=tag, odd_address=odd_address, token_label=token_label)
    confirm_send(value, coin, recipient, yes)
    data = run_api(
        "send funds",
        lambda c: c.send_from_wallet(wallet_id, value, recipient, payment_password, extras),
        profile=profile,
        coin=coin,
        require_secret=True,
    )
    show(data, json_out=json_out, title="Transfer")


@app.command("grant")
def grant_permissions(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        user_id: int = typer.Option(..., "--user", help="User ID."),
        permissions: list[str] = typer.Option(..., "--permission", "-p", help="Permission (repeatable)."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api(
        "set permissions",
        lambda c: c.set_permissions(wallet_id, user_id, permissions),
        profile=profile,
        coin=coin,
    )
    show(data, json_out=json_out, title="Permissions")


@app.command("revoke")
def revoke_permissions(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        user_id: int = typer.Option(..., "--user", help="User ID."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api(
        "remove permissions",
        lambda c: c.remove_all_permissions(wallet_id, user_id),
        profile=profile,
        coin=coin,
    )
    show(data, json_out=json_out, title="Permissions")
