from __future__ import annotations

import typer

from .. import console
from ._send import confirm_send, parse_amount, send_extras
from ._shared import COIN_OPTION_HELP, run_api, show

app = typer.Typer(help="Accounts (sub-ledgers) inside a wallet.")


@app.command("list")
def list_accounts(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api("list accounts", lambda c: c.get_accounts(wallet_id), profile=profile, coin=coin)
    show(data, json_out=json_out, title=f"Wallet {wallet_id} accounts")


@app.command("show")
def show_account(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        account_id: int = typer.Argument(..., help="Account ID."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api("fetch account", lambda c: c.get_account(wallet_id, account_id), profile=profile, coin=coin)
    show(data, json_out=json_out, title=f"Account {account_id}")


@app.command("create")
def create_account(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api("create account", lambda c: c.create_account(wallet_id), profile=profile, coin=coin)
    show(data, json_out=json_out, title="Account created")


@app.command("delete")
def delete_account(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        account_id: int = typer.Argument(..., help="Account ID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
):
    if not yes and not typer.confirm(f"Delete account {account_id}?", default=False):
        console.info("Aborted.")
        raise typer.Exit(code=1)
    run_api("delete account", lambda c: c.delete_account(wallet_id, account_id), profile=profile, coin=coin)
    console.ok(f"Account {account_id} deleted.")


@app.command("archive")
def archive_accounts(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        account_ids: list[int] = typer.Argument(..., help="Account IDs to archive."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api(
        "archive accounts",
        lambda c: c.archive_accounts(wallet_id, account_ids),
        profile=profile,
        coin=coin,
    )
    show(data, json_out=json_out, title="Archived accounts")


@app.command("transactions")
def account_transactions(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        account_id: int = typer.Argument(..., help="Account ID."),
        limit: int = typer.Option(100, "--limit", help="Max transactions to return."),
        coin: str | None = typer.Option(None, "--coin", help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api(
        "list account transactions",
        lambda c: c.get_account_transactions(wallet_id, account_id, limit=limit),
        profile=profile,
        coin=coin,
    )
    show(data, json_out=json_out, title=f"Account {account_id} transactions")


@app.command("send")
def send_from_account(
        wallet_id: int = typer.Argument(..., help="Wallet ID."),
        account_id: int = typer.Argument(..., help="Account ID."),
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
        lambda c: c.send_from_account(wallet_id, account_id, value, recipient, payment_password, extras),
        profile=profile,
        coin=coin,
        require_secret=True,
    )
    show(data, json_out=json_out, title="Transfer")
