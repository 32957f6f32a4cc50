from __future__ import annotations

import typer

from ._shared import COIN_OPTION_HELP, run_api, show

app = typer.Typer(help="Supported coins.")


@app.command("list")
def list_coins(
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api("list coins", lambda c: c.get_coins(), profile=profile, coin=None)
    show(data, json_out=json_out, title="Coins")


@app.command("show")
def show_coin(
        coin: str | None = typer.Argument(None, help=COIN_OPTION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_api("fetch coin", lambda c: c.get_coin(), profile=profile, coin=coin)
    show(data, json_out=json_out, title="Coin")
