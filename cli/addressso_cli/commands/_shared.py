from __future__ import annotations

from typing import Any, Callable

import typer
from addressso_client import AddressClient, RequestFailed, ResponseDecodeError

from .. import console
from ..config import load_config
from ..formatting import build_table
from ..http import MissingCredentials, make_client

COIN_OPTION_HELP = "Coin label (btc, eth, ...). Defaults to the configured coin."


def run_api(
        action: str,
        call: Callable[[AddressClient], Any],
        *,
        profile: str | None,
        coin: str | None,
        require_secret: bool = False,
) -> Any:
    cfg = load_config(profile)
    try:
        client = make_client(cfg, coin_override=coin, require_secret=require_secret)
    except MissingCredentials as e:
        console.err(str(e))
        raise typer.Exit(code=2)

    try:
        return call(client)
    except RequestFailed as e:
        if e.timed_out:
            console.err(f"Failed to {action}: request timed out after {cfg.timeout}s")
        elif e.status_code in (401, 403):
            console.err(f"Failed to {action}: unauthorized. Check api/secret tokens.")
        else:
            console.err(f"Failed to {action}: {e}")
        if e.details:
            console.console.print(e.details, markup=False)
        raise typer.Exit(code=2)
    except ResponseDecodeError as e:
        console.err(f"Failed to {action}: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()


def show(data: Any, *, json_out: bool, title: str) -> None:
    if json_out:
        console.print_json(data)
        return
    table = build_table(data, title=title)
    if table is None:
        console.print_json(data)
        return
    console.console.print(table)
