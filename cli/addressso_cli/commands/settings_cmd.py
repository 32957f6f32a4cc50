from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_coin, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/addressso/config.toml).")


def _state(value: str) -> str:
    return "(set)" if (value or "").strip() else "(empty)"


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        coin: str = typer.Option("btc", "--coin", prompt="Default coin", help="Default coin label."),
        api_token: str = typer.Option(..., "--api-token", prompt="API token", help="X-Api-Token value."),
        secret_token: str = typer.Option(
            ..., "--secret-token", prompt="Secret token", hide_input=True, help="Secret used to sign transfers."
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.coin = normalize_coin(coin)
    if not cfg.coin:
        console.err("Coin cannot be empty.")
        raise typer.Exit(code=2)
    cfg.auth.api_token = api_token.strip()
    cfg.auth.secret_token = secret_token.strip()
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings(
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
):
    cfg = load_config(profile)
    console.console.print(
        f"coin={cfg.coin} timeout={cfg.timeout}s "
        f"api_token={_state(cfg.auth.api_token)} secret_token={_state(cfg.auth.secret_token)}"
    )


@app.command("set")
def set_settings(
        coin: str | None = typer.Option(None, "--coin", help="Default coin label."),
        api_token: str | None = typer.Option(None, "--api-token", help="X-Api-Token value."),
        secret_token: str | None = typer.Option(None, "--secret-token", help="Secret used to sign transfers."),
        timeout: int | None = typer.Option(None, "--timeout", help="Request timeout in seconds."),
):
    cfg = load_config(use_env=False)
    if coin is not None:
        cfg.coin = normalize_coin(coin) or cfg.coin
    if api_token is not None:
        cfg.auth.api_token = api_token.strip()
    if secret_token is not None:
        cfg.auth.secret_token = secret_token.strip()
    if timeout is not None:
        if timeout <= 0:
            console.err("Timeout must be a positive number of seconds.")
            raise typer.Exit(code=2)
        cfg.timeout = timeout
    save_config(cfg)
    console.ok("Config updated.")
