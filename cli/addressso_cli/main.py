from __future__ import annotations

import typer

from .commands import accounts_cmd, coins_cmd, settings_cmd, wallets_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="addressso",
        help="address.so wallet CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(coins_cmd.app, name="coins")
    app.add_typer(wallets_cmd.app, name="wallets")
    app.add_typer(accounts_cmd.app, name="accounts")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
