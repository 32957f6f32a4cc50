from __future__ import annotations

import os
import stat

from addressso_cli import config


def _use_tmp_config(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    for name in (config.ENV_API_TOKEN, config.ENV_SECRET_TOKEN, config.ENV_COIN):
        monkeypatch.delenv(name, raising=False)


def test_load_config_defaults_without_file(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    cfg = config.load_config()
    assert cfg.coin == "btc"
    assert cfg.timeout == 2
    assert cfg.auth.api_token == ""


def test_save_and_load_roundtrip_with_private_mode(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    cfg = config.default_config()
    cfg.coin = "eth"
    cfg.auth.api_token = "tok"
    cfg.auth.secret_token = "sec"
    cfg.timeout = 5

    path = config.save_config(cfg)

    assert path.endswith("config.toml")
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o600
    loaded = config.load_config()
    assert loaded == cfg


def test_profile_overrides_file_values(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text(
        "\n".join(
            [
                'coin = "btc"',
                "timeout = 3",
                "",
                "[auth]",
                'api_token = "default-token"',
                'secret_token = "default-secret"',
                "",
                "[profiles.xrp]",
                'coin = "XRP"',
                'api_token = "xrp-token"',
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = config.load_config("xrp")

    assert cfg.coin == "xrp"
    assert cfg.auth.api_token == "xrp-token"
    assert cfg.auth.secret_token == "default-secret"
    assert cfg.timeout == 3
    assert config.load_config("missing").auth.api_token == "default-token"


def test_env_overrides_file(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text(
        '[auth]\napi_token = "file-token"\n', encoding="utf-8"
    )
    monkeypatch.setenv(config.ENV_API_TOKEN, "env-token")
    monkeypatch.setenv(config.ENV_COIN, " LTC ")

    cfg = config.load_config()
    assert cfg.auth.api_token == "env-token"
    assert cfg.coin == "ltc"
    assert config.load_config(use_env=False).auth.api_token == "file-token"


def test_save_keeps_profiles(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text(
        '[profiles.dev]\napi_token = "dev"\n', encoding="utf-8"
    )
    cfg = config.load_config()
    cfg.auth.api_token = "main"
    config.save_config(cfg)

    assert config.load_config("dev").auth.api_token == "dev"
    assert config.load_config().auth.api_token == "main"


def test_invalid_timeout_falls_back() -> None:
    cfg = config.from_toml({"timeout": "soon"})
    assert cfg.timeout == config.DEFAULT_TIMEOUT
    assert config.from_toml({"timeout": 0}).timeout == config.DEFAULT_TIMEOUT
