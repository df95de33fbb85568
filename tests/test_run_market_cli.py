"""Tests for scripts/run_market.py in --mock mode (no network)."""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "run_market.py"


@pytest.fixture(scope="module")
def run_market():
    spec = importlib.util.spec_from_file_location("run_market", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_list_prints_decoded_page(run_market, capsys):
    assert run_market.main(["--mock", "list", "--items", "2"]) == 0

    page = json.loads(capsys.readouterr().out)
    assert page["items_per_page"] == 2
    assert len(page["pages"]) == 2


def _register_args(image, *options):
    return [
        "--mock", *options,
        "register", "--name", "pizza", "--descriptions", "cheese",
        "--price", "1000", "--currency", "KRW", "--image", str(image),
    ]


@pytest.mark.parametrize(
    "options",
    [
        (),
        ("--secret", "mock-secret"),
        ("--identifier", "vendor-1", "--secret", "my-secret"),
    ],
)
def test_register_in_mock_mode_uses_the_given_secret(run_market, tmp_path, capsys, options):
    image = tmp_path / "a.png"
    image.write_bytes(b"img")

    assert run_market.main(_register_args(image, *options)) == 0

    created = json.loads(capsys.readouterr().out)
    assert created["name"] == "pizza"
    assert created["images"][0]["url"].endswith("a.png")


def test_secret_from_environment_reaches_the_mock(run_market, tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("OPEN_MARKET_SECRET", "env-secret")
    image = tmp_path / "a.png"
    image.write_bytes(b"img")

    assert run_market.main(_register_args(image)) == 0
    assert json.loads(capsys.readouterr().out)["name"] == "pizza"


def test_cli_overrides_are_folded_into_config(run_market):
    cfg = run_market.load_market_config()
    args = run_market.build_parser().parse_args(["--mock", "--identifier", "vendor-9", "--secret", "s3", "health"])

    folded = run_market.apply_cli_overrides(cfg, args)

    assert folded.mode == "mock"
    assert folded.credentials.identifier == "vendor-9"
    assert folded.credentials.secret == "s3"
    assert cfg.credentials.secret is None


def test_unknown_product_exits_with_error(run_market, capsys):
    assert run_market.main(["--mock", "detail", "999"]) == 1

    err = capsys.readouterr().err
    assert "404" in err


@pytest.mark.parametrize(
    "paging",
    [
        ["--page", "-1"],
        ["--page", "0"],
        ["--items", "0"],
        ["--page", "0", "--items", "2"],
    ],
)
def test_invalid_paging_exits_with_error(run_market, capsys, paging):
    assert run_market.main(["--mock", "list", *paging]) == 1

    assert "InvalidParameters" in capsys.readouterr().err


def test_invalid_api_host_exits_with_error(run_market, capsys, monkeypatch):
    monkeypatch.setenv("OPEN_MARKET_API_HOST", "market.example.test")

    assert run_market.main(["health"]) == 1

    err = capsys.readouterr().err
    assert "InvalidParameters" in err
    assert "market.example.test" in err


def test_invalid_mode_exits_with_configuration_error(run_market, capsys, monkeypatch):
    monkeypatch.setenv("INTEGRATIONS_MODE", "staging")

    assert run_market.main(["--mock", "health"]) == 1

    assert "Configuration error" in capsys.readouterr().err


def test_missing_config_file_exits_with_configuration_error(run_market, tmp_path, capsys):
    assert run_market.main(["--config", str(tmp_path / "absent.yml"), "--mock", "health"]) == 1

    assert "Configuration error" in capsys.readouterr().err
