#!/usr/bin/env python3
"""
Talk to the open market API from the terminal:
- health: check the API host
- list / detail: fetch and decode products
- register / modify: submit write payloads (needs identifier + secret)

Use --mock to run against the in-memory mock client instead of the network.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
from pydantic import ValidationError

from openmarket.error_handler import ErrorHandler
from openmarket.integrations.clients.mocks.open_market import DEFAULT_MOCK_SECRET
from openmarket.integrations.contracts.products import Currency, ModificationInformation, SalesInformation
from openmarket.integrations.errors import OpenMarketError
from openmarket.integrations.services.product_service import ProductService
from openmarket.integrations.wiring import create_product_service
from openmarket.utils.config_loader import MarketConfig, load_market_config

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def print_model(model) -> None:
    print(model.model_dump_json(indent=2, exclude_none=True))


def read_images(paths: List[Path]) -> Dict[str, bytes]:
    return {path.name: path.read_bytes() for path in paths}


async def run_command(args: argparse.Namespace, cfg: MarketConfig, service: ProductService) -> None:
    identifier = cfg.credentials.identifier or ""
    secret = cfg.credentials.secret or ""

    if args.command == "health":
        await service.check_health()
        print("OK")
    elif args.command == "list":
        page = await service.fetch_product_page(
            cfg.paging.page_no if args.page is None else args.page,
            cfg.paging.items_per_page if args.items is None else args.items,
        )
        print_model(page)
    elif args.command == "detail":
        print_model(await service.fetch_product_detail(args.product_id))
    elif args.command == "register":
        information = SalesInformation(
            name=args.name,
            descriptions=args.descriptions,
            price=args.price,
            currency=Currency(args.currency),
            discounted_price=args.discounted_price,
            stock=args.stock,
            secret=secret,
        )
        print_model(await service.register_product(identifier, information, read_images(args.image)))
    elif args.command == "modify":
        information = ModificationInformation(
            secret=secret,
            name=args.name,
            descriptions=args.descriptions,
            thumbnail_id=args.thumbnail_id,
            price=args.price,
            currency=Currency(args.currency) if args.currency else None,
            discounted_price=args.discounted_price,
            stock=args.stock,
        )
        print_model(await service.modify_product(identifier, args.product_id, information))


def apply_cli_overrides(cfg: MarketConfig, args: argparse.Namespace) -> MarketConfig:
    """Fold --mock, --identifier and --secret into the config the client is built from."""
    mode = "mock" if args.mock else cfg.mode
    credentials = cfg.credentials.model_copy(update={
        "identifier": args.identifier or cfg.credentials.identifier,
        "secret": args.secret or cfg.credentials.secret,
    })
    if mode == "mock" and not credentials.secret:
        credentials = credentials.model_copy(update={"secret": DEFAULT_MOCK_SECRET})
    return cfg.model_copy(update={"mode": mode, "credentials": credentials})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Open market API client.")
    parser.add_argument("--config", type=Path, default=None, help="Path to market_config.yml")
    parser.add_argument("--mock", action="store_true", help="Use the in-memory mock client")
    parser.add_argument("--identifier", default=None, help="Vendor identifier header (overrides config)")
    parser.add_argument("--secret", default=None, help="Vendor secret (overrides config)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("health", help="Check the API host")

    list_parser = commands.add_parser("list", help="Fetch one page of products")
    list_parser.add_argument("--page", type=int, default=None, help="Page number (default from config)")
    list_parser.add_argument("--items", type=int, default=None, help="Items per page (default from config)")

    detail_parser = commands.add_parser("detail", help="Fetch a single product")
    detail_parser.add_argument("product_id", type=int)

    currencies = [currency.value for currency in Currency]

    register_parser = commands.add_parser("register", help="Register a product")
    register_parser.add_argument("--name", required=True)
    register_parser.add_argument("--descriptions", required=True)
    register_parser.add_argument("--price", type=float, required=True)
    register_parser.add_argument("--currency", choices=currencies, required=True)
    register_parser.add_argument("--discounted-price", type=float, default=None)
    register_parser.add_argument("--stock", type=int, default=None)
    register_parser.add_argument("--image", type=Path, action="append", required=True, help="Image file (repeatable)")

    modify_parser = commands.add_parser("modify", help="Partially update a product")
    modify_parser.add_argument("product_id", type=int)
    modify_parser.add_argument("--name", default=None)
    modify_parser.add_argument("--descriptions", default=None)
    modify_parser.add_argument("--thumbnail-id", type=int, default=None)
    modify_parser.add_argument("--price", type=float, default=None)
    modify_parser.add_argument("--currency", choices=currencies, default=None)
    modify_parser.add_argument("--discounted-price", type=float, default=None)
    modify_parser.add_argument("--stock", type=int, default=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)
    try:
        cfg = apply_cli_overrides(load_market_config(args.config), args)
    except (ValidationError, FileNotFoundError) as e:
        logger.error(f"Could not load configuration: {e}")
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        service = create_product_service(cfg)
        asyncio.run(run_command(args, cfg, service))
    except OpenMarketError as e:
        logger.debug(f"Command {args.command} failed: {type(e).__name__}")
        alert = ErrorHandler().handle_exception(e, context={"command": args.command})
        print(f"{alert['title']}: {alert['message']}", file=sys.stderr)
        print(json.dumps(alert["metadata"], ensure_ascii=False), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
