#!/usr/bin/env python3
"""
Command-line entry point for the storefront cart
Restores the persisted cart, applies one command and prints the result.

    python main.py show
    python main.py add 1
    python main.py set 1 3
    python main.py remove 1
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from storefront_cart.application.dtos.cart_dtos import UpdateProductAmount
from storefront_cart.application.use_cases.cart_store import CartStore
from storefront_cart.infrastructure.configuration.config import get_config
from storefront_cart.infrastructure.container.dependency_injection import (
    DependencyContainer,
)
from storefront_cart.infrastructure.logging.logging_config import (
    LoggingConfigOptions,
    setup_logging,
)
from storefront_cart.infrastructure.services.notification_service import (
    CallbackNotifier,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Storefront cart")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("show", help="Print the current cart")

    add = commands.add_parser("add", help="Add one unit of a product")
    add.add_argument("product_id", type=int)

    remove = commands.add_parser("remove", help="Remove a product from the cart")
    remove.add_argument("product_id", type=int)

    set_amount = commands.add_parser("set", help="Set a product's quantity")
    set_amount.add_argument("product_id", type=int)
    set_amount.add_argument("amount", type=int)

    return parser


def print_notification(level: str, message: str) -> None:
    print(f"[{level}] {message}", file=sys.stderr)


def print_cart(store: CartStore) -> None:
    summary = store.summary()
    if not summary.entries:
        print("Cart is empty")
        return

    for entry in summary.entries:
        print(
            f"#{entry.product_id:<4} {entry.title[:40]:<40} "
            f"{entry.amount:>3} x {entry.price:>8.2f} = {entry.subtotal:>9.2f}"
        )
    print(f"{summary.item_count} items, subtotal {summary.subtotal:.2f}")


async def run(args: argparse.Namespace, store: CartStore) -> None:
    if args.command == "add":
        await store.add_product(args.product_id)
    elif args.command == "remove":
        await store.remove_product(args.product_id)
    elif args.command == "set":
        await store.update_product_amount(
            UpdateProductAmount(product_id=args.product_id, amount=args.amount)
        )


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    config = get_config()
    setup_logging(
        LoggingConfigOptions(
            log_level=config.log_level,
            log_dir=config.log_dir,
            enable_console=config.environment != "production",
        )
    )
    logger = logging.getLogger(__name__)
    logger.info("Configuration loaded successfully")

    container = DependencyContainer(config, notifier=CallbackNotifier(print_notification))
    store = container.initialize()

    asyncio.run(run(args, store))
    print_cart(store)
    return 0


if __name__ == "__main__":
    sys.exit(main())
