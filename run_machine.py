from __future__ import annotations

import argparse
import logging
from typing import List

from vending_demo.display import display_text, render_logs
from vending_demo.models import Catalog
from vending_demo.services import InvalidActionError, VendingService
from vending_demo.store import MachineStore


def parse_catalog(text: str) -> Catalog:
    try:
        return Catalog(tuple(int(p) for p in text.split(",") if p.strip()))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def main(argv: List[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    p = argparse.ArgumentParser(description="Run commands against a vending machine and print its logs.")
    p.add_argument("commands", nargs="*", help="insert:<amount>, buy:<price> or return, applied in order")
    p.add_argument("--catalog", type=parse_catalog, default=Catalog(), help="Comma separated price list, e.g. 300,400,500")
    args = p.parse_args(argv)

    service = VendingService(MachineStore(args.catalog))
    try:
        actions = [service.parse_command(c) for c in args.commands]
    except InvalidActionError as e:
        p.error(str(e))

    for action in actions:
        service.store.dispatch(action)

    print("\n=== RESULT ===")
    print("products:", ", ".join(f"{Catalog.product_name(price)}={price:,}" for price in args.catalog))
    print("display:", display_text(service.store.total_amount))
    print("logs:")
    print(render_logs(service.store.logs))


if __name__ == "__main__":
    main()
