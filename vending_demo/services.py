from __future__ import annotations

import logging
import re
from typing import Optional

from vending_demo.models import Action, InsertMoney, PurchaseItem, ReturnMoney, State
from vending_demo.store import MachineStore

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


class VendingError(Exception):
    pass


class InvalidActionError(VendingError, ValueError):
    """Caller asked for something that is not a valid action."""


class UnknownProductError(InvalidActionError):
    """Purchase of a price that is not in the catalog."""


def sanitize_amount(text: str) -> int:
    """Keep only the digits of a raw amount input ("-1,000" -> 1000, "" -> 0)."""
    digits = _NON_DIGITS.sub("", text)
    return int(digits) if digits else 0


class VendingService:
    ACTION_KINDS = ("INSERT_MONEY", "RETURN_MONEY", "PURCHASE_ITEM")

    def __init__(self, store: MachineStore):
        self.store = store

    def insert_money(self, amount: int) -> State:
        return self.execute("INSERT_MONEY", amount)

    def return_money(self) -> State:
        return self.store.dispatch(ReturnMoney())

    def purchase(self, price: int) -> State:
        return self.execute("PURCHASE_ITEM", price)

    def build_action(self, kind: str, value: Optional[int] = None) -> Action:
        if not isinstance(kind, str) or kind.strip().upper() not in self.ACTION_KINDS:
            logger.warning("rejected action kind: %s", kind)
            raise InvalidActionError(f"Unknown action kind {kind!r}, expected one of {', '.join(self.ACTION_KINDS)}")

        kind = kind.strip().upper()
        if kind == "RETURN_MONEY":
            return ReturnMoney()

        if value is None or isinstance(value, bool) or not isinstance(value, int):
            raise InvalidActionError(f"{kind} requires an integer value, got {value!r}")
        if kind == "INSERT_MONEY":
            return InsertMoney(value)
        if value not in self.store.catalog:
            logger.warning("rejected purchase: price %s is not in the catalog", value)
            raise UnknownProductError(f"No product with price {value}")
        return PurchaseItem(value)

    def execute(self, kind: str, value: Optional[int] = None) -> State:
        return self.store.dispatch(self.build_action(kind, value))

    def parse_command(self, text: str) -> Action:
        """
        CLI syntax: `insert:<amount>`, `return`, `buy:<price>`.
        The insert amount goes through sanitize_amount like the keypad input does.
        """
        name, _, arg = text.strip().partition(":")
        name = name.lower()

        if name == "return" and not arg:
            return self.build_action("RETURN_MONEY")
        if name == "insert" and arg:
            return self.build_action("INSERT_MONEY", sanitize_amount(arg))
        # int() rejects non-ASCII digits such as "²"
        if name == "buy" and arg.isascii() and arg.isdigit():
            return self.build_action("PURCHASE_ITEM", int(arg))
        raise InvalidActionError(f"Cannot parse command {text!r}")
