from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

PRICE_LIST: Tuple[int, ...] = (300, 400, 500, 600, 700, 800, 900, 1000, 1100)


@dataclass(frozen=True, slots=True)
class Catalog:
    """
    Fixed, ordered list of product prices.
    A product has no id of its own: it is identified by its price.
    """

    prices: Tuple[int, ...] = PRICE_LIST

    def __post_init__(self) -> None:
        prices = tuple(self.prices)
        if any(p <= 0 for p in prices):
            raise ValueError(f"Catalog prices must be positive: {prices}")
        if len(set(prices)) != len(prices):
            raise ValueError(f"Catalog prices must be unique: {prices}")
        object.__setattr__(self, "prices", prices)

    def __contains__(self, price: object) -> bool:
        return price in self.prices

    def __iter__(self) -> Iterator[int]:
        return iter(self.prices)

    def __len__(self) -> int:
        return len(self.prices)

    @staticmethod
    def product_name(price: int) -> str:
        return f"FE{price}"


@dataclass(frozen=True, slots=True)
class State:
    total_amount: int = 0
    logs: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class InsertMoney:
    amount: int


@dataclass(frozen=True, slots=True)
class ReturnMoney:
    pass


@dataclass(frozen=True, slots=True)
class PurchaseItem:
    price: int


Action = Union[InsertMoney, ReturnMoney, PurchaseItem]
