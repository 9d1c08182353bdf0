from __future__ import annotations

from typing import Iterable, Optional

from vending_demo.machine import format_amount


def should_preview(total_amount: int, price: int) -> bool:
    """Pressing a product shows its price only when the balance can't cover it."""
    return total_amount < price


def display_text(total_amount: int, preview_price: Optional[int] = None) -> str:
    # preview is view state only, it never reaches the State
    if preview_price is not None and should_preview(total_amount, preview_price):
        return format_amount(preview_price)
    return format_amount(total_amount)


def render_logs(logs: Iterable[str]) -> str:
    return "\n".join(logs)
