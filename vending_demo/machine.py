from __future__ import annotations

from dataclasses import replace

from vending_demo.models import Action, Catalog, InsertMoney, PurchaseItem, ReturnMoney, State


def format_amount(amount: int) -> str:
    return f"{amount:,}"


def inserted_message(amount: int) -> str:
    return f"{format_amount(amount)}원을 넣었습니다."


def change_message(amount: int) -> str:
    return f"잔돈 {format_amount(amount)}원을 반환합니다."


def purchased_message(price: int) -> str:
    return f"{Catalog.product_name(price)}를 구매하였습니다."


def _append(state: State, total_amount: int, *messages: str) -> State:
    return replace(state, total_amount=total_amount, logs=state.logs + messages)


def _insert_money(state: State, amount: int) -> State:
    if amount <= 0:
        return state
    return _append(state, state.total_amount + amount, inserted_message(amount))


def _return_money(state: State) -> State:
    if state.total_amount == 0:
        return state
    return _append(state, 0, change_message(state.total_amount))


def _purchase_item(state: State, price: int) -> State:
    if state.total_amount < price:
        return state

    remainder = state.total_amount - price
    if remainder > 0:
        # change goes back in the same transaction, it never stays on the balance
        return _append(state, 0, purchased_message(price), change_message(remainder))
    return _append(state, 0, purchased_message(price))


def transition(state: State, action: Action) -> State:
    """
    Pure reducer: (state, action) -> next state.

    Never raises and never mutates `state`. Requests that cannot be satisfied
    (zero insert, nothing to return, not enough money) return `state` itself.
    Catalog membership is not checked here; see VendingService.purchase.
    """
    if isinstance(action, InsertMoney):
        return _insert_money(state, action.amount)
    if isinstance(action, ReturnMoney):
        return _return_money(state)
    if isinstance(action, PurchaseItem):
        return _purchase_item(state, action.price)
    return state
