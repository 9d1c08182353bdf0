"""Pytest fixtures for the vending machine demo."""

import pytest

from vending_demo.models import Catalog, State
from vending_demo.services import VendingService
from vending_demo.store import MachineStore


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def store(catalog) -> MachineStore:
    return MachineStore(catalog)


@pytest.fixture
def service(store) -> VendingService:
    return VendingService(store)


@pytest.fixture
def funded_state() -> State:
    # some history already in the log, balance 1000
    return State(total_amount=1000, logs=("1,000원을 넣었습니다.",))
