from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

from vending_demo.machine import transition
from vending_demo.models import Action, Catalog, State

logger = logging.getLogger(__name__)


class MachineStore:
    """
    In-memory holder of the machine's current State.

    The reducer itself has no shared memory; this class is the single writer.
    dispatch() does "read state, compute next, store state" under a lock, and
    mirrors every new log entry to `logging`.
    """

    def __init__(self, catalog: Optional[Catalog] = None) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self._state = State()
        self._lock = threading.Lock()

    @property
    def state(self) -> State:
        return self._state

    @property
    def total_amount(self) -> int:
        return self._state.total_amount

    @property
    def logs(self) -> Tuple[str, ...]:
        return self._state.logs

    def dispatch(self, action: Action) -> State:
        with self._lock:
            before = self._state
            after = transition(before, action)
            self._state = after

            # mirrored under the lock so `logging` sees the same order as State.logs
            for message in after.logs[len(before.logs):]:
                logger.info(message)

        if after is before:
            logger.debug("no-op action: %r (balance=%s)", action, before.total_amount)
        return after
