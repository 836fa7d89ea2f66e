"""Order view-model: holds the in-progress tray order and notifies observers."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Callable

from lunch_tray.config import resolve_tax_rate
from lunch_tray.debug_log import log_debug
from lunch_tray.models import MenuItem, OrderState

OrderListener = Callable[[OrderState], None]


class OrderController:
    """Owns the single OrderState of the running app.

    The state is a frozen snapshot that gets replaced on every change, so the
    value handed out by ``current_state`` can never be used to mutate the order.
    """

    def __init__(self, tax_rate: Decimal | None = None) -> None:
        self._tax_rate = resolve_tax_rate() if tax_rate is None else tax_rate
        self._state = OrderState(tax_rate=self._tax_rate)
        self._listeners: list[OrderListener] = []

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    def current_state(self) -> OrderState:
        return self._state

    def update_entree(self, item: MenuItem) -> None:
        log_debug(f"update_entree name={item.name!r}")
        self._set_state(replace(self._state, entree=item))

    def update_side_dish(self, item: MenuItem) -> None:
        log_debug(f"update_side_dish name={item.name!r}")
        self._set_state(replace(self._state, side_dish=item))

    def update_accompaniment(self, item: MenuItem) -> None:
        log_debug(f"update_accompaniment name={item.name!r}")
        self._set_state(replace(self._state, accompaniment=item))

    def reset_order(self) -> None:
        """Clear every selection. Safe to call repeatedly and from any step."""
        log_debug("reset_order")
        self._set_state(OrderState(tax_rate=self._tax_rate))

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """Register ``listener`` for every later state change.

        Returns a callable that removes the listener again; calling it more than
        once is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: OrderState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
