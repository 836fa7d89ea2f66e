"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class MenuItem:
    """A selectable menu item."""

    name: str
    description: str
    price: Decimal
    calories: int = 0


@dataclass(frozen=True)
class OrderState:
    """Snapshot of the tray order being built.

    Totals are derived on every read from the currently set items, so they
    always match the fields. Unset items contribute nothing.
    """

    entree: MenuItem | None = None
    side_dish: MenuItem | None = None
    accompaniment: MenuItem | None = None
    tax_rate: Decimal = Decimal("0")

    def selected_items(self) -> list[MenuItem]:
        """Return the chosen items in wizard order."""
        return [item for item in (self.entree, self.side_dish, self.accompaniment) if item is not None]

    @property
    def item_total(self) -> Decimal:
        return sum((item.price for item in self.selected_items()), Decimal("0"))

    @property
    def tax(self) -> Decimal:
        return self.item_total * self.tax_rate

    @property
    def total(self) -> Decimal:
        return self.item_total + self.tax

    @property
    def is_empty(self) -> bool:
        return not self.selected_items()


class WizardStep(Enum):
    """Screens of the ordering wizard, in their only legal forward order."""

    START = "Lunch Tray"
    ENTREE = "Choose Entree"
    SIDE_DISH = "Choose Side Dish"
    ACCOMPANIMENT = "Choose Accompaniment"
    CHECKOUT = "Order Checkout"

    @property
    def title(self) -> str:
        return self.value
