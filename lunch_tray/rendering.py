"""Rendering helpers for the app bar, menu options and checkout summary."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from rich.text import Text

from lunch_tray.config import CURRENCY_SYMBOL
from lunch_tray.models import MenuItem, OrderState

_CENTS = Decimal("0.01")


def format_price(amount: Decimal) -> str:
    """Format an amount as currency rounded half-up to cents, e.g. ``$7.56``."""
    return f"{CURRENCY_SYMBOL}{amount.quantize(_CENTS, rounding=ROUND_HALF_UP)}"


def format_app_bar(title: str, can_navigate_back: bool) -> Text:
    """Render the top bar title with a back arrow when there is somewhere to go."""
    text = Text()
    if can_navigate_back:
        text.append("← ", style="bold")
    text.append(title, style="bold")
    return text


def format_menu_options(
    options: Sequence[MenuItem],
    selected: MenuItem | None,
    cursor_index: int,
) -> Text:
    """Render a menu as a radio list with descriptions, prices and calories."""
    lines = Text()
    for idx, item in enumerate(options):
        if idx > 0:
            lines.append("\n\n")
        pointer = "➤ " if idx == cursor_index else "  "
        is_selected = item == selected
        radio = "(•)" if is_selected else "( )"
        lines.append(f"{pointer}{radio} ")
        lines.append(item.name, style="bold" if is_selected else "")
        lines.append(f"\n      {item.description}", style="dim")
        lines.append(f"\n      {format_price(item.price)}  ·  {item.calories} Cal", style="dim")
    return lines


def format_checkout_summary(state: OrderState) -> Text:
    """Render the order summary shown on the checkout screen."""
    text = Text()
    text.append("Order Summary", style="bold")

    items = state.selected_items()
    if not items:
        text.append("\n(no items selected)", style="dim")
    for item in items:
        text.append(f"\n{item.name}")
        text.append(f"  {format_price(item.price)}")

    text.append("\n" + "─" * 24, style="dim")
    text.append(f"\nSubtotal: {format_price(state.item_total)}")
    text.append(f"\nTax: {format_price(state.tax)}")
    text.append(f"\nTotal: {format_price(state.total)}", style="bold")
    return text
