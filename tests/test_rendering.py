from decimal import Decimal

from lunch_tray.models import OrderState
from lunch_tray.rendering import format_app_bar, format_checkout_summary, format_menu_options, format_price


def test_format_price_rounds_half_up_to_cents():
    assert format_price(Decimal("7.56")) == "$7.56"
    assert format_price(Decimal("0")) == "$0.00"
    assert format_price(Decimal("0.125")) == "$0.13"


def test_app_bar_shows_back_arrow_only_when_possible():
    assert format_app_bar("Lunch Tray", False).plain == "Lunch Tray"
    assert format_app_bar("Choose Entree", True).plain == "← Choose Entree"


def test_menu_options_mark_selection_and_cursor(burrito, rice):
    plain = format_menu_options([burrito, rice], selected=rice, cursor_index=0).plain
    assert "➤ ( ) Burrito" in plain
    assert "  (•) Rice" in plain
    assert "$1.50  ·  200 Cal" in plain


def test_checkout_summary_scenario(burrito, rice, salsa):
    state = OrderState(entree=burrito, side_dish=rice, accompaniment=salsa, tax_rate=Decimal("0.08"))
    plain = format_checkout_summary(state).plain
    assert "Burrito  $5.00" in plain
    assert "Subtotal: $7.00" in plain
    assert "Tax: $0.56" in plain
    assert "Total: $7.56" in plain


def test_checkout_summary_empty_order():
    plain = format_checkout_summary(OrderState(tax_rate=Decimal("0.08"))).plain
    assert "(no items selected)" in plain
    assert "Subtotal: $0.00" in plain
    assert "Tax: $0.00" in plain
    assert "Total: $0.00" in plain
