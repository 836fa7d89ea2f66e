from decimal import Decimal

import pytest

from lunch_tray.models import MenuItem
from lunch_tray.navigation import NavigationRouter
from lunch_tray.order import OrderController


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setenv("LUNCH_TRAY_DEBUG_LOG", str(path))
    monkeypatch.delenv("LUNCH_TRAY_TAX_RATE", raising=False)
    return path


@pytest.fixture
def burrito():
    return MenuItem("Burrito", "Beans and rice in a flour tortilla", Decimal("5.00"), 600)


@pytest.fixture
def rice():
    return MenuItem("Rice", "Steamed white rice", Decimal("1.50"), 200)


@pytest.fixture
def salsa():
    return MenuItem("Salsa", "Fresh tomato salsa", Decimal("0.50"), 20)


@pytest.fixture
def controller():
    return OrderController(tax_rate=Decimal("0.08"))


@pytest.fixture
def router(controller):
    return NavigationRouter(controller)
