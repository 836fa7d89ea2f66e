"""Static menu data."""

from __future__ import annotations

from decimal import Decimal

from lunch_tray.constant import MENU_ITEM_IDS_BY_COURSE, MENU_ITEM_META_BY_ID
from lunch_tray.models import MenuItem

MENU_ITEMS_BY_ID: dict[str, MenuItem] = {
    item_id: MenuItem(
        name=str(meta["name"]),
        description=str(meta["description"]),
        price=Decimal(str(meta["price"])),
        calories=int(meta["calories"]),
    )
    for item_id, meta in MENU_ITEM_META_BY_ID.items()
}


def _course(course: str) -> tuple[MenuItem, ...]:
    return tuple(MENU_ITEMS_BY_ID[item_id] for item_id in MENU_ITEM_IDS_BY_COURSE[course])


ENTREE_MENU_ITEMS: tuple[MenuItem, ...] = _course("entree")
SIDE_DISH_MENU_ITEMS: tuple[MenuItem, ...] = _course("side_dish")
ACCOMPANIMENT_MENU_ITEMS: tuple[MenuItem, ...] = _course("accompaniment")
