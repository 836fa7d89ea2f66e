"""Editable static menu configuration."""

from __future__ import annotations

# Canonical menu values consumed by lunch_tray.data (which wraps these into MenuItem dataclass instances).
# Prices are strings so they convert to Decimal without float drift.
MENU_ITEM_META_BY_ID: dict[str, dict[str, str | int]] = {
    "cauliflower": {
        "name": "Cauliflower",
        "description": "Whole cauliflower, brined, roasted, and deep fried",
        "price": "7.00",
        "calories": 300,
    },
    "three_bean_chili": {
        "name": "Three Bean Chili",
        "description": "Black, red, and pinto beans in a slow-cooked chili",
        "price": "4.00",
        "calories": 250,
    },
    "mushroom_pasta": {
        "name": "Mushroom Pasta",
        "description": "Penne pasta, mushrooms, basil, with cherry tomatoes cooked in garlic and olive oil",
        "price": "5.50",
        "calories": 450,
    },
    "spicy_black_bean_skillet": {
        "name": "Spicy Black Bean Skillet",
        "description": "Seasonal vegetables, black beans, house spice blend",
        "price": "5.50",
        "calories": 200,
    },
    "summer_salad": {
        "name": "Summer Salad",
        "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
        "price": "2.50",
        "calories": 50,
    },
    "butternut_squash_soup": {
        "name": "Butternut Squash Soup",
        "description": "Roasted butternut squash, roasted peppers, chili oil",
        "price": "3.00",
        "calories": 400,
    },
    "spicy_potatoes": {
        "name": "Spicy Potatoes",
        "description": "Marble potatoes, roasted, and fried in house spice blend",
        "price": "2.00",
        "calories": 250,
    },
    "coconut_rice": {
        "name": "Coconut Rice",
        "description": "Rice, coconut milk, lime, and sugar",
        "price": "1.50",
        "calories": 450,
    },
    "lunch_roll": {
        "name": "Lunch Roll",
        "description": "Fresh baked roll made in house",
        "price": "0.50",
        "calories": 100,
    },
    "mixed_berries": {
        "name": "Mixed Berries",
        "description": "Strawberries, blueberries, raspberries, and huckleberries",
        "price": "1.00",
        "calories": 50,
    },
    "pickled_veggies": {
        "name": "Pickled Veggies",
        "description": "Pickled cucumbers and carrots, made in house",
        "price": "0.50",
        "calories": 0,
    },
}

MENU_ITEM_IDS_BY_COURSE: dict[str, list[str]] = {
    "entree": [
        "cauliflower",
        "three_bean_chili",
        "mushroom_pasta",
        "spicy_black_bean_skillet",
    ],
    "side_dish": [
        "summer_salad",
        "butternut_squash_soup",
        "spicy_potatoes",
        "coconut_rice",
    ],
    "accompaniment": [
        "lunch_roll",
        "mixed_berries",
        "pickled_veggies",
    ],
}
