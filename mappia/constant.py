"""Editable static catalog, onboarding and carousel content."""

from __future__ import annotations

CATEGORY_META_BY_ID: dict[str, dict[str, str]] = {
    "burger": {"name": "Burger", "image": "ic_burger"},
    "fries": {"name": "Fries", "image": "ic_fries"},
    "pizza": {"name": "Pizza", "image": "ic_pizza"},
    "sushi": {"name": "Sushi", "image": "ic_sushi"},
    "salad": {"name": "Salad", "image": "ic_salad"},
    "drinks": {"name": "Drinks", "image": "ic_drinks"},
}

# Prices are kept as strings so they load into Decimal without float rounding.
MENU_ITEMS_BY_CATEGORY: dict[str, list[dict[str, str | int]]] = {
    "burger": [
        {"id": 1, "name": "Classic Burger", "price": "5.00", "image": "food_classic_burger"},
        {"id": 2, "name": "Cheese Burger", "price": "5.50", "image": "food_cheese_burger"},
        {"id": 3, "name": "Double Burger", "price": "7.25", "image": "food_double_burger"},
        {"id": 4, "name": "Chicken Burger", "price": "6.00", "image": "food_chicken_burger"},
    ],
    "fries": [
        {"id": 10, "name": "Fries", "price": "2.50", "image": "food_fries"},
        {"id": 11, "name": "Cheese Fries", "price": "3.25", "image": "food_cheese_fries"},
        {"id": 12, "name": "Sweet Potato Fries", "price": "3.50", "image": "food_sweet_fries"},
    ],
    "pizza": [
        {"id": 20, "name": "Margherita", "price": "8.00", "image": "food_margherita"},
        {"id": 21, "name": "Pepperoni", "price": "9.50", "image": "food_pepperoni"},
        {"id": 22, "name": "Four Cheese", "price": "10.00", "image": "food_four_cheese"},
    ],
    "sushi": [
        {"id": 30, "name": "Salmon Nigiri", "price": "4.20", "image": "food_salmon_nigiri"},
        {"id": 31, "name": "California Roll", "price": "6.80", "image": "food_california_roll"},
        {"id": 32, "name": "Tuna Maki", "price": "5.40", "image": "food_tuna_maki"},
    ],
    "salad": [
        {"id": 40, "name": "Caesar Salad", "price": "6.50", "image": "food_caesar"},
        {"id": 41, "name": "Greek Salad", "price": "6.00", "image": "food_greek"},
    ],
    "drinks": [
        {"id": 50, "name": "Cola", "price": "1.50", "image": "food_cola"},
        {"id": 51, "name": "Lemonade", "price": "2.00", "image": "food_lemonade"},
        {"id": 52, "name": "Water", "price": "1.00", "image": "food_water"},
        {"id": 53, "name": "Iced Tea", "price": "2.20", "image": "food_iced_tea"},
    ],
}

ONBOARDING_PAGES: list[dict[str, str]] = [
    {
        "title": "Welcome to Mappia!",
        "description": "Order your favorite meals from local restaurants with just a few taps.",
        "image": "ic_launcher_foreground",
    },
    {
        "title": "Fast Delivery",
        "description": "Get your food delivered quickly and track your order in real time.",
        "image": "ic_launcher_background",
    },
    {
        "title": "Easy Payment",
        "description": "Pay securely with multiple payment options. Enjoy your meal!",
        "image": "ic_launcher_foreground",
    },
]

SLIDES: list[dict[str, str]] = [
    {"title": "Burger Week", "caption": "Every burger comes with a side of fries."},
    {"title": "Fresh Sushi", "caption": "Rolled to order, every day."},
    {"title": "Pizza Night", "caption": "Four Cheese is back on the menu."},
]

ORDER_CONFIRMATION_MESSAGE = "Thank you for your order!\nYour food is on its way."
