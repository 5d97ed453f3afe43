"""Rendering helpers for prices, menu rows and cart lines."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from mappia.config import CURRENCY_SYMBOL
from mappia.models import CartLine, Category, MenuItem, Slide

_CENTS = Decimal("0.01")

_CATEGORY_BADGE_STYLES: dict[str, str] = {
    "burger": "bold #ffffff on #b23a48",
    "fries": "bold #0b1f0f on #f2c14e",
    "pizza": "bold #ffffff on #d9643a",
    "sushi": "bold #ffffff on #2f6db5",
    "salad": "bold #0b1f0f on #5fbf72",
    "drinks": "bold #ffffff on #6b4fa0",
}


def format_price(amount: Decimal) -> str:
    """Format a money amount as ``$12.50``."""
    return f"{CURRENCY_SYMBOL}{amount.quantize(_CENTS, rounding=ROUND_HALF_UP)}"


def badge_style(category_id: str) -> str:
    """Return a consistent badge style for category tags."""
    return _CATEGORY_BADGE_STYLES.get(category_id, "bold #ffffff on #555555")


def category_badge(category: Category) -> Text:
    text = Text()
    text.append(f" {category.name[:1].upper()} ", style=badge_style(category.category_id))
    text.append(f" {category.name}")
    return text


def format_menu_row(item: MenuItem) -> Text:
    text = Text()
    text.append(item.name)
    text.append(f"  {format_price(item.unit_price)}", style="dim")
    return text


def format_cart_line(line: CartLine) -> Text:
    """Render ``Name  x2  $10.00`` for one cart line."""
    text = Text()
    text.append(line.item.name)
    text.append(f"  x{line.quantity}", style="bold")
    text.append(f"  {format_price(line.subtotal)}")
    return text


def format_total(total: Decimal) -> Text:
    text = Text()
    text.append("Total: ", style="bold")
    text.append(format_price(total), style="bold #5fbf72")
    return text


def format_dots(count: int, active: int) -> Text:
    """Render carousel page indicators."""
    text = Text()
    for idx in range(count):
        if idx > 0:
            text.append(" ")
        if idx == active:
            text.append("●", style="bold #2f6db5")
        else:
            text.append("●", style="dim")
    return text


def format_slide(slide: Slide, index: int, count: int) -> Text:
    text = Text()
    text.append(slide.title, style="bold")
    text.append(f"\n{slide.caption}\n")
    text.append_text(format_dots(count, index))
    return text


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Return the [start, end) slice of a list that keeps ``selected`` visible."""
    if total <= 0:
        return (0, 0)

    rows = max(1, rows)
    if total <= rows:
        return (0, total)

    if selected is None:
        start = 0
    else:
        half = rows // 2
        start = selected - half
        start = max(0, start)
        start = min(start, total - rows)

    return (start, start + rows)
