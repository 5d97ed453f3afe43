"""In-memory cart for one ordering session."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable

from mappia.models import CartLine, InvalidArgument, MenuItem, check_item_id

logger = logging.getLogger(__name__)

CartListener = Callable[["Cart"], None]


def _item_key(item: MenuItem | None) -> int | str:
    """Return the cart key for ``item`` or raise InvalidArgument."""
    if item is None:
        raise InvalidArgument("Menu item is required")
    return check_item_id(getattr(item, "id", None))


def _as_menu_item(item: MenuItem | None) -> MenuItem:
    """Return ``item`` as a validated MenuItem, rebuilding duck-typed values."""
    if isinstance(item, MenuItem):
        return item
    key = _item_key(item)
    return MenuItem(
        id=key,
        name=str(getattr(item, "name", key)),
        unit_price=getattr(item, "unit_price", None),  # type: ignore[arg-type]
        image=getattr(item, "image", None),
    )


class Cart:
    """Mapping from menu item id to quantity, plus price queries.

    Lines keep the order in which their item was first added. A line is
    dropped as soon as its quantity reaches zero, so every stored quantity is
    at least 1. Totals are recomputed from the lines on every call.
    """

    def __init__(self) -> None:
        self._lines: dict[int | str, CartLine] = {}
        self._listeners: list[CartListener] = []

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"Cart(lines={len(self._lines)}, items={self.item_count()}, total={self.total_price()})"

    def add(self, item: MenuItem) -> None:
        """Add one unit of ``item``."""
        item = _as_menu_item(item)
        key = item.id
        line = self._lines.get(key)
        if line is None:
            self._lines[key] = CartLine(item=item, quantity=1)
        else:
            self._lines[key] = CartLine(item=line.item, quantity=line.quantity + 1)
        logger.debug("cart_add id=%r quantity=%d", key, self._lines[key].quantity)
        self._notify()

    def remove(self, item: MenuItem) -> None:
        """Remove one unit of ``item``. Removing an item not in the cart does nothing."""
        key = _item_key(item)
        line = self._lines.get(key)
        if line is None:
            return

        if line.quantity > 1:
            self._lines[key] = CartLine(item=line.item, quantity=line.quantity - 1)
            logger.debug("cart_remove id=%r quantity=%d", key, line.quantity - 1)
        else:
            del self._lines[key]
            logger.debug("cart_remove id=%r line_deleted", key)
        self._notify()

    def clear(self) -> None:
        """Drop every line."""
        had_lines = bool(self._lines)
        self._lines.clear()
        logger.debug("cart_clear")
        if had_lines:
            self._notify()

    def total_price(self) -> Decimal:
        return sum((line.subtotal for line in self._lines.values()), Decimal("0"))

    def snapshot(self) -> tuple[CartLine, ...]:
        """Current lines in first-added order."""
        return tuple(self._lines.values())

    def quantity_of(self, item: MenuItem) -> int:
        key = _item_key(item)
        line = self._lines.get(key)
        return line.quantity if line is not None else 0

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def is_empty(self) -> bool:
        return not self._lines

    def add_listener(self, listener: CartListener) -> None:
        """Call ``listener(cart)`` after every change to the cart."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: CartListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
