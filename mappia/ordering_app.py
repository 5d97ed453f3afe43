"""Main Textual app class."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.timer import Timer
from textual.widgets import Header, Static

from mappia.cart import Cart
from mappia.config import SLIDER_INTERVAL_SECONDS
from mappia.confirmation_modal import OrderConfirmationModal
from mappia.data import CATEGORIES, ONBOARDING_PAGES, SLIDES
from mappia.models import Category, InvalidArgument, MenuItem, OnboardingPage, Slide
from mappia.onboarding_modal import OnboardingModal
from mappia.persistence import bootstrap_schema, is_onboarding_complete, mark_onboarding_complete
from mappia.rendering import category_badge, format_cart_line, format_menu_row, format_slide, format_total, window_bounds

logger = logging.getLogger(__name__)

PANES = ("categories", "menu", "cart")


class OrderingApp(App):
    """A Textual app for browsing the menu and ordering from a cart."""

    TITLE = "Mappia"
    SUB_TITLE = "Food ordering"

    CSS = """
    Screen {
        layout: vertical;
    }

    #slider {
        height: 5;
        border: round $accent;
        padding: 0 1;
        content-align: center middle;
        text-align: center;
    }

    #main-layout {
        height: 1fr;
    }

    #categories-pane {
        width: 1fr;
        border: round $secondary;
        padding: 0 1;
    }

    #menu-pane {
        width: 2fr;
        border: round $secondary;
        padding: 0 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $primary;
        padding: 0 1;
    }

    .active-pane {
        border: heavy $warning;
    }

    #categories-list, #menu-list, #cart-list {
        height: 1fr;
    }

    #status-bar {
        height: 2;
        padding: 0 1;
        color: $text-muted;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    active_pane = reactive("categories")
    category_index = reactive(0)
    menu_index = reactive(0)
    cart_index = reactive(0)
    slide_index = reactive(0)

    BINDINGS = [
        Binding("tab", "cycle_pane(1)", "Next pane", priority=True),
        Binding("shift+tab", "cycle_pane(-1)", "Previous pane", priority=True),
        ("up", "move_selection(-1)", "Up"),
        ("k", "move_selection(-1)", "Up"),
        ("down", "move_selection(1)", "Down"),
        ("j", "move_selection(1)", "Down"),
        ("enter", "activate", "Open / Add / Remove"),
        ("a", "add_selected", "Add to cart"),
        ("d", "remove_selected", "Remove from cart"),
        ("left_square_bracket", "page_slide(-1)", "Previous slide"),
        ("right_square_bracket", "page_slide(1)", "Next slide"),
        Binding("ctrl+s", "place_order", "Place order", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        cart: Cart | None = None,
        categories: list[Category] | None = None,
        slides: list[Slide] | None = None,
        onboarding_pages: list[OnboardingPage] | None = None,
    ) -> None:
        super().__init__()
        self.cart = cart if cart is not None else Cart()
        self.categories = categories if categories is not None else CATEGORIES
        self.slides = slides if slides is not None else SLIDES
        self.onboarding_pages = onboarding_pages if onboarding_pages is not None else ONBOARDING_PAGES
        self.system_status = ""
        self._slider_timer: Timer | None = None
        self.cart.add_listener(self._on_cart_changed)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="slider")
        with Horizontal(id="main-layout"):
            with Vertical(id="categories-pane"):
                yield Static("Categories", classes="pane-title")
                yield Static(id="categories-list")
            with Vertical(id="menu-pane"):
                yield Static(id="menu-title", classes="pane-title")
                yield Static(id="menu-list")
            with Vertical(id="cart-pane"):
                yield Static("Cart", classes="pane-title")
                yield Static(id="cart-list")
                yield Static(id="cart-total")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        bootstrap_schema()
        if self.slides:
            self._slider_timer = self.set_interval(SLIDER_INTERVAL_SECONDS, self._advance_slide)
        logger.info("app_mounted categories=%d slides=%d", len(self.categories), len(self.slides))
        self._refresh_all()

        if not is_onboarding_complete():
            self._open_modal(OnboardingModal(self.onboarding_pages), self._on_onboarding_closed)

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def _open_modal(self, modal: ModalScreen, callback) -> None:
        if self._slider_timer is not None:
            self._slider_timer.pause()
        self.push_screen(modal, callback=callback)

    def _resume_slider(self) -> None:
        if self._slider_timer is not None:
            self._slider_timer.reset()
            self._slider_timer.resume()

    def _on_onboarding_closed(self, completed: bool | None) -> None:
        if completed:
            mark_onboarding_complete()
        logger.info("onboarding_closed completed=%s", bool(completed))
        self._resume_slider()

    def _on_confirmation_closed(self, _result: None) -> None:
        self.active_pane = "categories"
        self._resume_slider()
        self._refresh_all()

    def _on_cart_changed(self, _cart: Cart) -> None:
        self._refresh_cart()

    def selected_category(self) -> Category | None:
        if not self.categories:
            return None
        return self.categories[min(self.category_index, len(self.categories) - 1)]

    def current_menu(self) -> list[MenuItem]:
        category = self.selected_category()
        if category is None:
            return []
        return list(category.items)

    def selected_menu_item(self) -> MenuItem | None:
        menu = self.current_menu()
        if not menu or not (0 <= self.menu_index < len(menu)):
            return None
        return menu[self.menu_index]

    def selected_cart_item(self) -> MenuItem | None:
        lines = self.cart.snapshot()
        if not lines or not (0 <= self.cart_index < len(lines)):
            return None
        return lines[self.cart_index].item

    def action_cycle_pane(self, delta: int) -> None:
        if self._modal_open():
            return
        idx = PANES.index(self.active_pane)
        self.active_pane = PANES[(idx + delta) % len(PANES)]
        self._refresh_all()

    def action_move_selection(self, delta: int) -> None:
        if self._modal_open():
            return

        if self.active_pane == "categories":
            if not self.categories:
                return
            self.category_index = (self.category_index + delta) % len(self.categories)
            self.menu_index = 0
            self._refresh_categories()
            self._refresh_menu()
            return

        if self.active_pane == "menu":
            menu = self.current_menu()
            if not menu:
                return
            self.menu_index = (self.menu_index + delta) % len(menu)
            self._refresh_menu()
            return

        lines = self.cart.snapshot()
        if not lines:
            return
        self.cart_index = (self.cart_index + delta) % len(lines)
        self._refresh_cart()

    def action_activate(self) -> None:
        if self._modal_open():
            return

        if self.active_pane == "categories":
            if self.selected_category() is None:
                return
            self.active_pane = "menu"
            self.menu_index = 0
            self._refresh_all()
            return

        if self.active_pane == "menu":
            self.action_add_selected()
            return

        self.action_remove_selected()

    def action_add_selected(self) -> None:
        if self._modal_open() or self.active_pane != "menu":
            return
        item = self.selected_menu_item()
        if item is None:
            return
        try:
            self.cart.add(item)
        except InvalidArgument as exc:
            self._set_status(f"Cannot add item: {exc}")
            return
        self._set_status(f"Added {item.name}")

    def action_remove_selected(self) -> None:
        if self._modal_open() or self.active_pane != "cart":
            return
        item = self.selected_cart_item()
        if item is None:
            return
        try:
            self.cart.remove(item)
        except InvalidArgument as exc:
            self._set_status(f"Cannot remove item: {exc}")
            return
        self._set_status(f"Removed {item.name}")

    def action_page_slide(self, delta: int) -> None:
        if self._modal_open() or not self.slides:
            return
        self.slide_index = (self.slide_index + delta) % len(self.slides)
        if self._slider_timer is not None:
            self._slider_timer.reset()
        self._refresh_slider()

    def _advance_slide(self) -> None:
        if not self.slides:
            return
        self.slide_index = (self.slide_index + 1) % len(self.slides)
        self._refresh_slider()

    def action_place_order(self) -> None:
        if self._modal_open():
            return
        if self.cart.is_empty():
            self._set_status("Cart is empty")
            return

        lines = self.cart.snapshot()
        total = self.cart.total_price()
        logger.info("order_placed lines=%d items=%d total=%s", len(lines), self.cart.item_count(), total)
        self.cart.clear()
        self.cart_index = 0
        self._set_status("Order placed")
        self._open_modal(OrderConfirmationModal(lines, total), self._on_confirmation_closed)

    def _set_status(self, message: str) -> None:
        self.system_status = message
        self._refresh_status()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _refresh_all(self) -> None:
        self._refresh_slider()
        self._refresh_categories()
        self._refresh_menu()
        self._refresh_cart()
        self._refresh_status()
        self._refresh_pane_highlight()

    def _refresh_pane_highlight(self) -> None:
        for pane in PANES:
            try:
                widget = self.query_one(f"#{pane}-pane")
            except NoMatches:
                return
            widget.set_class(pane == self.active_pane, "active-pane")

    def _render_list(self, widget: Static, rows: list[Text], selected: int | None, show_pointer: bool) -> None:
        start, end = window_bounds(len(rows), self._visible_rows(widget), selected)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if show_pointer and idx == selected else "  "
            lines.append(pointer)
            lines.append_text(rows[idx])

        if end < len(rows):
            lines.append("\n⋮", style="dim")

        widget.update(lines)

    def _refresh_slider(self) -> None:
        try:
            slider = self.query_one("#slider", Static)
        except NoMatches:
            return
        if not self.slides:
            slider.update("")
            return
        slider.update(format_slide(self.slides[self.slide_index], self.slide_index, len(self.slides)))

    def _refresh_categories(self) -> None:
        try:
            widget = self.query_one("#categories-list", Static)
        except NoMatches:
            return
        if not self.categories:
            widget.update("(no categories)")
            return
        rows = [category_badge(category) for category in self.categories]
        self._render_list(widget, rows, self.category_index, self.active_pane == "categories")

    def _refresh_menu(self) -> None:
        try:
            title = self.query_one("#menu-title", Static)
            widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return
        category = self.selected_category()
        title.update(category.name if category is not None else "Menu")

        menu = self.current_menu()
        if not menu:
            widget.update("(nothing on the menu)")
            return
        rows = [format_menu_row(item) for item in menu]
        self._render_list(widget, rows, self.menu_index, self.active_pane == "menu")

    def _refresh_cart(self) -> None:
        try:
            widget = self.query_one("#cart-list", Static)
            total_widget = self.query_one("#cart-total", Static)
        except NoMatches:
            return

        lines = self.cart.snapshot()
        total_widget.update(format_total(self.cart.total_price()))
        if not lines:
            self.cart_index = 0
            widget.update("(cart is empty)")
            return

        if self.cart_index >= len(lines):
            self.cart_index = len(lines) - 1

        rows = [format_cart_line(line) for line in lines]
        self._render_list(widget, rows, self.cart_index, self.active_pane == "cart")

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        bar.update(f"Tab switch pane. Enter open/add/remove. Ctrl+S place order.\n{status}")
