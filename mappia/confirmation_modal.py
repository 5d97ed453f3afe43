"""Order confirmation modal screen."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from mappia.constant import ORDER_CONFIRMATION_MESSAGE
from mappia.models import CartLine
from mappia.rendering import format_cart_line, format_total


class OrderConfirmationModal(ModalScreen[None]):
    """Thanks the user and shows the lines that were ordered."""

    BINDINGS = [
        ("escape", "return_home", "Return home"),
        ("enter", "return_home", "Return home"),
        ("q", "return_home", "Return home"),
    ]

    CSS = """
    OrderConfirmationModal {
        align: center middle;
        background: $background 60%;
    }

    #confirmation-dialog {
        width: 56;
        height: auto;
        border: round $success;
        background: $panel;
        padding: 1 2;
    }

    #confirmation-message {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #confirmation-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, lines: tuple[CartLine, ...], total: Decimal) -> None:
        super().__init__()
        self.lines = lines
        self.total = total

    def compose(self) -> ComposeResult:
        with Container(id="confirmation-dialog"):
            yield Static(ORDER_CONFIRMATION_MESSAGE, id="confirmation-message")
            yield Static(self._summary(), id="confirmation-summary")
            yield Static("Enter / Esc to return home", id="confirmation-help")

    def _summary(self) -> Text:
        text = Text()
        for line in self.lines:
            text.append_text(format_cart_line(line))
            text.append("\n")
        text.append_text(format_total(self.total))
        return text

    def action_return_home(self) -> None:
        self.dismiss(None)
