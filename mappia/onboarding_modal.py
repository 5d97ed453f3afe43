"""Onboarding modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from mappia.models import OnboardingPage
from mappia.rendering import format_dots


class OnboardingModal(ModalScreen[bool]):
    """Pages through the onboarding content.

    Dismisses with ``True`` when the user skips or finishes, and ``False``
    when closed with Escape, which leaves onboarding incomplete.
    """

    BINDINGS = [
        ("right", "next_page", "Next"),
        ("n", "next_page", "Next"),
        ("left", "previous_page", "Previous"),
        ("p", "previous_page", "Previous"),
        ("enter", "confirm", "Next / Get started"),
        ("s", "skip", "Skip"),
        ("escape", "close", "Close"),
    ]

    CSS = """
    OnboardingModal {
        align: center middle;
        background: $background 60%;
    }

    #onboarding-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #onboarding-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #onboarding-body {
        margin-bottom: 1;
        color: white;
    }

    #onboarding-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    page_index = reactive(0)

    def __init__(self, pages: list[OnboardingPage]) -> None:
        super().__init__()
        if not pages:
            raise ValueError("Onboarding needs at least one page")
        self.pages = pages

    def compose(self) -> ComposeResult:
        with Container(id="onboarding-dialog"):
            yield Static(id="onboarding-title")
            yield Static(id="onboarding-body")
            yield Static(id="onboarding-dots")
            yield Static(id="onboarding-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def is_last_page(self) -> bool:
        return self.page_index == len(self.pages) - 1

    def action_next_page(self) -> None:
        if self.page_index < len(self.pages) - 1:
            self.page_index += 1
            self._refresh_content()

    def action_previous_page(self) -> None:
        if self.page_index > 0:
            self.page_index -= 1
            self._refresh_content()

    def action_confirm(self) -> None:
        if self.is_last_page():
            self.dismiss(True)
            return
        self.action_next_page()

    def action_skip(self) -> None:
        self.dismiss(True)

    def action_close(self) -> None:
        self.dismiss(False)

    def _refresh_content(self) -> None:
        page = self.pages[self.page_index]
        self.query_one("#onboarding-title", Static).update(page.title)
        self.query_one("#onboarding-body", Static).update(page.description)
        self.query_one("#onboarding-dots", Static).update(format_dots(len(self.pages), self.page_index))

        help_text = Text()
        if self.is_last_page():
            help_text.append("Enter: Get started", style="bold")
        else:
            help_text.append("Enter / n: Next")
        help_text.append("   p: Back   s: Skip   Esc: Later")
        self.query_one("#onboarding-help", Static).update(help_text)
