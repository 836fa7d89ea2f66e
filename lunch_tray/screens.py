"""Wizard screens: start prompt, shared menu picker and checkout summary."""

from __future__ import annotations

from typing import Callable, Sequence

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from lunch_tray.models import MenuItem, OrderState, WizardStep
from lunch_tray.navigation import NavigationRouter
from lunch_tray.order import OrderController
from lunch_tray.rendering import format_app_bar, format_checkout_summary, format_menu_options

_SHARED_CSS = """
#app-bar {
    height: 1;
    padding: 0 1;
    background: $primary;
    color: $text;
}

#step-body {
    height: 1fr;
    border: round $secondary;
    padding: 1 2;
}

#step-help {
    height: auto;
    padding: 0 1;
    color: $text-muted;
}
"""


class WizardScreen(Screen[None]):
    """Base screen: app bar with the step title, body, key help line."""

    BINDINGS = [
        ("escape", "navigate_up", "Back"),
    ]

    CSS = _SHARED_CSS

    KEY_HELP = ""

    def __init__(self, router: NavigationRouter, step: WizardStep) -> None:
        super().__init__()
        self.router = router
        self.step = step

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="app-bar")
        with Vertical():
            yield Static(id="step-body")
            yield Static(self.KEY_HELP, id="step-help")

    def on_mount(self) -> None:
        self.query_one("#app-bar", Static).update(format_app_bar(self.step.title, self.router.can_navigate_back))
        self._refresh_content()

    def action_navigate_up(self) -> None:
        if not self.router.can_navigate_back:
            return
        self.router.back()

    def action_next(self) -> None:
        self.router.advance()

    def action_cancel(self) -> None:
        self.router.cancel()

    def _refresh_content(self) -> None:
        raise NotImplementedError


class StartOrderScreen(WizardScreen):
    """Landing screen with a single "Start Order" action."""

    BINDINGS = [
        ("enter", "next", "Start Order"),
    ]

    KEY_HELP = "Enter start order · Ctrl+Q quit"

    def __init__(self, router: NavigationRouter) -> None:
        super().__init__(router, WizardStep.START)

    def _refresh_content(self) -> None:
        self.query_one("#step-body", Static).update("Build your lunch tray\n\n[ Start Order ]")


class MenuScreen(WizardScreen):
    """Pick one item from a menu course. Shared by all three course steps."""

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous"),
        ("j", "move_cursor(1)", "Next item"),
        ("enter", "select_current", "Select"),
        ("space", "select_current", "Select"),
        ("n", "next", "Next"),
        ("c", "cancel", "Cancel"),
    ]

    KEY_HELP = "J/K/↑/↓ move · Enter select · N next · C cancel · Esc back"

    cursor_index = reactive(0)

    def __init__(
        self,
        router: NavigationRouter,
        step: WizardStep,
        options: Sequence[MenuItem],
        selected: MenuItem | None,
        on_selection_changed: Callable[[MenuItem], None],
    ) -> None:
        super().__init__(router, step)
        self.options = list(options)
        self.selected = selected
        self.on_selection_changed = on_selection_changed
        if selected is not None and selected in self.options:
            self.cursor_index = self.options.index(selected)

    def action_move_cursor(self, delta: int) -> None:
        if not self.options:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.options)
        self._refresh_content()

    def action_select_current(self) -> None:
        if not self.options:
            return
        item = self.options[self.cursor_index]
        self.selected = item
        self.on_selection_changed(item)
        self._refresh_content()

    def _refresh_content(self) -> None:
        body = self.query_one("#step-body", Static)
        if not self.options:
            body.update("No items available")
            return
        body.update(format_menu_options(self.options, self.selected, self.cursor_index))


class CheckoutScreen(WizardScreen):
    """Order summary with subtotal, tax and total."""

    BINDINGS = [
        ("n", "next", "Next"),
        ("c", "cancel", "Cancel"),
    ]

    KEY_HELP = "N next · C cancel · Esc back"

    def __init__(self, router: NavigationRouter, controller: OrderController) -> None:
        super().__init__(router, WizardStep.CHECKOUT)
        self.controller = controller
        self._unsubscribe: Callable[[], None] | None = None

    def on_mount(self) -> None:
        # Textual runs WizardScreen.on_mount after this one, which does the first render.
        self._unsubscribe = self.controller.subscribe(self._on_order_changed)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_order_changed(self, state: OrderState) -> None:
        self._render_state(state)

    def _refresh_content(self) -> None:
        self._render_state(self.controller.current_state())

    def _render_state(self, state: OrderState) -> None:
        self.query_one("#step-body", Static).update(format_checkout_summary(state))
