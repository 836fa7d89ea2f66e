"""Main Textual app class."""

from __future__ import annotations

from typing import Callable

from textual.app import App

from lunch_tray.data import ACCOMPANIMENT_MENU_ITEMS, ENTREE_MENU_ITEMS, SIDE_DISH_MENU_ITEMS
from lunch_tray.debug_log import log_debug
from lunch_tray.models import WizardStep
from lunch_tray.navigation import NavigationRouter
from lunch_tray.order import OrderController
from lunch_tray.screens import CheckoutScreen, MenuScreen, StartOrderScreen, WizardScreen


class LunchTrayApp(App):
    """A Textual wizard that walks through entree, side dish and accompaniment."""

    TITLE = "Lunch Tray"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        controller: OrderController | None = None,
        router: NavigationRouter | None = None,
    ) -> None:
        super().__init__()
        self.controller = controller or OrderController()
        self.router = router or NavigationRouter(self.controller)
        self._screen_builders: dict[WizardStep, Callable[[], WizardScreen]] = {
            WizardStep.START: self._build_start_screen,
            WizardStep.ENTREE: self._build_entree_screen,
            WizardStep.SIDE_DISH: self._build_side_dish_screen,
            WizardStep.ACCOMPANIMENT: self._build_accompaniment_screen,
            WizardStep.CHECKOUT: self._build_checkout_screen,
        }
        log_debug("app_init")

    def on_mount(self) -> None:
        self.router.subscribe(self._on_step_changed)
        step = self.router.current_step
        self.sub_title = step.title
        self.push_screen(self.build_screen(step))
        log_debug(f"on_mount step={step.name}")

    def build_screen(self, step: WizardStep) -> WizardScreen:
        return self._screen_builders[step]()

    def _on_step_changed(self, step: WizardStep) -> None:
        log_debug(f"show_step step={step.name} back_stack={[s.name for s in self.router.back_stack]}")
        self.sub_title = step.title
        self.switch_screen(self.build_screen(step))

    def _build_start_screen(self) -> WizardScreen:
        return StartOrderScreen(self.router)

    def _build_entree_screen(self) -> WizardScreen:
        return MenuScreen(
            self.router,
            WizardStep.ENTREE,
            options=ENTREE_MENU_ITEMS,
            selected=self.controller.current_state().entree,
            on_selection_changed=self.controller.update_entree,
        )

    def _build_side_dish_screen(self) -> WizardScreen:
        return MenuScreen(
            self.router,
            WizardStep.SIDE_DISH,
            options=SIDE_DISH_MENU_ITEMS,
            selected=self.controller.current_state().side_dish,
            on_selection_changed=self.controller.update_side_dish,
        )

    def _build_accompaniment_screen(self) -> WizardScreen:
        return MenuScreen(
            self.router,
            WizardStep.ACCOMPANIMENT,
            options=ACCOMPANIMENT_MENU_ITEMS,
            selected=self.controller.current_state().accompaniment,
            on_selection_changed=self.controller.update_accompaniment,
        )

    def _build_checkout_screen(self) -> WizardScreen:
        return CheckoutScreen(self.router, self.controller)
