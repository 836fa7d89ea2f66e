"""Wizard navigation: step back stack and the cancel/reset contract."""

from __future__ import annotations

from typing import Callable

from lunch_tray.debug_log import log_debug
from lunch_tray.models import WizardStep
from lunch_tray.order import OrderController

StepListener = Callable[[WizardStep], None]

# Every step has an entry; CHECKOUT loops back onto itself.
NEXT_STEP: dict[WizardStep, WizardStep] = {
    WizardStep.START: WizardStep.ENTREE,
    WizardStep.ENTREE: WizardStep.SIDE_DISH,
    WizardStep.SIDE_DISH: WizardStep.ACCOMPANIMENT,
    WizardStep.ACCOMPANIMENT: WizardStep.CHECKOUT,
    WizardStep.CHECKOUT: WizardStep.CHECKOUT,
}


class NavigationRouter:
    """Walks the linear wizard and keeps the order in step with it."""

    def __init__(self, controller: OrderController) -> None:
        self.controller = controller
        self._back_stack: list[WizardStep] = [WizardStep.START]
        self._listeners: list[StepListener] = []

    @property
    def current_step(self) -> WizardStep:
        return self._back_stack[-1]

    @property
    def can_navigate_back(self) -> bool:
        return len(self._back_stack) > 1

    @property
    def back_stack(self) -> tuple[WizardStep, ...]:
        return tuple(self._back_stack)

    def advance(self) -> WizardStep:
        """Move to the next step. At CHECKOUT this stays put."""
        current = self.current_step
        target = NEXT_STEP[current]
        if target is current:
            log_debug(f"advance_noop step={current.name}")
            return current

        self._back_stack.append(target)
        log_debug(f"advance from={current.name} to={target.name}")
        self._notify()
        return target

    def back(self) -> WizardStep:
        """Pop to the previous step, keeping the order as it is."""
        if not self.can_navigate_back:
            return self.current_step

        left = self._back_stack.pop()
        log_debug(f"back from={left.name} to={self.current_step.name}")
        self._notify()
        return self.current_step

    def cancel(self) -> WizardStep:
        """Reset the order and return to START as one action."""
        log_debug(f"cancel from={self.current_step.name}")
        self.controller.reset_order()
        del self._back_stack[1:]
        self._notify()
        return self.current_step

    def subscribe(self, listener: StepListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        step = self.current_step
        for listener in list(self._listeners):
            listener(step)
