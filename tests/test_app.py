from decimal import Decimal

import pytest

from lunch_tray.data import ACCOMPANIMENT_MENU_ITEMS, ENTREE_MENU_ITEMS, SIDE_DISH_MENU_ITEMS
from lunch_tray.models import WizardStep
from lunch_tray.order import OrderController
from lunch_tray.screens import CheckoutScreen, MenuScreen, StartOrderScreen
from lunch_tray.tray_app import LunchTrayApp


def _app():
    return LunchTrayApp(controller=OrderController(tax_rate=Decimal("0.08")))


@pytest.mark.asyncio
async def test_every_step_has_a_screen():
    app = _app()
    async with app.run_test():
        screens = {step: app.build_screen(step) for step in WizardStep}
    assert isinstance(screens[WizardStep.START], StartOrderScreen)
    assert isinstance(screens[WizardStep.CHECKOUT], CheckoutScreen)
    for step in (WizardStep.ENTREE, WizardStep.SIDE_DISH, WizardStep.ACCOMPANIMENT):
        assert isinstance(screens[step], MenuScreen)
        assert screens[step].step is step


@pytest.mark.asyncio
async def test_full_order_flow():
    app = _app()
    async with app.run_test() as pilot:
        assert isinstance(app.screen, StartOrderScreen)

        await pilot.press("enter")
        await pilot.pause()
        assert app.router.current_step is WizardStep.ENTREE
        assert isinstance(app.screen, MenuScreen)

        await pilot.press("down", "enter", "n")
        await pilot.pause()
        assert app.router.current_step is WizardStep.SIDE_DISH

        await pilot.press("enter", "n")
        await pilot.pause()
        await pilot.press("j", "j", "enter", "n")
        await pilot.pause()

        assert app.router.current_step is WizardStep.CHECKOUT
        assert isinstance(app.screen, CheckoutScreen)
        state = app.controller.current_state()
        assert state.entree == ENTREE_MENU_ITEMS[1]
        assert state.side_dish == SIDE_DISH_MENU_ITEMS[0]
        assert state.accompaniment == ACCOMPANIMENT_MENU_ITEMS[2]
        assert state.item_total == Decimal("7.00")
        assert app.sub_title == "Order Checkout"

        await pilot.press("n")
        await pilot.pause()
        assert app.router.back_stack.count(WizardStep.CHECKOUT) == 1


@pytest.mark.asyncio
async def test_cancel_resets_order_and_shows_start():
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()
        await pilot.press("enter", "n")
        await pilot.pause()
        assert app.controller.current_state().entree == ENTREE_MENU_ITEMS[0]

        await pilot.press("c")
        await pilot.pause()
        assert app.router.current_step is WizardStep.START
        assert isinstance(app.screen, StartOrderScreen)
        assert app.controller.current_state().is_empty


@pytest.mark.asyncio
async def test_escape_goes_back_and_keeps_selection():
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()
        await pilot.press("down", "enter", "n")
        await pilot.pause()

        await pilot.press("escape")
        await pilot.pause()
        assert app.router.current_step is WizardStep.ENTREE
        assert app.screen.selected == ENTREE_MENU_ITEMS[1]
        assert app.screen.cursor_index == 1
        assert app.controller.current_state().entree == ENTREE_MENU_ITEMS[1]


@pytest.mark.asyncio
async def test_checkout_unsubscribes_when_left():
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()
        for _ in range(3):
            await pilot.press("n")
            await pilot.pause()
        assert isinstance(app.screen, CheckoutScreen)
        assert len(app.controller._listeners) == 1

        await pilot.press("c")
        await pilot.pause()
        assert app.controller._listeners == []
