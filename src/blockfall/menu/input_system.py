"""Mouse handling for the START / PAUSE buttons."""
from esper import World

from blockfall.components.game_state import GameMode
from blockfall.events.bus import (
    EVENT_GAME_COMMAND,
    EVENT_GAME_MODE_CHANGED,
    EVENT_MOUSE_PRESS,
    EVENT_START_REQUEST,
    EventBus,
)
from blockfall.menu.components import MenuAction, MenuButton
from blockfall.systems.game_loop_system import COMMAND_TOGGLE_PAUSE


class MenuSystem:
    """Activates buttons under the cursor and keeps their labels in step with the mode."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self._event_bus = event_bus
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self.on_mode_changed)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        self.handle_mouse_press(float(x), float(y), int(button))

    def handle_mouse_press(self, x: float, y: float, button: int) -> None:
        # Only the left button (arcade.MOUSE_BUTTON_LEFT == 1) activates.
        if button != 1:
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if not (menu_button.enabled and menu_button.visible):
                continue
            if self._point_inside_button(x, y, menu_button):
                self._activate_action(menu_button.action)
                return

    def on_mode_changed(self, sender, **payload) -> None:
        mode = payload.get("new_mode")
        if not isinstance(mode, GameMode):
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if menu_button.action == MenuAction.START:
                menu_button.visible = mode in (GameMode.NOT_STARTED, GameMode.GAME_OVER)
                if mode == GameMode.GAME_OVER:
                    menu_button.label = "PLAY AGAIN"
            elif menu_button.action == MenuAction.PAUSE:
                menu_button.visible = mode in (GameMode.RUNNING, GameMode.PAUSED)
                menu_button.label = "RESUME" if mode == GameMode.PAUSED else "PAUSE"

    def _activate_action(self, action: MenuAction) -> None:
        if action == MenuAction.START:
            self._event_bus.emit(EVENT_START_REQUEST)
        elif action == MenuAction.PAUSE:
            self._event_bus.emit(EVENT_GAME_COMMAND, command=COMMAND_TOGGLE_PAUSE)

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )
