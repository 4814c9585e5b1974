from esper import World

from blockfall.components.game_state import GameMode
from blockfall.events.bus import (
    EventBus,
    EVENT_GAME_COMMAND,
    EVENT_KEY_PRESS,
    EVENT_START_REQUEST,
)
from blockfall.systems.game_loop_system import (
    COMMAND_HARD_DROP,
    COMMAND_MOVE_DOWN,
    COMMAND_MOVE_LEFT,
    COMMAND_MOVE_RIGHT,
    COMMAND_ROTATE,
    COMMAND_TOGGLE_PAUSE,
)
from blockfall.utils.game_state import current_mode

KEY_COMMANDS = {
    "left": COMMAND_MOVE_LEFT,
    "right": COMMAND_MOVE_RIGHT,
    "down": COMMAND_MOVE_DOWN,
    "up": COMMAND_ROTATE,
    "space": COMMAND_HARD_DROP,
    "p": COMMAND_TOGGLE_PAUSE,
}


def key_name_for_symbol(symbol: int) -> str | None:
    """Translate an arcade key symbol to the key names understood by the input system."""
    # Local import keeps tests headless.
    from arcade import key

    names = {
        key.LEFT: "left",
        key.RIGHT: "right",
        key.DOWN: "down",
        key.UP: "up",
        key.SPACE: "space",
        key.P: "p",
        key.ENTER: "enter",
        key.RETURN: "enter",
    }
    return names.get(symbol)


class KeyboardInputSystem:
    """Maps discrete key presses onto game commands; every other key is ignored."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        key = kwargs.get('key')
        if not isinstance(key, str):
            return
        key = key.lower()
        mode = current_mode(self.world)
        if key == "enter":
            if mode in (GameMode.NOT_STARTED, GameMode.GAME_OVER):
                self.event_bus.emit(EVENT_START_REQUEST)
            return
        if mode not in (GameMode.RUNNING, GameMode.PAUSED):
            return
        command = KEY_COMMANDS.get(key)
        if command is None:
            return
        self.event_bus.emit(EVENT_GAME_COMMAND, command=command)
