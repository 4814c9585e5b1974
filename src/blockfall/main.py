"""Entry point for Blockfall, a falling-block puzzle game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color

from blockfall.constants import SIDE_GAP, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from blockfall.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from blockfall.menu.factory import spawn_control_buttons
from blockfall.menu.input_system import MenuSystem
from blockfall.menu.render_system import MenuRenderSystem
from blockfall.systems.game_loop_system import GameLoopSystem
from blockfall.systems.high_score_system import HighScoreSystem
from blockfall.systems.input_system import KeyboardInputSystem, key_name_for_symbol
from blockfall.systems.render import RenderSystem
from blockfall.ui.layout import compute_board_geometry
from blockfall.world import create_world, get_board

logger = logging.getLogger(__name__)


class BlockfallWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Persistence
        self.high_score_system = HighScoreSystem(self.world, self.event_bus)

        # Gameplay
        self.game_loop_system = GameLoopSystem(self.world, self.event_bus)

        # Input
        self.input_system = KeyboardInputSystem(self.world, self.event_bus)
        self.menu_system = MenuSystem(self.world, self.event_bus)
        self._spawn_buttons()

        # Rendering
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.menu_render_system = MenuRenderSystem(self.world, self)

        set_background_color(color.BLACK)

    def _spawn_buttons(self):
        board = get_board(self.world)
        cell_size, board_left, board_bottom = compute_board_geometry(
            self.width, self.height, rows=board.rows, cols=board.cols
        )
        panel_left = board_left + cell_size * board.cols + SIDE_GAP
        button_x = panel_left + (self.width - panel_left) / 2
        spawn_control_buttons(self.world, button_x, board_bottom + 90)

    def on_draw(self):
        self.clear()
        self.render_system.process()
        self.menu_render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        key = key_name_for_symbol(symbol)
        if key is None:
            return
        self.event_bus.emit(EVENT_KEY_PRESS, key=key)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    BlockfallWindow()
    logger.info("Window ready; press Enter or click START to play")
    run()

if __name__ == "__main__":
    main()
