"""Rendering system responsible for drawing the control buttons."""
from esper import World

from blockfall.menu.components import MenuButton

BUTTON_FILL = (10, 30, 60)
BUTTON_OUTLINE = (0, 255, 255)
BUTTON_TEXT = (255, 255, 255)


class MenuRenderSystem:
    """Renders visible menu buttons."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        import arcade

        self.draw(arcade)

    def visible_buttons(self) -> list[MenuButton]:
        return [button for _, button in self.world.get_component(MenuButton) if button.visible]

    def draw(self, arcade) -> None:
        for button in self.visible_buttons():
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            arcade.draw_lbwh_rectangle_filled(
                left,
                bottom,
                button.width,
                button.height,
                BUTTON_FILL,
            )
            arcade.draw_lbwh_rectangle_outline(
                left,
                bottom,
                button.width,
                button.height,
                BUTTON_OUTLINE,
                border_width=2,
            )
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                BUTTON_TEXT,
                16,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
