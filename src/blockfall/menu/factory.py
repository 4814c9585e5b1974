"""Factory helpers for creating the control buttons."""
from esper import World

from blockfall.menu.components import MenuAction, MenuButton


def spawn_control_buttons(world: World, x: float, y: float, *, spacing: float = 60.0) -> None:
    """Create the START and PAUSE buttons stacked at (x, y); PAUSE starts hidden."""
    button_specs = (
        ("START", MenuAction.START, y, True),
        ("PAUSE", MenuAction.PAUSE, y - spacing, False),
    )

    for label, action, y_position, visible in button_specs:
        world.create_entity(
            MenuButton(
                label=label,
                action=action,
                x=x,
                y=y_position,
                visible=visible,
            )
        )

