"""Components used by the on-screen control buttons."""
from dataclasses import dataclass
from enum import Enum, auto


class MenuAction(Enum):
    """Actions that a menu button can trigger."""
    START = auto()
    PAUSE = auto()


@dataclass
class MenuButton:
    """Interactive button displayed beside the board."""
    label: str
    action: MenuAction
    x: float
    y: float
    width: float = 200.0
    height: float = 48.0
    enabled: bool = True
    visible: bool = True

