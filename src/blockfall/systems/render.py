from esper import World

from blockfall.events.bus import EventBus
from blockfall.rendering.board_renderer import BoardRenderer
from blockfall.rendering.context import RenderContext, build_render_context
from blockfall.rendering.overlay_renderer import OverlayRenderer
from blockfall.rendering.panel_renderer import PanelRenderer


class RenderSystem:
    """Paints the current state; a read-only projection that never mutates the game."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._render_ctx: RenderContext | None = None
        self._board_renderer = BoardRenderer()
        self._panel_renderer = PanelRenderer()
        self._overlay_renderer = OverlayRenderer()

    @property
    def board_renderer(self) -> BoardRenderer:
        return self._board_renderer

    @property
    def panel_renderer(self) -> PanelRenderer:
        return self._panel_renderer

    @property
    def overlay_renderer(self) -> OverlayRenderer:
        return self._overlay_renderer

    @property
    def last_context(self) -> RenderContext | None:
        return self._render_ctx

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active window, skip draw calls but still build layout caches.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        self.draw(arcade, headless=headless)

    def draw(self, arcade, headless: bool = False) -> RenderContext:
        ctx = build_render_context(self.world, self.window.width, self.window.height)
        self._render_ctx = ctx
        self._board_renderer.render(arcade, ctx, headless=headless)
        self._panel_renderer.render(arcade, ctx, headless=headless)
        self._overlay_renderer.render(arcade, ctx, headless=headless)
        return ctx
