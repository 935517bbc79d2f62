"""Entry point for the merge board prototype.

Sets up ECS world, event bus, systems, and Arcade window.
"""
from arcade import Window, run, set_background_color, color
from loguru import logger

from ecs.world import create_world
from ecs.constants import GRID_COLS, GRID_ROWS, TILE_SIZE, BOTTOM_MARGIN
from ecs.events.bus import (
    EventBus, EVENT_MOUSE_PRESS, EVENT_MOUSE_RELEASE, EVENT_MOUSE_DRAG,
)
from ecs.systems.board import BoardSystem
from ecs.systems.input import InputSystem
from ecs.systems.render import RenderSystem


class MergeBoardWindow(Window):
    def __init__(self):
        super().__init__(GRID_COLS * TILE_SIZE + 80, GRID_ROWS * TILE_SIZE + BOTTOM_MARGIN * 3, "Merge Board")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()

        self.board_system = BoardSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(color.BLACK)
        logger.info("Merge board ready ({}x{})", GRID_COLS, GRID_ROWS)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_DRAG, x=x, y=y, dx=dx, dy=dy)


def main():
    MergeBoardWindow()
    run()

if __name__ == "__main__":
    main()
