from esper import World

from ecs.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_PIECE_GRAB,
    EVENT_PIECE_DROP,
    EVENT_PIECE_DROP_CANCELLED,
)
from ecs.systems.board_ops import get_board
from ecs.ui.layout import cell_from_point, compute_board_geometry

LEFT_BUTTON = 1


class InputSystem:
    """Translates pointer positions into grab/drop requests on board cells."""

    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)

    def _cell_at(self, x: float, y: float):
        board = get_board(self.world)
        geometry = compute_board_geometry(self.window.width, self.window.height, board.width, board.height)
        return cell_from_point(x, y, geometry, board.width, board.height)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None or kwargs.get('button') != LEFT_BUTTON:
            return
        cell = self._cell_at(x, y)
        if cell is None:
            return
        self.event_bus.emit(EVENT_PIECE_GRAB, x=cell[0], y=cell[1])

    def on_mouse_release(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None or kwargs.get('button') != LEFT_BUTTON:
            return
        cell = self._cell_at(x, y)
        if cell is None:
            # Pixel position is reported since there is no cell to name.
            self.event_bus.emit(EVENT_PIECE_DROP_CANCELLED, x=x, y=y, reason='outside_board')
            return
        self.event_bus.emit(EVENT_PIECE_DROP, x=cell[0], y=cell[1])
