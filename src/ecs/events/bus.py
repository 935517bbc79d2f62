from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_MOUSE_RELEASE = "mouse_release"      # payload: x, y, button
EVENT_MOUSE_DRAG = "mouse_drag"            # payload: x, y, dx, dy


# ============================================================================
# PIECES & BOARD
# ============================================================================
EVENT_PIECE_GRAB = "piece_grab"                        # payload: x, y (cell)
EVENT_PIECE_GRABBED = "piece_grabbed"                  # payload: x, y, piece
EVENT_PIECE_DROP = "piece_drop"                        # payload: x, y (cell)
EVENT_PIECE_DROP_CANCELLED = "piece_drop_cancelled"    # payload: x, y, reason=str
EVENT_PIECE_MOVED = "piece_moved"                      # payload: movement=Movement
EVENT_PIECE_MERGED = "piece_merged"                    # payload: x, y, piece
EVENT_PIECE_DISPLACED = "piece_displaced"              # payload: movement=Movement
EVENT_PIECE_SPAWN = "piece_spawn"                      # payload: x, y, kind=str, level=int
EVENT_PIECE_SPAWNED = "piece_spawned"                  # payload: x, y, piece
EVENT_BOARD_CHANGED = "board_changed"                  # payload: reason=str, positions=list[(x,y)]
