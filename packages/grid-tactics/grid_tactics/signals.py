"""Battle signals queued for the integration layer.

The battlefield announces what happened (ranges redrawn, units moved, hit
or defeated) through one of the helpers below. Nothing reaches a handler
until the owner calls ``flush``, usually once per rendered frame.
"""
from __future__ import annotations

import logging
from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from grid_tactics.types import Coord, Tile, Unit

logger = logging.getLogger(__name__)

RANGE_CHANGED = "range_changed"
UNIT_MOVED = "unit_moved"
UNIT_ATTACKED = "unit_attacked"
UNIT_DEFEATED = "unit_defeated"

Handler = Callable[[str, dict[str, Any]], None]


@dataclass(frozen=True)
class Signal:
    name: str
    data: dict[str, Any] = field(default_factory=dict)


class SignalBus:
    """Queue of battle signals with per-name handler lists."""

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[Handler]] = defaultdict(list)
        self._queue: deque[Signal] = deque()

    def subscribe(self, name: str, handler: Handler) -> None:
        self._handlers[name].append(handler)

    def unsubscribe(self, name: str, handler: Handler) -> None:
        """Drop ``handler``; unknown names and handlers are ignored."""
        handlers = self._handlers.get(name, [])
        if handler in handlers:
            handlers.remove(handler)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def publish(self, name: str, **data: Any) -> None:
        self._queue.append(Signal(name, data))

    # --- Battle signals ---

    def range_changed(self, origin: Coord, diff: dict[Coord, str | None]) -> None:
        self.publish(RANGE_CHANGED, origin=origin, diff=diff)

    def unit_moved(self, unit: Unit, path: list[Tile], cost: int) -> None:
        self.publish(UNIT_MOVED, unit=unit, path=path, cost=cost)

    def unit_attacked(self, attacker: Unit, target: Unit, damage: int) -> None:
        self.publish(UNIT_ATTACKED, attacker=attacker, target=target, damage=damage)

    def unit_defeated(self, unit: Unit, coord: Coord) -> None:
        self.publish(UNIT_DEFEATED, unit=unit, coord=coord)

    # --- Delivery ---

    def flush(self) -> int:
        """Deliver what was queued before this call; return how many signals.

        Signals published by handlers stay queued for the next flush.
        """
        count = len(self._queue)
        for _ in range(count):
            signal = self._queue.popleft()
            for handler in tuple(self._handlers.get(signal.name, ())):
                handler(signal.name, signal.data)
        if count:
            logger.debug("flushed %d signals", count)
        return count

    def clear(self) -> None:
        self._queue.clear()
