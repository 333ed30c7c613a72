from collections.abc import Iterable
from typing import Any

from gatekit.clock import ManualClock
from gatekit.gates.base import GateResult, StreamGate


def feed_spaced(
    gate: StreamGate[Any],
    clock: ManualClock,
    values: Iterable[Any],
    spacing: int = 100,
) -> list[GateResult[Any]]:
    """Process values one by one, advancing the clock by ``spacing`` before each.

    Example:
        results = feed_spaced(gate, clock, [2, 2, 2], spacing=100)
    """
    results = []
    for value in values:
        clock.advance(spacing)
        results.append(gate.process(value))
    return results


def emitted(results: Iterable[GateResult[Any]]) -> list[Any]:
    return [r.value for r in results if r.emit]


class RecordingSubscriber:
    """Downstream subscriber that records everything it receives."""

    def __init__(self) -> None:
        self.values: list[Any] = []
        self.errors: list[BaseException] = []
        self.completed = 0
        self.unsubscribed = False

    @property
    def is_unsubscribed(self) -> bool:
        return self.unsubscribed

    def on_next(self, value: Any) -> None:
        self.values.append(value)

    def on_completed(self) -> None:
        self.completed += 1

    def on_error(self, error: BaseException) -> None:
        self.errors.append(error)

    def unsubscribe(self) -> None:
        self.unsubscribed = True
