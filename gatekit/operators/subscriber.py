import logging
from collections.abc import Iterable
from typing import Generic, Protocol, TypeVar

from gatekit.gates.base import StreamGate

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

logger = logging.getLogger(__name__)


class Subscriber(Protocol[T_contra]):
    """Downstream end of a push-based stream."""

    @property
    def is_unsubscribed(self) -> bool: ...

    def on_next(self, value: T_contra) -> None: ...

    def on_completed(self) -> None: ...

    def on_error(self, error: BaseException) -> None: ...


class GateSubscriber(Generic[T]):
    """Upstream-facing subscriber that pushes every value through a gate.

    Delivery is suppressed once the downstream subscriber has unsubscribed.
    A threshold failure is delivered as ``on_error`` and ends the stream:
    values arriving after a completion or failure are ignored.
    """

    def __init__(self, gate: StreamGate[T], downstream: Subscriber[T]) -> None:
        self.gate = gate
        self.downstream = downstream
        self._terminated = False

    @property
    def terminated(self) -> bool:
        return self._terminated

    @property
    def is_unsubscribed(self) -> bool:
        return self._terminated or self.downstream.is_unsubscribed

    def on_next(self, value: T) -> None:
        if self.is_unsubscribed:
            return
        try:
            result = self.gate.process(value)
        except Exception as e:
            logger.exception("Gate threshold failed, terminating stream")
            self.on_error(e)
            return
        if result.emit:
            self.downstream.on_next(result.value)

    def on_completed(self) -> None:
        if self._terminated:
            return
        self._terminated = True
        if not self.downstream.is_unsubscribed:
            self.downstream.on_completed()

    def on_error(self, error: BaseException) -> None:
        if self._terminated:
            return
        self._terminated = True
        if not self.downstream.is_unsubscribed:
            self.downstream.on_error(error)


class GateOperator(Generic[T]):
    """Lifts a gate into a stream: call with a downstream subscriber to get the upstream one."""

    def __init__(self, gate: StreamGate[T]) -> None:
        self.gate = gate

    def __call__(self, downstream: Subscriber[T]) -> GateSubscriber[T]:
        return GateSubscriber(self.gate, downstream)


def lift(values: Iterable[T], gate: StreamGate[T], downstream: Subscriber[T]) -> GateSubscriber[T]:
    """Push an iterable through ``gate`` into ``downstream`` and terminate it.

    Errors raised while iterating ``values`` are treated as upstream failures
    and forwarded to ``downstream`` unchanged. Errors raised by
    ``downstream.on_next`` itself are not caught and propagate to the caller.
    """
    upstream = GateOperator(gate)(downstream)
    iterator = iter(values)
    while not upstream.is_unsubscribed:
        try:
            value = next(iterator)
        except StopIteration:
            break
        except Exception as e:
            upstream.on_error(e)
            return upstream
        upstream.on_next(value)
    upstream.on_completed()
    return upstream
