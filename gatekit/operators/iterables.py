import math
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import TypeVar

import anyio
from anyio.abc import ObjectReceiveStream, ObjectSendStream, TaskGroup

from gatekit.gates.base import StreamGate

T = TypeVar("T")


def gate_values(gate: StreamGate[T], values: Iterable[T]) -> Iterator[T]:
    """Yield what ``gate`` emits for each of ``values``, in order.

    A threshold failure propagates out of the generator and ends it.
    """
    for value in values:
        result = gate.process(value)
        if result.emit:
            yield result.value  # type: ignore[misc]


async def agate_values(gate: StreamGate[T], values: AsyncIterable[T]) -> AsyncIterator[T]:
    """Async counterpart of :func:`gate_values`."""
    async for value in values:
        result = gate.process(value)
        if result.emit:
            yield result.value  # type: ignore[misc]


async def _forward(
    gate: StreamGate[T],
    receive: ObjectReceiveStream[T],
    send: ObjectSendStream[T],
) -> None:
    async with receive, send:
        async for value in receive:
            result = gate.process(value)
            if result.emit:
                await send.send(result.value)  # type: ignore[arg-type]


def gate_stream(
    task_group: TaskGroup,
    gate: StreamGate[T],
    receive: ObjectReceiveStream[T],
    max_buffer_size: float = math.inf,
) -> ObjectReceiveStream[T]:
    """Start forwarding ``receive`` through ``gate`` and return the gated stream.

    The forwarding task runs in ``task_group``. Closing the upstream send side
    closes the returned stream. A threshold failure is raised inside the task
    group, which cancels its other tasks.
    """
    send, gated = anyio.create_memory_object_stream[T](max_buffer_size=max_buffer_size)
    task_group.start_soon(_forward, gate, receive, send)
    return gated
