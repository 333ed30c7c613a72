"""Adapters wiring a gate into different stream styles.

- :class:`GateOperator` for push-based subscribers.
- :func:`gate_values` / :func:`agate_values` for (async) iterables.
- :func:`gate_stream` for anyio memory object streams.
"""

from gatekit.operators.iterables import agate_values, gate_stream, gate_values
from gatekit.operators.subscriber import GateOperator, GateSubscriber, Subscriber, lift

__all__ = [
    "GateOperator",
    "GateSubscriber",
    "Subscriber",
    "agate_values",
    "gate_stream",
    "gate_values",
    "lift",
]
