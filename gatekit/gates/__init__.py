"""Stream gates.

A gate decides, value by value, whether a stream value passes through to the
consumer, is replaced with a closed value, or is dropped.

Example:
    from gatekit.gates import HysteresisGate

    gate = HysteresisGate(lambda level: level > 0.3, time_before_open=50, time_before_close=400)
    for level in levels:
        result = gate.process(level)
        if result.emit:
            print(result.value)
"""

from gatekit.gates.base import GateResult, StreamGate
from gatekit.gates.hysteresis import HysteresisGate

__all__ = [
    "GateResult",
    "HysteresisGate",
    "StreamGate",
]
