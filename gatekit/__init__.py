from importlib.metadata import version

from gatekit.broker import BrokerClient
from gatekit.clock import Clock, ManualClock, MonotonicClock, SystemClock
from gatekit.exceptions import GateTerminatedError
from gatekit.gates import GateResult, HysteresisGate, StreamGate
from gatekit.models import DEFAULT_GATE_CLOSE_TIME, DEFAULT_GATE_OPEN_TIME, GateConfig
from gatekit.nodes import BaseNode, GateNode, subscribe_to
from gatekit.operators import (
    GateOperator,
    GateSubscriber,
    Subscriber,
    agate_values,
    gate_stream,
    gate_values,
    lift,
)
from gatekit.runners import GateServiceClient, NodesService

__version__ = version("gatekit")
__all__ = [
    "__version__",
    # broker
    "BrokerClient",
    # clock
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "SystemClock",
    # errors
    "GateTerminatedError",
    # gates
    "GateResult",
    "HysteresisGate",
    "StreamGate",
    # models
    "DEFAULT_GATE_CLOSE_TIME",
    "DEFAULT_GATE_OPEN_TIME",
    "GateConfig",
    # nodes
    "BaseNode",
    "GateNode",
    "subscribe_to",
    # operators
    "GateOperator",
    "GateSubscriber",
    "Subscriber",
    "agate_values",
    "gate_stream",
    "gate_values",
    "lift",
    # runners
    "GateServiceClient",
    "NodesService",
]
