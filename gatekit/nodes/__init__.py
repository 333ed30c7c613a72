from gatekit.nodes.base_node import BaseNode, subscribe_to
from gatekit.nodes.gate_node import GateNode

__all__ = [
    "BaseNode",
    "GateNode",
    "subscribe_to",
]
