from gatekit.models.config import DEFAULT_GATE_CLOSE_TIME, DEFAULT_GATE_OPEN_TIME, GateConfig

__all__ = [
    "DEFAULT_GATE_CLOSE_TIME",
    "DEFAULT_GATE_OPEN_TIME",
    "GateConfig",
]
