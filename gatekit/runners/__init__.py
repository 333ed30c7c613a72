"""Runners for deploying gate nodes to a message broker."""

from gatekit.runners.service import NodesService
from gatekit.runners.service_client import GateServiceClient

__all__ = [
    "GateServiceClient",
    "NodesService",
]
