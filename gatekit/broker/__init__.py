from gatekit.broker.broker import BrokerClient
from gatekit.broker.middleware import CorrelationIdMiddleware

__all__ = ["BrokerClient", "CorrelationIdMiddleware"]
