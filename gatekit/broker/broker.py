import os
from collections.abc import Iterable
from typing import Any

from faststream import FastStream
from faststream.kafka import KafkaBroker

from gatekit.broker.middleware import CorrelationIdMiddleware

BOOTSTRAP_SERVERS_ENV = "GATEKIT_BOOTSTRAP_SERVERS"


class BrokerClient(KafkaBroker):
    """Kafka broker that gate nodes are deployed on.

    Falls back to ``$GATEKIT_BOOTSTRAP_SERVERS``, then ``localhost``, when no
    bootstrap servers are given.
    """

    def __init__(self, bootstrap_servers: str | Iterable[str] | None = None, **broker_kwargs: Any):
        if not bootstrap_servers:
            bootstrap_servers = os.getenv(BOOTSTRAP_SERVERS_ENV)
        middlewares = (CorrelationIdMiddleware, *broker_kwargs.pop("middlewares", ()))
        super().__init__(
            bootstrap_servers or "localhost",
            middlewares=middlewares,
            **broker_kwargs,
        )

    @property
    def app(self) -> FastStream:
        return FastStream(self)

    async def run_app(self) -> None:
        await self.app.run()
