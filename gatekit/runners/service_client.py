from typing import Any

import uuid_utils

from gatekit.broker.broker import BrokerClient
from gatekit.nodes.base_node import BaseNode


class GateServiceClient:
    """Publishes values into deployed gate nodes."""

    def __init__(self, broker: BrokerClient):
        self._broker = broker

    async def send(
        self,
        node: BaseNode,
        value: Any,
        *,
        correlation_id: str | None = None,
    ) -> str:
        """Publish one value to the node's input topic.

        Returns:
            The correlation id the value was published with.
        """
        if node.subscribed_topic is None:
            raise RuntimeError(f"Node's subscribed topic can't be None: {node}")
        correlation_id = uuid_utils.uuid7().hex if correlation_id is None else correlation_id
        await self._broker.publish(
            value,
            topic=node.subscribed_topic,
            correlation_id=correlation_id,
        )
        return correlation_id

    async def send_many(
        self,
        node: BaseNode,
        values: list[Any],
        *,
        correlation_id: str | None = None,
    ) -> str:
        """Publish values in order under one correlation id."""
        correlation_id = uuid_utils.uuid7().hex if correlation_id is None else correlation_id
        for value in values:
            await self.send(node, value, correlation_id=correlation_id)
        return correlation_id
