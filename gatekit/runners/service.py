from typing import Any

from gatekit.broker.broker import BrokerClient
from gatekit.nodes.base_node import BaseNode


class NodesService:
    def __init__(self, broker: BrokerClient):
        self._broker = broker

    def register_node(
        self,
        node: BaseNode,
        *,
        # gates are stateful, more than one worker would reorder values
        max_workers: int = 1,
        # group_id explicitly set as to avoid duplicated processing for separate deployments
        group_id: str = "default",
        extra_subscribe_kwargs: dict[str, Any] | None = None,
    ) -> None:
        extra_subscribe_kwargs = extra_subscribe_kwargs or {}
        for handler_fn, topics_dict in node.bound_registry.items():
            for sub_topic in topics_dict.get("subscribe_topics", []):
                subscriber = self._broker.subscriber(
                    sub_topic,
                    max_workers=max_workers,
                    group_id=group_id,
                    **extra_subscribe_kwargs,
                )
                handler_fn = subscriber(handler_fn)

    async def run(self) -> None:
        """Blocking function to run registered nodes as services."""
        await self._broker.run_app()
