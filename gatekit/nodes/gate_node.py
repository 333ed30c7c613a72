import logging
from typing import Annotated, Any

from faststream import Context
from faststream.kafka.annotations import (
    KafkaBroker as BrokerAnnotation,
)

from gatekit.exceptions import GateTerminatedError
from gatekit.gates.base import StreamGate
from gatekit.nodes.base_node import BaseNode, subscribe_to

logger = logging.getLogger(__name__)


class GateNode(BaseNode):
    """Deploys a gate between two broker topics.

    Every message consumed from the input topic goes through the gate, and
    whatever the gate emits is published to the output topic under the same
    correlation id. The node has to be registered with a single worker so
    values reach the gate in arrival order.

    A threshold failure is terminal: the node records the error, re-raises it
    to the broker, and rejects every later message with ``GateTerminatedError``.
    """

    _gate_sub_topic_name = "gate.input"
    _gate_pub_topic_name = "gate.output"

    def __init__(
        self,
        gate: StreamGate[Any],
        *,
        name: str | None = None,
        input_topic: str | list[str] | None = None,
        output_topic: str | None = None,
        **kwargs: Any,
    ):
        self.gate = gate
        self.output_topic = output_topic or self._gate_pub_topic_name
        self.error: Exception | None = None
        super().__init__(name=name, input_topic=input_topic, **kwargs)

    @property
    def terminated(self) -> bool:
        return self.error is not None

    @subscribe_to(_gate_sub_topic_name)
    async def _on_value(
        self,
        value: Any,
        correlation_id: Annotated[str, Context()],
        broker: BrokerAnnotation,
    ) -> None:
        if self.error is not None:
            logger.warning(
                "Gate node %s already failed, dropping message correlation_id=%s",
                self.name or self.subscribed_topic,
                correlation_id,
            )
            raise GateTerminatedError("Gate node stopped after a threshold failure") from self.error

        try:
            result = self.gate.process(value)
        except Exception as e:
            logger.exception("Gate threshold failed on message correlation_id=%s", correlation_id)
            self.error = e
            raise

        if result.emit:
            await broker.publish(
                result.value,
                topic=self.output_topic,
                correlation_id=correlation_id,
            )
