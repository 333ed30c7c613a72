import contextlib
from typing import Annotated, Any

import pytest
from faststream import Context
from faststream.kafka import TestKafkaBroker

from gatekit.broker import BrokerClient
from gatekit.clock import ManualClock
from gatekit.exceptions import GateTerminatedError
from gatekit.gates import HysteresisGate
from gatekit.nodes import GateNode
from gatekit.runners import GateServiceClient, NodesService


def deploy(node: GateNode) -> tuple[BrokerClient, list[tuple[Any, str]]]:
    """Register ``node`` on a fresh broker and collect what it publishes."""
    broker = BrokerClient()
    NodesService(broker).register_node(node)
    received: list[tuple[Any, str]] = []

    @broker.subscriber(node.output_topic)
    async def collect(
        value: Any,
        correlation_id: Annotated[str, Context("message.correlation_id")],
    ) -> None:
        received.append((value, correlation_id))

    return broker, received


def test_gate_node_default_topics():
    node = GateNode(HysteresisGate(lambda _: True))
    assert node.subscribed_topic == "gate.input"
    assert node.output_topic == "gate.output"
    assert node.terminated is False


def test_gate_node_topic_overrides():
    node = GateNode(
        HysteresisGate(lambda _: True),
        input_topic=["mic.levels", "mic.levels.backfill"],
        output_topic="mic.voice",
    )
    assert node.subscribed_topic == "mic.levels"
    assert node.output_topic == "mic.voice"
    [topics] = node.bound_registry.values()
    assert topics["subscribe_topics"] == ["mic.levels", "mic.levels.backfill"]
    # class-level registry is untouched
    assert GateNode(HysteresisGate(lambda _: True)).subscribed_topic == "gate.input"


@pytest.mark.asyncio
async def test_gate_node_publishes_only_emitted_values():
    node = GateNode(HysteresisGate(lambda v: v % 2 == 0, None, 0, 0, clock=ManualClock()))
    broker, received = deploy(node)

    async with TestKafkaBroker(broker) as br:
        for value in [2, 3, 4, 5, 6]:
            await br.publish(value, topic=node.subscribed_topic, correlation_id="levels-1")

    assert received == [(2, "levels-1"), (4, "levels-1"), (6, "levels-1")]


@pytest.mark.asyncio
async def test_gate_node_publishes_closed_value():
    clock = ManualClock()
    node = GateNode(HysteresisGate(lambda v: v == 2, lambda: 0, 150, 150, clock=clock))
    broker, received = deploy(node)

    async with TestKafkaBroker(broker) as br:
        for value in [1, 2, 2, 2, 2, 1, 1, 1]:
            clock.advance(100)
            await br.publish(value, topic=node.subscribed_topic, correlation_id="c")

    assert [value for value, _ in received] == [0, 0, 0, 2, 2, 1, 1, 0]


@pytest.mark.asyncio
async def test_gate_node_stops_after_threshold_failure():
    def threshold(value: int) -> bool:
        if value == 3:
            raise ValueError("Explicit error")
        return True

    node = GateNode(HysteresisGate(threshold, None, 0, 0, clock=ManualClock()))
    broker, received = deploy(node)

    async with TestKafkaBroker(broker) as br:
        await br.publish(2, topic=node.subscribed_topic, correlation_id="c")
        with contextlib.suppress(ValueError):
            await br.publish(3, topic=node.subscribed_topic, correlation_id="c")
        with contextlib.suppress(GateTerminatedError):
            await br.publish(4, topic=node.subscribed_topic, correlation_id="c")

    assert received == [(2, "c")]
    assert node.terminated is True
    assert isinstance(node.error, ValueError)
    assert str(node.error) == "Explicit error"


@pytest.mark.asyncio
async def test_service_client_sends_values_in_order():
    node = GateNode(HysteresisGate(lambda v: v > 10, None, 0, 0, clock=ManualClock()))
    broker, received = deploy(node)
    client = GateServiceClient(broker)

    async with TestKafkaBroker(broker):
        correlation_id = await client.send_many(node, [5, 11, 12, 9, 20])

    assert [value for value, _ in received] == [11, 12, 20]
    assert {cid for _, cid in received} == {correlation_id}


@pytest.mark.asyncio
async def test_gate_node_publishes_to_overridden_output_topic():
    node = GateNode(
        HysteresisGate(lambda v: v > 0, None, 0, 0, clock=ManualClock()),
        input_topic="mic.levels",
        output_topic="mic.voice",
    )
    broker, received = deploy(node)
    default_output: list[Any] = []

    @broker.subscriber("gate.output")
    async def collect_default(value: Any) -> None:
        default_output.append(value)

    async with TestKafkaBroker(broker) as br:
        for value in [0, 3, 0, 5]:
            await br.publish(value, topic="mic.levels", correlation_id="mic-1")

    assert received == [(3, "mic-1"), (5, "mic-1")]
    assert default_output == []
