import asyncio
import logging

from dotenv import load_dotenv

from gatekit.broker import BrokerClient
from gatekit.gates import HysteresisGate
from gatekit.models import GateConfig
from gatekit.nodes import GateNode
from gatekit.runners import NodesService

load_dotenv()

# Gate Node - Deploys a voice activity gate between two Kafka topics.
#
# Consumes microphone levels from `mic.levels` and publishes them to
# `mic.voice` while someone is speaking, or 0.0 while they are not.
#
# Usage:
#     uv run python examples/real_broker/gate_node.py
#
# Prerequisites:
#     - Kafka broker running (set GATEKIT_BOOTSTRAP_SERVERS, default: localhost)
#     - Optional GATEKIT_TIME_BEFORE_OPEN / GATEKIT_TIME_BEFORE_CLOSE in milliseconds

THRESHOLD = 0.3


async def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        datefmt="%H:%M:%S",
    )

    print("=" * 50)
    print("Gate Node Deployment")
    print("=" * 50)

    broker = BrokerClient()
    config = GateConfig.from_env()
    gate = HysteresisGate.from_config(lambda level: level > THRESHOLD, config, lambda: 0.0)

    node = GateNode(gate, input_topic="mic.levels", output_topic="mic.voice")
    service = NodesService(broker)
    service.register_node(node)
    print(f"  Subscribe topic: {node.subscribed_topic}")
    print(f"  Publish topic: {node.output_topic}")
    print(f"  Open after: {config.time_before_open}ms, close after: {config.time_before_close}ms")

    print("\nGate node ready. Waiting for levels...")
    await service.run()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nGate node stopped.")
