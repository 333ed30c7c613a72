import asyncio
import math
import random

from dotenv import load_dotenv

from gatekit.broker import BrokerClient
from gatekit.gates import HysteresisGate
from gatekit.nodes import GateNode
from gatekit.runners import GateServiceClient

load_dotenv()

# Send Levels - Streams fake microphone levels to a deployed gate node.
#
# Usage:
#     uv run python examples/real_broker/send_levels.py
#
# Prerequisites:
#     - Kafka broker running (set GATEKIT_BOOTSTRAP_SERVERS, default: localhost)
#     - Gate node deployed (gate_node.py)

SAMPLE_INTERVAL = 0.02


async def main():
    broker = BrokerClient()
    await broker.start()

    # Reference node for topic routing only, its gate is never used here.
    node = GateNode(HysteresisGate(None), input_topic="mic.levels")
    client = GateServiceClient(broker)

    try:
        for i in range(500):
            level = max(0.0, math.sin(i / 40) + random.uniform(-0.1, 0.1))
            await client.send(node, level)
            await asyncio.sleep(SAMPLE_INTERVAL)
    finally:
        await broker.stop()


if __name__ == "__main__":
    asyncio.run(main())
