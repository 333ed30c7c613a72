import logging
import math

from gatekit.clock import ManualClock
from gatekit.gates import HysteresisGate
from gatekit.operators import gate_values

# Replay Levels - Runs a synthetic microphone level trace through a gate offline.
#
# Each sample is 20ms apart. The gate opens once the level has stayed above the
# threshold for 60ms and keeps passing samples until it has stayed below for
# 200ms, so short pauses between words are not cut out.
#
# Usage:
#     uv run python examples/replay_levels.py

SAMPLE_INTERVAL_MS = 20
THRESHOLD = 0.3


def synthetic_levels() -> list[float]:
    speech = [0.5 + 0.3 * math.sin(i / 3) for i in range(30)]
    pause = [0.05] * 5
    silence = [0.02] * 20
    return [0.01] * 10 + speech + pause + speech + silence


def main():
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        datefmt="%H:%M:%S",
    )

    clock = ManualClock()
    gate = HysteresisGate(
        lambda level: level > THRESHOLD,
        lambda: 0.0,
        time_before_open=60,
        time_before_close=200,
        clock=clock,
    )

    def timed(levels: list[float]):
        for level in levels:
            clock.advance(SAMPLE_INTERVAL_MS)
            yield level

    levels = synthetic_levels()
    gated = list(gate_values(gate, timed(levels)))

    silenced = sum(1 for level, out in zip(levels, gated) if out == 0.0 and level != 0.0)
    print("=" * 50)
    print("Gate replay")
    print("=" * 50)
    print(f"  Samples in:  {len(levels)}")
    print(f"  Samples out: {len(gated)}")
    print(f"  Silenced:    {silenced}")
    print(f"  Gate open at end: {gate.is_open}")


if __name__ == "__main__":
    main()
