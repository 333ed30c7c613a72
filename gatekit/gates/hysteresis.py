import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from gatekit.clock import Clock, SystemClock
from gatekit.gates.base import GateResult, StreamGate
from gatekit.models.config import DEFAULT_GATE_CLOSE_TIME, DEFAULT_GATE_OPEN_TIME, GateConfig

T = TypeVar("T")

logger = logging.getLogger(__name__)


class HysteresisGate(StreamGate[T], Generic[T]):
    """Filter that lets values through only once a threshold has held for a while.

    The gate opens after ``threshold`` has passed continuously for
    ``time_before_open`` milliseconds, and closes after it has failed
    continuously for ``time_before_close`` milliseconds. Both hold times are
    measured from the last time the threshold result flipped, not from the
    last time the gate itself opened or closed. A threshold that toggles
    faster than either delay therefore leaves the gate where it is.

    A typical use is audio: let samples through once the amplitude has stayed
    above a level for a moment, and keep letting them through for a moment
    after it drops, to avoid chopping up short pauses.

    While closed the gate emits ``closed_value()`` if given, otherwise nothing.

    A gate instance belongs to one sequential processing path. ``process``
    must not be called concurrently or re-entrantly on the same instance.

    Example:
        gate = HysteresisGate(lambda sample: abs(sample) > 0.2, lambda: 0.0)
        result = gate.process(0.5)
        if result.emit:
            sink.write(result.value)
    """

    def __init__(
        self,
        threshold: Callable[[T], bool] | None,
        closed_value: Callable[[], T] | None = None,
        time_before_open: int = DEFAULT_GATE_OPEN_TIME,
        time_before_close: int = DEFAULT_GATE_CLOSE_TIME,
        *,
        clock: Clock | None = None,
    ) -> None:
        """Construct a new gate.

        Args:
            threshold: Called with every value to decide whether it passes.
                ``None`` is accepted here but makes every ``process`` call fail.
            closed_value: Supplies the value emitted for each input while the
                gate is closed. Omit to emit nothing while closed.
            time_before_open: Milliseconds the threshold has to pass before
                the gate opens.
            time_before_close: Milliseconds the threshold has to fail before
                the gate closes.
            clock: Time source, wall clock by default.
        """
        self._threshold = threshold
        self._closed_value = closed_value
        self._config = GateConfig(
            time_before_open=time_before_open, time_before_close=time_before_close
        )
        self._clock = clock or SystemClock()
        self._is_open = False
        self._should_open = False
        self._time_of_last_state_change = self._clock.now()
        self._processing = False

    @classmethod
    def from_config(
        cls,
        threshold: Callable[[T], bool] | None,
        config: GateConfig,
        closed_value: Callable[[], T] | None = None,
        *,
        clock: Clock | None = None,
    ) -> "HysteresisGate[T]":
        return cls(
            threshold,
            closed_value,
            config.time_before_open,
            config.time_before_close,
            clock=clock,
        )

    @property
    def config(self) -> GateConfig:
        return self._config

    @property
    def time_before_open(self) -> int:
        """Milliseconds the threshold has to pass in order for the gate to open."""
        return self._config.time_before_open

    @time_before_open.setter
    def time_before_open(self, millis: int) -> None:
        self._config.time_before_open = millis

    @property
    def time_before_close(self) -> int:
        """Milliseconds the threshold has to fail in order for the gate to close."""
        return self._config.time_before_close

    @time_before_close.setter
    def time_before_close(self, millis: int) -> None:
        self._config.time_before_close = millis

    @property
    def is_open(self) -> bool:
        """Whether values are currently being let through."""
        return self._is_open

    @property
    def should_open(self) -> bool:
        """Threshold result for the most recently processed value."""
        return self._should_open

    @property
    def time_of_last_state_change(self) -> int:
        """Clock reading at which the threshold result last flipped."""
        return self._time_of_last_state_change

    @property
    def has_closed_value(self) -> bool:
        return self._closed_value is not None

    def process(self, value: T) -> GateResult[T]:
        """Run one value through the gate.

        Raises:
            TypeError: If the gate was built without a threshold function.
            RuntimeError: If called re-entrantly on the same gate.
            Exception: Whatever the threshold function raises, unchanged. The
                gate state is left as it was before the call.
        """
        if self._processing:
            raise RuntimeError(f"{type(self).__name__}.process is not re-entrant")
        if self._threshold is None:
            raise TypeError("Gate has no threshold function to evaluate values with")

        self._processing = True
        try:
            passed = bool(self._threshold(value))
            now = self._clock.now()

            if passed != self._should_open:
                self._time_of_last_state_change = now
                self._should_open = passed

            held_for = now - self._time_of_last_state_change
            if self._should_open and not self._is_open and held_for >= self.time_before_open:
                self._is_open = True
                logger.debug("Gate opened after threshold passed for %dms", held_for)
            if not self._should_open and self._is_open and held_for >= self.time_before_close:
                self._is_open = False
                logger.debug("Gate closed after threshold failed for %dms", held_for)

            if self._is_open:
                return GateResult.passed(value)
            if self._closed_value is not None:
                return GateResult.closed(self._closed_value())
            return GateResult.nothing()
        finally:
            self._processing = False

    def __repr__(self) -> str:
        state = "open" if self._is_open else "closed"
        return (
            f"{type(self).__name__}({state}, time_before_open={self.time_before_open}, "
            f"time_before_close={self.time_before_close})"
        )
