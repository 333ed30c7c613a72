from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class GateResult(Generic[T]):
    """Outcome of pushing one value through a gate.

    ``emit`` is False only when the gate is closed and has no closed value to
    offer; ``value`` is meaningless in that case.
    """

    emit: bool
    value: T | None = None
    substituted: bool = False

    @classmethod
    def passed(cls, value: T) -> "GateResult[T]":
        return cls(emit=True, value=value)

    @classmethod
    def closed(cls, value: T) -> "GateResult[T]":
        return cls(emit=True, value=value, substituted=True)

    @classmethod
    def nothing(cls) -> "GateResult[Any]":
        return cls(emit=False)


class StreamGate(ABC, Generic[T]):
    @abstractmethod
    def process(self, value: T) -> GateResult[T]: ...

    @property
    @abstractmethod
    def is_open(self) -> bool: ...
