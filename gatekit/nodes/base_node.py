from abc import ABC
from collections.abc import Callable
from functools import cached_property
from typing import Any, TypedDict


def subscribe_to(topic_name: str) -> Callable[[Any], Any]:
    def decorator(fn: Any) -> Any:
        fn._subscribe_to_topic_name = topic_name
        return fn

    return decorator


class TopicsDict(TypedDict, total=False):
    """Describes the subscription wiring for a single handler method."""

    subscribe_topics: list[str]
    shared_subscribe_topic: str


class BaseNode(ABC):
    """A node defines the handlers that consume topics on a broker.
    When provided to a NodesService, node logic can be deployed."""

    _handler_registry: dict[Callable[..., Any], TopicsDict] = {}

    def __init__(
        self,
        name: str | None = None,
        *args: Any,
        input_topic: str | list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        self.name = name
        self.bound_registry: dict[Callable[..., Any], TopicsDict] = {
            fn.__get__(self, type(self)): topics_dict
            for fn, topics_dict in self._handler_registry.items()
        }
        if input_topic is not None:
            self._apply_input_topic_override(input_topic)

    def __init_subclass__(cls) -> None:
        super().__init_subclass__()

        cls._handler_registry = {}

        for attr in cls.__dict__.values():
            subscribe_to_topic_name = getattr(attr, "_subscribe_to_topic_name", None)
            if subscribe_to_topic_name:
                cls._handler_registry[attr] = {
                    "shared_subscribe_topic": subscribe_to_topic_name,
                    "subscribe_topics": [subscribe_to_topic_name],
                }

    def _apply_input_topic_override(self, input_topic: str | list[str]) -> None:
        input_topics = [input_topic] if isinstance(input_topic, str) else input_topic
        if not input_topics:
            raise ValueError("input_topic must name at least one topic")

        for handler, topics in list(self.bound_registry.items()):
            if "shared_subscribe_topic" not in topics:
                continue
            # Copy to avoid mutating the class-level _handler_registry dicts
            updated: TopicsDict = {**topics}
            old_shared = updated["shared_subscribe_topic"]
            updated["shared_subscribe_topic"] = input_topics[0]
            updated["subscribe_topics"] = [
                t for t in updated.get("subscribe_topics", []) if t != old_shared
            ] + input_topics
            self.bound_registry[handler] = updated

        self.__dict__["subscribed_topic"] = input_topics[0]

    @cached_property
    def subscribed_topic(self) -> str | None:
        for topics_dict in self._handler_registry.values():
            if "shared_subscribe_topic" in topics_dict:
                return topics_dict["shared_subscribe_topic"]
        return None
