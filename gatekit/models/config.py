import os
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_GATE_OPEN_TIME = 500
"""Default milliseconds of continuous threshold passes needed to open a gate."""

DEFAULT_GATE_CLOSE_TIME = 500
"""Default milliseconds of continuous threshold failures needed to close a gate."""


class GateConfig(BaseModel):
    """Hold times of a hysteresis gate, in milliseconds.

    Assignments are validated, so the delays can be changed on a live gate
    without ever becoming negative. Serialization only includes delays that
    were set explicitly, so a dumped config stays an override on top of the
    defaults.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    env_prefix: ClassVar[str] = "GATEKIT_"

    time_before_open: int = Field(default=DEFAULT_GATE_OPEN_TIME, ge=0)
    """Continuous predicate-true time required before the gate opens."""

    time_before_close: int = Field(default=DEFAULT_GATE_CLOSE_TIME, ge=0)
    """Continuous predicate-false time required before the gate closes."""

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        kwargs.setdefault("exclude_unset", True)
        return super().model_dump(**kwargs)

    def model_dump_json(self, **kwargs: Any) -> str:
        kwargs.setdefault("exclude_unset", True)
        return super().model_dump_json(**kwargs)

    @classmethod
    def from_env(cls, prefix: str | None = None) -> "GateConfig":
        """Build a config from ``<prefix>TIME_BEFORE_OPEN`` and ``<prefix>TIME_BEFORE_CLOSE``.

        Unset variables fall back to the defaults.

        Raises:
            pydantic.ValidationError: If a variable is set to something that is
                not a non-negative integer.
        """
        prefix = cls.env_prefix if prefix is None else prefix
        values: dict[str, str] = {}
        for field_name in ("time_before_open", "time_before_close"):
            raw = os.getenv(f"{prefix}{field_name.upper()}")
            if raw:
                values[field_name] = raw
        return cls.model_validate(values)
