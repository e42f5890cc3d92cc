"""Counter event data models"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class CounterType(Enum):
    """Kind of value a counter reports"""
    METRIC = "Metric"
    RATE = "Rate"


class RawCounterEvent(BaseModel):
    """Event as delivered by the tracing session.

    ``payload`` is the untyped outer payload map. Counter events keep their
    fields in a nested map under the ``Payload`` key.
    """
    event_name: str
    provider_name: str
    timestamp: datetime
    payload: Dict[str, Any] = Field(default_factory=dict)


class CounterEventFields(BaseModel):
    """Typed view of the nested ``Payload`` map of a counter event"""
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    series: str = Field(alias="Series")
    name: str = Field(alias="Name")
    metadata: str = Field(alias="Metadata")
    interval_sec: float = Field(alias="IntervalSec")
    display_name: str = Field(alias="DisplayName")
    display_units: str = Field(alias="DisplayUnits")
    counter_type: str = Field(alias="CounterType")
    mean: Optional[float] = Field(default=None, alias="Mean")
    increment: Optional[float] = Field(default=None, alias="Increment")


@dataclass(frozen=True)
class CounterPayload:
    """Decoded counter sample handed to exporters"""
    timestamp: datetime
    provider: str
    name: str
    display_name: str
    unit: str
    value: float
    counter_type: CounterType
    interval: float
    metadata: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation"""
        return {
            "timestamp": self.timestamp.isoformat(),
            "provider": self.provider,
            "name": self.name,
            "display_name": self.display_name,
            "unit": self.unit,
            "value": self.value,
            "counter_type": self.counter_type.value,
            "interval": self.interval,
            "metadata": dict(self.metadata),
        }
