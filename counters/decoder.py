"""Decoding of raw EventCounters events into CounterPayload records"""
from collections.abc import Mapping
from typing import Optional, Tuple
from pydantic import ValidationError
from .errors import CounterDecodeError
from .filter import CounterFilter
from .interval import get_interval
from .metadata import parse_metadata
from .models import CounterEventFields, CounterPayload, CounterType, RawCounterEvent

COUNTER_EVENT_NAME = "EventCounters"
DEFAULT_RATE_UNIT = "count"


def extract_counter_fields(event: RawCounterEvent) -> CounterEventFields:
    """Validate the nested payload map of a counter event.

    Raises CounterDecodeError when a field is missing or has the wrong type.
    """
    payload = event.payload
    if not isinstance(payload, Mapping) or "Payload" not in payload:
        raise CounterDecodeError("Counter event has no Payload map", fields=["Payload"])

    payload_fields = payload["Payload"]
    if not isinstance(payload_fields, Mapping):
        raise CounterDecodeError(
            f"Counter event Payload is {type(payload_fields).__name__}, expected a map",
            fields=["Payload"]
        )

    try:
        return CounterEventFields.model_validate(dict(payload_fields))
    except ValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise CounterDecodeError(
            f"Malformed counter payload fields: {', '.join(fields)}",
            fields=fields
        ) from e


def try_get_counter_payload(event: RawCounterEvent,
                            counter_filter: CounterFilter) -> Tuple[Optional[CounterPayload], bool]:
    """Decode a counter event the filter subscribes to.

    Returns ``(payload, True)`` for an included counter event and
    ``(None, False)`` for any other event or a filtered-out counter.
    """
    if event.event_name != COUNTER_EVENT_NAME:
        return None, False

    fields = extract_counter_fields(event)

    # Concurrent sessions share one Series per provider, so samples for
    # other intervals are dropped here.
    if not counter_filter.is_included(event.provider_name, fields.name, get_interval(fields.series)):
        return None, False

    display_units = fields.display_units
    counter_type = CounterType.METRIC
    value = 0.0

    if fields.counter_type == "Mean":
        if fields.mean is None:
            raise CounterDecodeError("Mean counter has no Mean value", fields=["Mean"])
        value = fields.mean
    elif fields.counter_type == "Sum":
        if fields.increment is None:
            raise CounterDecodeError("Sum counter has no Increment value", fields=["Increment"])
        counter_type = CounterType.RATE
        value = fields.increment
        if not display_units:
            display_units = DEFAULT_RATE_UNIT

    payload = CounterPayload(
        timestamp=event.timestamp,
        provider=event.provider_name,
        name=fields.name,
        display_name=fields.display_name,
        unit=display_units,
        value=value,
        counter_type=counter_type,
        interval=fields.interval_sec,
        metadata=parse_metadata(fields.metadata),
    )
    return payload, True
