"""Decoding of runtime EventCounters events into typed counter payloads"""
from .decoder import COUNTER_EVENT_NAME, extract_counter_fields, try_get_counter_payload
from .errors import CounterDecodeError
from .filter import CounterFilter, IncludeAllFilter
from .interval import get_interval
from .metadata import parse_metadata
from .models import CounterEventFields, CounterPayload, CounterType, RawCounterEvent
from .processor import CounterEventProcessor, ProcessingStats

__all__ = [
    "COUNTER_EVENT_NAME",
    "CounterDecodeError",
    "CounterEventFields",
    "CounterEventProcessor",
    "CounterFilter",
    "CounterPayload",
    "CounterType",
    "IncludeAllFilter",
    "ProcessingStats",
    "RawCounterEvent",
    "extract_counter_fields",
    "get_interval",
    "parse_metadata",
    "try_get_counter_payload",
]
