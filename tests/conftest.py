"""Shared fixtures for counter decoding tests"""
from datetime import datetime, timezone
import pytest

from counters import RawCounterEvent


def make_event(event_name="EventCounters", provider_name="System.Runtime", **overrides):
    """Build a raw counter event with a well-formed Mean payload"""
    fields = {
        "Series": "Interval=1000",
        "Name": "cpu-usage",
        "Metadata": "",
        "IntervalSec": 1.0,
        "DisplayName": "CPU Usage",
        "DisplayUnits": "%",
        "CounterType": "Mean",
        "Mean": 42.5,
    }
    fields.update(overrides)
    fields = {k: v for k, v in fields.items() if v is not None}
    return RawCounterEvent(
        event_name=event_name,
        provider_name=provider_name,
        timestamp=datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc),
        payload={"Payload": fields},
    )


@pytest.fixture
def mean_event():
    return make_event()


@pytest.fixture
def sum_event():
    return make_event(
        Name="exception-count",
        DisplayName="Exception Count",
        DisplayUnits="",
        CounterType="Sum",
        Mean=None,
        Increment=7,
    )
