"""Per-event decoding of counter event streams"""
from dataclasses import dataclass
from typing import Iterable, List, Optional
from logging_config import get_logger, log_counter_processing
from .decoder import try_get_counter_payload
from .errors import CounterDecodeError
from .filter import CounterFilter
from .models import CounterPayload, RawCounterEvent

logger = get_logger(__name__)


@dataclass
class ProcessingStats:
    """Counts of events seen by a processor"""
    received: int = 0
    decoded: int = 0
    skipped: int = 0
    failed: int = 0

    def reset(self) -> None:
        self.received = 0
        self.decoded = 0
        self.skipped = 0
        self.failed = 0


class CounterEventProcessor:
    """Decodes a stream of raw events, isolating failures to single events"""

    def __init__(self, counter_filter: CounterFilter, config=None):
        self.counter_filter = counter_filter
        self.config = config
        self.stats = ProcessingStats()
        self.log_metadata = bool(getattr(config, 'enable_metadata_logging', False))

    def process_event(self, event: RawCounterEvent) -> Optional[CounterPayload]:
        """Decode one event, returning None when it is skipped or malformed"""
        self.stats.received += 1

        try:
            payload, accepted = try_get_counter_payload(event, self.counter_filter)
        except CounterDecodeError as e:
            self.stats.failed += 1
            logger.error(
                "Counter decode failed",
                provider=event.provider_name,
                event_name=event.event_name,
                error=str(e),
                fields=e.fields,
                event_type="counter_decode_error"
            )
            return None

        if not accepted:
            self.stats.skipped += 1
            return None

        self.stats.decoded += 1
        if self.log_metadata:
            logger.debug("Decoded counter", provider=payload.provider, counter=payload.name,
                         metadata=payload.metadata)
        return payload

    def process(self, events: Iterable[RawCounterEvent]) -> List[CounterPayload]:
        """Decode every event and return the accepted payloads in order"""
        before = ProcessingStats(**vars(self.stats))
        payloads = []

        for event in events:
            payload = self.process_event(event)
            if payload is not None:
                payloads.append(payload)

        log_counter_processing(
            logger,
            received=self.stats.received - before.received,
            decoded=self.stats.decoded - before.decoded,
            skipped=self.stats.skipped - before.skipped,
            failed=self.stats.failed - before.failed
        )
        return payloads
