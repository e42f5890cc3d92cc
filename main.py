#!/usr/bin/env python3
"""Replay a JSON-lines file of raw counter events through the decoder"""
import json
import sys
from pathlib import Path
from typing import Iterator, List, Optional
from pydantic import ValidationError
from config import Config
from counters import CounterEventProcessor, IncludeAllFilter, RawCounterEvent
from logging_config import setup_structured_logging, get_logger, log_startup, log_error


def load_events(path: Path) -> Iterator[RawCounterEvent]:
    """Yield raw events from a JSON-lines file, skipping malformed lines"""
    logger = get_logger(__name__)

    with open(path, 'r') as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                yield RawCounterEvent.model_validate_json(line)
            except ValidationError as e:
                logger.warning("Skipping malformed event line", path=str(path),
                               line=line_number, errors=e.error_count())


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point"""
    argv = sys.argv[1:] if argv is None else argv

    try:
        config = Config()
        setup_structured_logging(config)
        logger = get_logger(__name__)
        log_startup(logger, config)

        events_file = Path(argv[0]) if argv else config.events_file
        if events_file is None:
            logger.error("No events file given", event_type="startup_error")
            return 1

        processor = CounterEventProcessor(IncludeAllFilter(), config)
        for payload in processor.process(load_events(events_file)):
            sys.stdout.write(json.dumps(payload.to_dict()) + "\n")

    except Exception as e:
        logger = get_logger(__name__)
        log_error(logger, e, {"component": "main", "phase": "replay"})
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
