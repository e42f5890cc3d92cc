"""Parser for the compact counter metadata encoding"""
from typing import Dict
from logging_config import get_logger

logger = get_logger(__name__)


def parse_metadata(raw: str) -> Dict[str, str]:
    """Parse ``key1:value1,key2:value2`` into a dict.

    The format has no escaping, so a value containing a comma leaves a token
    without a colon behind. Any such token invalidates the whole string and an
    empty dict is returned instead of the keys parsed so far.
    """
    metadata: Dict[str, str] = {}
    if not raw:
        return metadata

    for token in raw.split(','):
        key, sep, value = token.partition(':')
        if not sep:
            logger.debug("Discarding corrupt counter metadata", metadata=raw, token=token)
            return {}
        metadata[key] = value

    return metadata
