"""Errors raised while decoding counter events"""
from typing import List, Optional


class CounterDecodeError(ValueError):
    """Raw event does not have the shape of a counter event"""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields = fields or []
