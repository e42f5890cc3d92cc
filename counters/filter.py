"""Counter filter interface consumed by the decoder"""
import abc


class CounterFilter(abc.ABC):
    """Decides whether a counter sample is wanted by any active subscription"""

    @abc.abstractmethod
    def is_included(self, provider_name: str, counter_name: str, interval: int) -> bool:
        """Return True when the (provider, counter, interval) tuple is subscribed"""
        pass


class IncludeAllFilter(CounterFilter):
    """Filter that accepts every counter"""

    def is_included(self, provider_name: str, counter_name: str, interval: int) -> bool:
        return True
