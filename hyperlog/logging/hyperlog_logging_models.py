from .models import Entry, LogLevel


class RetryBackoffClamped(Entry, kw_only=True):
    base: float
    max_backoff: float
    level: LogLevel = LogLevel.WARN

class BrokerVersionFallback(Entry, kw_only=True):
    value: str
    fallback: str
    level: LogLevel = LogLevel.WARN
