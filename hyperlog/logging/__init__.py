from .config import (
    LoggingConfig as LoggingConfig,
    LogOutput as LogOutput,
    StreamType as StreamType,
)
from .hyperlog_logging_models import (
    BrokerVersionFallback as BrokerVersionFallback,
    RetryBackoffClamped as RetryBackoffClamped,
)
from .models import (
    Entry as Entry,
    LogLevel as LogLevel,
    LogLevelName as LogLevelName,
)
from .streams import (
    LoggerProtocol as LoggerProtocol,
    LoggerStream as LoggerStream,
)
