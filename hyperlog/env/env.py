from __future__ import annotations
from pydantic import BaseModel, StrictStr, StrictInt
from typing import Callable, Dict, Literal, Union

from hyperlog.logging.models import LogLevelName
from hyperlog.protocol import DEFAULT_VERSION

from .time_parser import TimeParser

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    HYPERLOG_BROKER_VERSION: StrictStr = str(DEFAULT_VERSION)

    # Retry backoff settings (KIP-580)
    HYPERLOG_RETRY_BACKOFF: StrictStr = "100ms"
    HYPERLOG_RETRY_MAX_BACKOFF: StrictStr = "1s"
    HYPERLOG_RETRY_MAX: StrictInt = 3

    # Logging settings
    HYPERLOG_LOG_LEVEL: LogLevelName = "info"
    HYPERLOG_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "HYPERLOG_BROKER_VERSION": str,
            "HYPERLOG_RETRY_BACKOFF": str,
            "HYPERLOG_RETRY_MAX_BACKOFF": str,
            "HYPERLOG_RETRY_MAX": int,
            "HYPERLOG_LOG_LEVEL": str,
            "HYPERLOG_LOG_OUTPUT": str,
        }

    def get_retry_config(self) -> dict:
        """
        Get retry backoff settings with durations converted to seconds.
        """
        parser = TimeParser()

        return {
            "base": parser.parse(self.HYPERLOG_RETRY_BACKOFF),
            "max_backoff": parser.parse(self.HYPERLOG_RETRY_MAX_BACKOFF),
            "max_retries": self.HYPERLOG_RETRY_MAX,
        }
