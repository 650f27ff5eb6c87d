from typing import Protocol, TypeVar

from hyperlog.logging.models import Entry


T = TypeVar('T', bound=Entry)


class LoggerProtocol(Protocol):

    def log(self, entry: T) -> None:
        ...
