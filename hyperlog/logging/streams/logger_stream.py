import datetime
import sys
import threading
from typing import (
    Callable,
    TextIO,
    TypeVar,
)

from hyperlog.logging.config.logging_config import LoggingConfig
from hyperlog.logging.config.stream_type import StreamType
from hyperlog.logging.models import Entry


T = TypeVar('T', bound=Entry)


DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"
ERROR_TEMPLATE = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"


class LoggerStream:
    """
    Synchronous log stream. Entries are filtered against the shared
    LoggingConfig and rendered straight to stdout or stderr, so it can
    be used from plain constructors.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template
        self._config = LoggingConfig()
        self._lock = threading.Lock()

    @property
    def name(self):
        return self._name

    def log(
        self,
        entry: T,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        self._log(
            entry,
            template=template,
            filter=filter,
        )

    def _log(
        self,
        entry: T,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        if template is None:
            template = self._default_template

        if template is None:
            template = DEFAULT_TEMPLATE

        log_file, line_number, function_name = self._find_caller()
        stream = self._get_stream(self._config.output)

        context = {
            "filename": log_file,
            "function_name": function_name,
            "line_number": line_number,
            "thread_id": threading.get_native_id(),
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
        }

        try:
            with self._lock:
                stream.write(
                    entry.to_template(
                        template,
                        context=context,
                    ) + "\n"
                )
                stream.flush()

        except (OSError, ValueError) as err:
            sys.__stderr__.write(
                entry.to_template(
                    ERROR_TEMPLATE,
                    context={
                        **context,
                        "error": str(err),
                    },
                ) + "\n"
            )

    def _get_stream(self, stream_type: StreamType) -> TextIO:
        if stream_type == StreamType.STDOUT:
            return sys.stdout

        return sys.stderr

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(3)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
