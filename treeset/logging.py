from datetime import datetime, timezone
import inspect
import json
import logging
import logging.handlers
import pathlib
import sys
import traceback
from typing import Callable, Dict, List, Optional


class TreeSetLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax.

    The calling frame is only inspected when the logger is enabled for the
    level, so disabled debug calls stay cheap inside set operations."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            caller = inspect.stack(0)[1]
            _log(self._logger.debug, format_string, caller, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.INFO):
            caller = inspect.stack(0)[1]
            _log(self._logger.info, format_string, caller, args, kwargs)

    def warning(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.WARNING):
            caller = inspect.stack(0)[1]
            _log(self._logger.warning, format_string, caller, args, kwargs)

    def error(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.ERROR):
            caller = inspect.stack(0)[1]
            _log(self._logger.error, format_string, caller, args, kwargs)


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            caller: Optional[inspect.FrameInfo] = getattr(obj, 'caller', None)
            if caller is None:
                # records that did not come through a TreeSetLogger
                path_name = obj.pathname
                module = obj.module
                line_number = obj.lineno
                function_name = obj.funcName
            else:
                path_name = caller.filename
                module = caller.frame.f_globals['__name__']
                line_number = caller.lineno
                function_name = caller.function
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                'level_name': obj.levelname,
                'path_name': path_name,
                'file_name': pathlib.Path(path_name).name,
                'module': module,
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': line_number,
                'function_name': function_name,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
                'thread': obj.thread,
                'thread_name': obj.threadName,
                'process_name': obj.processName,
                'process': obj.process,
            }
        return super().default(obj)


class JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)


_configured_handlers: List[logging.Handler] = []


def configure(
    verbose: bool = False, log_file: Optional[pathlib.Path] = None
) -> logging.Logger:
    """Attach handlers to the `treeset` logger.

    verbose sends debug logs to stderr. log_file receives JSON logs through a
    rotating file handler. Handlers attached by an earlier call are removed
    and closed first, so calling this again replaces the configuration."""

    handlers: List[logging.Handler] = []
    if log_file is not None:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1048576, backupCount=1
        )
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)
    if verbose:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(
            logging.Formatter('%(levelname)s:%(name)s:%(message)s')
        )
        handlers.append(stream_handler)

    logger = logging.getLogger('treeset')
    for handler in _configured_handlers:
        logger.removeHandler(handler)
        handler.close()
    _configured_handlers[:] = handlers
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if handlers else logging.NOTSET)
    return logger


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: List[object],
    kwargs: Dict[str, object],
) -> None:
    exc_info = None
    if 'exc_info' in kwargs:
        exc_info = kwargs['exc_info']
        del kwargs['exc_info']
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self, format_string: str, args: List[object], kwargs: Dict[str, object]
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
