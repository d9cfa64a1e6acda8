"""Injectable logging for the execution package.

Components in this package never log through a global. They accept any
object with the six leveled methods below (``debug``, ``info``, ``warn``,
``error``, ``verbose``, ``silly``) plus a ``name`` attribute, and wrap it
with :func:`wrap_logger` so every line carries the library tag.

By default the standard :mod:`logging` module is the sink, through
:data:`DEFAULT_LOGGER`.
"""

import logging
from typing import Any, Optional, Protocol

from .config import get_settings
from .exceptions import ConfigurationError

LIBRARY_NAME = "execution"

LOG_LEVELS = ("debug", "info", "warn", "error", "verbose", "silly")

# Extra stdlib levels for the two methods logging has no equivalent for
VERBOSE = 15
SILLY = 5

logging.addLevelName(VERBOSE, "VERBOSE")
logging.addLevelName(SILLY, "SILLY")


class Logger(Protocol):
    """Interface of a logger accepted by this package."""

    name: str

    def debug(self, message: str, *args: Any) -> None: ...

    def info(self, message: str, *args: Any) -> None: ...

    def warn(self, message: str, *args: Any) -> None: ...

    def error(self, message: str, *args: Any) -> None: ...

    def verbose(self, message: str, *args: Any) -> None: ...

    def silly(self, message: str, *args: Any) -> None: ...


class StdlibLogger:
    """Logger backed by a :class:`logging.Logger`.

    Auxiliary values passed after the message are appended to it, since
    the stdlib logger would otherwise treat them as ``%`` format arguments.
    """

    def __init__(self, name: str = "default", logger: Optional[logging.Logger] = None):
        self.name = name
        self._logger = logger or logging.getLogger(LIBRARY_NAME)

    def _log(self, level: int, message: str, args: tuple) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if args:
            message = f"{message} " + " ".join(str(arg) for arg in args)
        self._logger.log(level, message)

    def debug(self, message: str, *args: Any) -> None:
        self._log(logging.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._log(logging.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._log(logging.WARNING, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._log(logging.ERROR, message, args)

    def verbose(self, message: str, *args: Any) -> None:
        self._log(VERBOSE, message, args)

    def silly(self, message: str, *args: Any) -> None:
        self._log(SILLY, message, args)


class NoopLogger:
    """Logger that discards everything."""

    name = "noop"

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass

    def verbose(self, message: str, *args: Any) -> None:
        pass

    def silly(self, message: str, *args: Any) -> None:
        pass


class WrappedLogger:
    """Logger that prefixes every message with the library and module tags."""

    def __init__(self, logger: Logger, name: Optional[str] = None):
        self.name = "wrapped"
        self._logger = logger
        if name:
            self._prefix = f"[{LIBRARY_NAME}][{name}] "
        else:
            self._prefix = f"[{LIBRARY_NAME}] "

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(self._prefix + message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(self._prefix + message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._logger.warn(self._prefix + message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(self._prefix + message, *args)

    def verbose(self, message: str, *args: Any) -> None:
        self._logger.verbose(self._prefix + message, *args)

    def silly(self, message: str, *args: Any) -> None:
        self._logger.silly(self._prefix + message, *args)


def wrap_logger(logger: Logger, name: Optional[str] = None) -> WrappedLogger:
    """Wrap a logger so its output is tagged with this library's name.

    Args:
        logger: Any object implementing the six leveled methods.
        name: Optional module tag, rendered as ``[execution][name]``.

    Returns:
        A WrappedLogger forwarding to ``logger``.

    Raises:
        ConfigurationError: If ``logger`` is missing any required method.
    """
    missing = [level for level in LOG_LEVELS if not callable(getattr(logger, level, None))]
    if missing:
        raise ConfigurationError(
            f"Logger is missing required methods: {', '.join(missing)}"
        )
    return WrappedLogger(logger, name)


def _create_default_logger() -> StdlibLogger:
    stdlib_logger = logging.getLogger(LIBRARY_NAME)
    level = get_settings().log_level
    if level is not None:
        stdlib_logger.setLevel(level)
    return StdlibLogger("default", stdlib_logger)


DEFAULT_LOGGER = _create_default_logger()

NOOP_LOGGER = NoopLogger()
